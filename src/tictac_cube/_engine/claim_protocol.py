# Area: Engine
"""
tictac_cube._engine.claim_protocol — Cell claim validation and commit
=====================================================================

Two ways to take a cell:

1. Ordinary cells are claimed synchronously by the player to move.
2. The centre cell is gated: ``activate()`` opens a PENDING ClaimRequest
   for the activating player, and the claim commits once the commit
   delay has passed. Until then only the centre cell is locked; other
   cells can still be claimed and turns keep advancing. The commit
   always uses the player captured at activation, and GATED_COMMITTED
   is published only after the commit has been evaluated.

Pending claim when the game ends
--------------------------------
If another move ends the game while a centre claim is PENDING, the
``pending_on_game_end`` setting decides what happens:

- ``"cancel"`` (default): the request is CANCELLED with reason
  ``game_over`` and GATED_CANCELLED is published before
  GAME_ENDED, so nothing is recorded after the game is over.
- ``"commit"``: the request still commits when its delay elapses. The
  occupant is recorded on the finished board, but the status is not
  re-evaluated and the turn does not change.
"""

from __future__ import annotations

import logging
from typing import Optional

from .claim_request import ClaimRequest
from .commit_scheduler import CommitScheduler, ScheduledTask
from .events import EventHub, GameEvent
from .lifecycle import GameLifecycle
from .turn_manager import TurnManager
from .._board.board_state import BoardState
from .._board.enums import GameStatus, Player
from .._board.patterns import CENTER_INDEX, check_index
from .._config import EngineConfig
from ..errors import GatedCellBusy, IllegalMove, MoveRejection, OutOfRange

logger = logging.getLogger("tictac_cube.claims")

CANCEL_RESET = "reset"
CANCEL_GAME_OVER = "game_over"


class ClaimProtocol:
    """Validates and commits claims, including the gated centre cell."""

    def __init__(
        self,
        board: BoardState,
        turns: TurnManager,
        lifecycle: GameLifecycle,
        scheduler: CommitScheduler,
        events: EventHub,
        config: EngineConfig,
        gated_index: int = CENTER_INDEX,
    ) -> None:
        self.board = board
        self.turns = turns
        self.lifecycle = lifecycle
        self.scheduler = scheduler
        self.events = events
        self.config = config
        self.gated_index = gated_index
        self._request: Optional[ClaimRequest] = None
        self._task: Optional[ScheduledTask] = None
        lifecycle.add_end_hook(self._on_game_over)

    @property
    def pending_request(self) -> Optional[ClaimRequest]:
        """The live gated request, or None."""
        if self._request is not None and self._request.is_pending:
            return self._request
        return None

    @property
    def commit_due_at(self) -> Optional[float]:
        """Clock reading at which the pending commit becomes due, or None."""
        if self.pending_request is None or self._task is None:
            return None
        return self._task.due_at

    @property
    def last_request(self) -> Optional[ClaimRequest]:
        """The most recent gated request in any phase."""
        return self._request

    # ── Ordinary cells ───────────────────────────────────────

    def claim(self, index: int) -> GameStatus:
        """
        Claim an ordinary cell for the player to move.

        Raises:
            IllegalMove: Out of range, game over, gated cell, or occupied
        """
        player = self.turns.current
        try:
            check_index(index)
        except OutOfRange as e:
            raise IllegalMove(MoveRejection.OUT_OF_RANGE, index=index, player=player) from e
        self.lifecycle.ensure_in_progress(index, player)
        if index == self.gated_index:
            raise IllegalMove(
                MoveRejection.GATED_CELL, index=index, player=player,
                detail=f"Cell {index} is gated; activate it instead of claiming it",
            )

        self.board.claim(index, player)
        logger.info("%s claimed cell %d", player.label, index)
        return self.lifecycle.complete_claim(index, player)

    # ── Gated cell ───────────────────────────────────────────

    def activate(self, player: Optional[Player] = None) -> ClaimRequest:
        """
        Open a PENDING claim on the gated cell.

        Args:
            player: Claiming player; defaults to the player to move

        Raises:
            IllegalMove: Game over, cell occupied, or not the player's turn
            GatedCellBusy: A request is already PENDING
        """
        if player is None:
            player = self.turns.current
        index = self.gated_index

        self.lifecycle.ensure_in_progress(index, player)
        pending = self.pending_request
        if pending is not None:
            raise GatedCellBusy(index, pending.claiming_player)
        if self.board.occupant_at(index) is not None:
            raise IllegalMove(MoveRejection.OCCUPIED, index=index, player=player)
        if self.config.gated_requires_turn and player is not self.turns.current:
            raise IllegalMove(
                MoveRejection.NOT_YOUR_TURN, index=index, player=player,
                detail=f"It is {self.turns.current.label}'s turn, not {player.label}'s",
            )

        request = ClaimRequest(
            target_index=index,
            claiming_player=player,
            started_at=self.scheduler.now(),
            generation=self.scheduler.generation,
        )
        self._request = request
        self._task = self.scheduler.schedule(
            self.config.commit_delay_ms,
            lambda: self._commit(request),
            label=f"gated commit {index}",
        )
        logger.info("%s activated cell %d (commit in %.0f ms)",
                    player.label, index, self.config.commit_delay_ms)
        self.events.emit(GameEvent.GATED_PENDING, request)
        return request

    def _commit(self, request: ClaimRequest) -> None:
        if (request is not self._request or not request.is_pending
                or request.generation != self.scheduler.generation):
            logger.debug("Ignoring stale commit for cell %d", request.target_index)
            return
        self._task = None
        player = request.claiming_player

        if self.board.status.is_terminal:
            # Only reachable with pending_on_game_end == "commit"
            request.commit()
            self.board.claim(request.target_index, player, allow_after_end=True)
            logger.info("%s committed cell %d after the game ended",
                        player.label, request.target_index)
            self.events.emit(GameEvent.GATED_COMMITTED, request)
            return

        request.commit()
        self.board.claim(request.target_index, player)
        logger.info("%s committed cell %d", player.label, request.target_index)
        self.lifecycle.complete_claim(request.target_index, player)
        self.events.emit(GameEvent.GATED_COMMITTED, request)

    def cancel_pending(self, reason: str) -> bool:
        """Cancel the live gated request. Returns False if none was pending."""
        request = self.pending_request
        if request is None:
            return False
        request.cancel(reason)
        if self._task is not None:
            self.scheduler.cancel(self._task)
            self._task = None
        logger.info("Pending claim on cell %d by %s cancelled (%s)",
                    request.target_index, request.claiming_player.label, reason)
        self.events.emit(GameEvent.GATED_CANCELLED, request)
        return True

    def _on_game_over(self, status: GameStatus) -> None:
        """Runs after the status turns terminal, before GAME_ENDED is published."""
        if self.config.pending_on_game_end == "cancel":
            self.cancel_pending(CANCEL_GAME_OVER)

    def reset(self) -> None:
        """Cancel any live request and invalidate every scheduled commit."""
        self.cancel_pending(CANCEL_RESET)
        self.scheduler.invalidate_all()
        self._request = None
        self._task = None
