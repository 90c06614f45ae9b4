# Area: Engine
"""
tictac_cube._engine.lifecycle — Game lifecycle state machine
============================================================

Evaluates every committed claim: a fully owned line through the
claimed cell wins, otherwise a full board is a draw, otherwise the
turn passes to the claimant's opponent. Publishes GAME_ENDED or
TURN_CHANGED accordingly. A delayed centre commit can land while the
opponent is already to move; the turn then stays put and no
TURN_CHANGED is published.
"""

from __future__ import annotations

import logging
from enum import Enum
from typing import Callable, List, Optional

from .events import EventHub, GameEvent
from .turn_manager import TurnManager
from .._board.board_state import BoardState
from .._board.enums import DRAW, GameStatus, Player, StatusKind
from .._board.patterns import DEFAULT_CATALOG, WinPatternCatalog
from ..errors import IllegalMove, MoveRejection

logger = logging.getLogger("tictac_cube.lifecycle")


class LifecycleEvent(Enum):
    """Events that move the game out of IN_PROGRESS."""
    LINE_COMPLETED = "LINE_COMPLETED"
    BOARD_FILLED = "BOARD_FILLED"


# Valid status transitions: {current_kind: {event: next_kind}}
TRANSITIONS = {
    StatusKind.IN_PROGRESS: {
        LifecycleEvent.LINE_COMPLETED: StatusKind.WON,
        LifecycleEvent.BOARD_FILLED: StatusKind.DRAW,
    },
    StatusKind.WON: {},
    StatusKind.DRAW: {},
}


class GameLifecycle:
    """
    Owns status changes for one game session.

    The board stores the status; this class is the only writer.
    """

    def __init__(
        self,
        board: BoardState,
        turns: TurnManager,
        events: EventHub,
        catalog: WinPatternCatalog = DEFAULT_CATALOG,
    ) -> None:
        self.board = board
        self.turns = turns
        self.events = events
        self.catalog = catalog
        self._end_hooks: List[Callable[[GameStatus], None]] = []

    @property
    def status(self) -> GameStatus:
        return self.board.status

    def add_end_hook(self, hook: Callable[[GameStatus], None]) -> None:
        """Run hook once the status is terminal, before GAME_ENDED is published."""
        self._end_hooks.append(hook)

    def can_transition(self, event: LifecycleEvent) -> bool:
        return event in TRANSITIONS.get(self.status.kind, {})

    def ensure_in_progress(self, index: Optional[int] = None, player: Optional[Player] = None) -> None:
        """Raise IllegalMove if the game is already over."""
        if self.status.is_terminal:
            raise IllegalMove(
                MoveRejection.GAME_OVER, index=index, player=player,
                detail=f"Game is already over ({self.status.describe()})",
            )

    def complete_claim(self, index: int, player: Player) -> GameStatus:
        """
        Evaluate a claim the board has just recorded.

        Only lines through ``index`` can have been completed by it.

        Returns:
            The status after evaluation
        """
        for pattern in self.catalog.patterns_containing(index):
            if self.board.owns_all(pattern, player):
                return self._end(LifecycleEvent.LINE_COMPLETED, GameStatus.won(player, pattern))

        if self.board.is_full():
            return self._end(LifecycleEvent.BOARD_FILLED, DRAW)

        previous = self.turns.current
        next_player = self.turns.pass_turn(player)
        if next_player is not previous:
            self.events.emit(GameEvent.TURN_CHANGED, next_player)
        return self.status

    def _end(self, event: LifecycleEvent, status: GameStatus) -> GameStatus:
        if not self.can_transition(event):
            raise ValueError(
                f"Invalid transition: {event.value} from {self.status.kind.value}"
            )
        expected = TRANSITIONS[self.status.kind][event]
        if status.kind is not expected:
            raise ValueError(f"{event.value} must lead to {expected.value}, got {status.kind.value}")
        logger.info("Game over: %s", status.describe())
        self.board.set_status(status)
        for hook in self._end_hooks:
            hook(status)
        self.events.emit(GameEvent.GAME_ENDED, status)
        return status

    def reset(self) -> None:
        self.board.reset()
        self.turns.reset()
        logger.info("New game, %s to move", self.turns.current.label)
