"""
tictac_cube.engine — Game session facade
========================================

One GameEngine instance is one game session: board, turns, the gated
centre-cell protocol and observers, with no module-level state.

Typical front-end wiring:

    engine = GameEngine()
    engine.on_turn_changed(lambda player: ...)
    engine.on_game_ended(lambda status: ...)
    bridge = engine.input_bridge(resolve_cell=renderer.pick)
    # pointer events -> bridge.pointer_down/move/up
    # every frame    -> engine.poll()

Rejected actions raise IllegalMove or GatedCellBusy and leave the
session unchanged.
"""

from __future__ import annotations

import logging
from typing import Any, Callable, Optional

from ._board.board_state import BoardState
from ._board.enums import GameStatus, Occupant, Player
from ._board.patterns import DEFAULT_CATALOG, WinPatternCatalog
from ._config import EngineConfig
from ._engine.claim_protocol import ClaimProtocol
from ._engine.claim_request import ClaimRequest
from ._engine.commit_scheduler import Clock, CommitScheduler, monotonic_ms
from ._engine.events import EventHub, GameEvent
from ._engine.lifecycle import GameLifecycle
from ._engine.turn_manager import TurnManager
from ._input.bridge import CellPicker, ClickToClaimBridge
from ._input.gesture import Position
from .snapshot import BoardSnapshot

logger = logging.getLogger("tictac_cube.engine")


class GameEngine:
    """
    In-memory API for the rendering/UI layer.

    Args:
        config: Engine settings; defaults to EngineConfig()
        clock: Time source in milliseconds, used for the gated commit delay
        catalog: Winning line catalog
    """

    def __init__(
        self,
        config: Optional[EngineConfig] = None,
        clock: Clock = monotonic_ms,
        catalog: WinPatternCatalog = DEFAULT_CATALOG,
    ) -> None:
        self.config = config or EngineConfig()
        self.catalog = catalog
        self.board = BoardState()
        self.turns = TurnManager(self.config.first_player)
        self.events = EventHub()
        self.scheduler = CommitScheduler(clock)
        self.lifecycle = GameLifecycle(self.board, self.turns, self.events, catalog)
        self.claims = ClaimProtocol(
            board=self.board,
            turns=self.turns,
            lifecycle=self.lifecycle,
            scheduler=self.scheduler,
            events=self.events,
            config=self.config,
        )

    # ── Actions ──────────────────────────────────────────────

    def claim_cell(self, index: int) -> BoardSnapshot:
        """Claim an ordinary cell for the player to move."""
        self.claims.claim(index)
        return self.snapshot()

    def activate_gated_cell(self, player: Optional[Player] = None) -> ClaimRequest:
        """Start the two-phase claim of the centre cell. Returns immediately."""
        return self.claims.activate(player)

    def reset_game(self) -> None:
        """Clear the board, cancel any pending centre claim, reset the turn."""
        self.claims.reset()
        self.lifecycle.reset()
        self.events.emit(GameEvent.GAME_RESET, self.snapshot())

    def poll(self) -> int:
        """Run due deferred commits. Call from the host loop or frame callback."""
        return self.scheduler.run_due()

    # ── Views ────────────────────────────────────────────────

    def snapshot(self) -> BoardSnapshot:
        pending = self.claims.pending_request
        return BoardSnapshot(
            board=self.board.cells,
            current_player=self.turns.current,
            status=self.board.status,
            pending_gated_player=pending.claiming_player if pending else None,
        )

    def occupant_at(self, index: int) -> Occupant:
        return self.board.occupant_at(index)

    @property
    def status(self) -> GameStatus:
        return self.board.status

    @property
    def current_player(self) -> Player:
        return self.turns.current

    @property
    def pending_request(self) -> Optional[ClaimRequest]:
        return self.claims.pending_request

    # ── Observers ────────────────────────────────────────────

    def on_turn_changed(self, callback: Callable[[Player], Any]) -> Callable[[], None]:
        """
        Called with the player now to move after each claim that passes the turn.

        Not called when a delayed centre commit lands while the opponent of
        the claimant is already to move: the turn stays where it is.
        """
        return self.events.subscribe(GameEvent.TURN_CHANGED, callback)

    def on_game_ended(self, callback: Callable[[GameStatus], Any]) -> Callable[[], None]:
        return self.events.subscribe(GameEvent.GAME_ENDED, callback)

    def on_gated_pending(self, callback: Callable[[ClaimRequest], Any]) -> Callable[[], None]:
        return self.events.subscribe(GameEvent.GATED_PENDING, callback)

    def on_gated_committed(self, callback: Callable[[ClaimRequest], Any]) -> Callable[[], None]:
        return self.events.subscribe(GameEvent.GATED_COMMITTED, callback)

    def on_gated_cancelled(self, callback: Callable[[ClaimRequest], Any]) -> Callable[[], None]:
        return self.events.subscribe(GameEvent.GATED_CANCELLED, callback)

    def on_game_reset(self, callback: Callable[[BoardSnapshot], Any]) -> Callable[[], None]:
        return self.events.subscribe(GameEvent.GAME_RESET, callback)

    # ── Pointer input ────────────────────────────────────────

    def input_bridge(self, resolve_cell: CellPicker) -> ClickToClaimBridge:
        """Build a pointer-to-claim bridge using this engine's gesture settings."""
        return ClickToClaimBridge(self, resolve_cell)

    def handle_click(self, position: Position, resolve_cell: CellPicker) -> Optional[BoardSnapshot]:
        """Claim the cell under an already-classified click, ignoring misses."""
        return ClickToClaimBridge(self, resolve_cell).handle_click(position)
