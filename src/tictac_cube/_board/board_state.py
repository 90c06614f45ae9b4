# Area: Board
"""
tictac_cube._board.board_state — Cell occupancy
===============================================

Owns the 27-cell occupancy array and the current game status.
Occupancy only ever moves from empty to a player. The board does not
decide wins or draws; GameLifecycle evaluates each claim and records
the resulting status here.
"""

from __future__ import annotations

import logging
from typing import List, Tuple

from .enums import GameStatus, IN_PROGRESS, Occupant, Pattern, Player
from .patterns import CELL_COUNT, check_index
from ..errors import IllegalMove, MoveRejection, OutOfRange

logger = logging.getLogger("tictac_cube.board")


class BoardState:
    """27-cell board plus terminal status."""

    def __init__(self) -> None:
        self._cells: List[Occupant] = [None] * CELL_COUNT
        self._status: GameStatus = IN_PROGRESS

    # ── Queries ──────────────────────────────────────────────

    @property
    def status(self) -> GameStatus:
        return self._status

    @property
    def cells(self) -> Tuple[Occupant, ...]:
        return tuple(self._cells)

    def occupant_at(self, index: int) -> Occupant:
        return self._cells[check_index(index)]

    def is_full(self) -> bool:
        return all(cell is not None for cell in self._cells)

    def empty_cells(self) -> List[int]:
        return [i for i, cell in enumerate(self._cells) if cell is None]

    def owns_all(self, pattern: Pattern, player: Player) -> bool:
        return all(self._cells[i] is player for i in pattern)

    # ── Mutation ─────────────────────────────────────────────

    def claim(self, index: int, player: Player, allow_after_end: bool = False) -> GameStatus:
        """
        Give an empty cell to a player.

        Args:
            index: Cell index 0-26
            player: The claiming player
            allow_after_end: Record the occupant even if the game is over.
                Only used for a gated commit under the "commit" policy.

        Returns:
            The current status, unchanged

        Raises:
            IllegalMove: Index out of range, cell occupied, or game over
        """
        try:
            check_index(index)
        except OutOfRange as e:
            raise IllegalMove(MoveRejection.OUT_OF_RANGE, index=index, player=player) from e
        if self._status.is_terminal and not allow_after_end:
            raise IllegalMove(MoveRejection.GAME_OVER, index=index, player=player)
        if self._cells[index] is not None:
            raise IllegalMove(MoveRejection.OCCUPIED, index=index, player=player)

        self._cells[index] = player
        logger.debug("Cell %d -> %s", index, player.label)
        return self._status

    def set_status(self, status: GameStatus) -> None:
        """Record a new status. A terminal status cannot be replaced."""
        if self._status.is_terminal and status != self._status:
            raise ValueError(
                f"Status is terminal ({self._status.kind.value}); "
                f"cannot change to {status.kind.value}"
            )
        self._status = status

    def reset(self) -> None:
        self._cells = [None] * CELL_COUNT
        self._status = IN_PROGRESS
        logger.debug("Board cleared")
