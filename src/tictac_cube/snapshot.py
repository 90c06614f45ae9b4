"""
tictac_cube.snapshot — Read-only board view
===========================================

Builds immutable snapshots of a session for rendering.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Tuple

from ._board.enums import GameStatus, Occupant, Player
from .types import SnapshotDict, StatusDict


@dataclass(frozen=True)
class BoardSnapshot:
    """
    Attributes:
        board: 27 occupants, index = x*9 + y*3 + z
        current_player: Player to move
        status: Current GameStatus
        pending_gated_player: Player with a pending centre claim, if any
    """

    board: Tuple[Occupant, ...]
    current_player: Player
    status: GameStatus
    pending_gated_player: Optional[Player] = None

    def occupant_at(self, index: int) -> Occupant:
        return self.board[index]

    def to_dict(self) -> SnapshotDict:
        return {
            "board": [cell.value if cell is not None else 0 for cell in self.board],
            "current_player": self.current_player.value,
            "status": _status_dict(self.status),
            "pending_gated_player": (
                self.pending_gated_player.value if self.pending_gated_player else None
            ),
        }


def _status_dict(status: GameStatus) -> StatusDict:
    return {
        "kind": status.kind.value,
        "winner": status.winner.value if status.winner else None,
        "pattern": list(status.pattern) if status.pattern else None,
    }
