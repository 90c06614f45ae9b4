# Area: Board
"""
tictac_cube._board.enums — Board value types
============================================

Players, occupants and the game status value shared by the board,
the lifecycle state machine and snapshots.
"""

from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple


class Player(Enum):
    """The two players. Values match the integer encoding of BoardSnapshot.to_dict() (0 = empty)."""
    ONE = 1
    TWO = 2

    def opponent(self) -> "Player":
        return Player.TWO if self is Player.ONE else Player.ONE

    @property
    def label(self) -> str:
        return f"Player {self.value}"


# None means the cell is empty
Occupant = Optional[Player]

Pattern = Tuple[int, int, int]


class StatusKind(Enum):
    """
    Kinds of game status.

    State transitions:
    IN_PROGRESS -> WON (on a fully owned pattern)
    IN_PROGRESS -> DRAW (on a full board without a winner)
    WON and DRAW are terminal.
    """
    IN_PROGRESS = "in_progress"
    WON = "won"
    DRAW = "draw"


@dataclass(frozen=True)
class GameStatus:
    """
    Immutable game status.

    Attributes:
        kind: IN_PROGRESS, WON or DRAW
        winner: The winning player when kind is WON
        pattern: The completed line when kind is WON
    """

    kind: StatusKind
    winner: Optional[Player] = None
    pattern: Optional[Pattern] = None

    @classmethod
    def won(cls, player: Player, pattern: Pattern) -> "GameStatus":
        return cls(StatusKind.WON, winner=player, pattern=tuple(pattern))

    @property
    def is_terminal(self) -> bool:
        return self.kind is not StatusKind.IN_PROGRESS

    @property
    def is_draw(self) -> bool:
        return self.kind is StatusKind.DRAW

    def describe(self) -> str:
        if self.kind is StatusKind.WON:
            return f"{self.winner.label} wins on {list(self.pattern)}"
        if self.kind is StatusKind.DRAW:
            return "Draw"
        return "In progress"


IN_PROGRESS = GameStatus(StatusKind.IN_PROGRESS)
DRAW = GameStatus(StatusKind.DRAW)
