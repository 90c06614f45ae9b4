# Area: Board
"""
Board layer - cells, players and winning lines.

This package handles:
- Player and status value types
- The 49-line win pattern catalog
- Cell occupancy and terminal status
"""

from .enums import Player, Occupant, Pattern, StatusKind, GameStatus, IN_PROGRESS, DRAW
from .patterns import (
    WinPatternCatalog,
    PatternKind,
    DEFAULT_CATALOG,
    GRID_SIZE,
    CELL_COUNT,
    CENTER_INDEX,
    index_of,
    coords_of,
    check_index,
)
from .board_state import BoardState

__all__ = [
    "Player",
    "Occupant",
    "Pattern",
    "StatusKind",
    "GameStatus",
    "IN_PROGRESS",
    "DRAW",
    "WinPatternCatalog",
    "PatternKind",
    "DEFAULT_CATALOG",
    "GRID_SIZE",
    "CELL_COUNT",
    "CENTER_INDEX",
    "index_of",
    "coords_of",
    "check_index",
    "BoardState",
]
