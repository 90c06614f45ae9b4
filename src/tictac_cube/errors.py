"""
tictac_cube.errors — Custom exception classes
==============================================

Defines the exception hierarchy for rejected game actions.
Each exception stores the context it was raised with so front ends
can decide what feedback to show, and can render a structured block
for logs.
"""

from __future__ import annotations
from enum import Enum
from typing import Any, Dict, Optional


class MoveRejection(Enum):
    """Why a claim or activation was refused."""
    OUT_OF_RANGE  = "out_of_range"   # Index outside 0..26
    OCCUPIED      = "occupied"       # Cell already owned
    GAME_OVER     = "game_over"      # Status is already terminal
    GATED_CELL    = "gated_cell"     # Centre cell must go through activation
    NOT_YOUR_TURN = "not_your_turn"  # Activation by the waiting player


class TicTacCubeError(Exception):
    """Base exception for all tictac_cube errors."""

    def context(self) -> Dict[str, Any]:
        return {}

    def format_error_log(self) -> str:
        return _format_error_block(type(self).__name__, str(self), self.context())


class OutOfRange(TicTacCubeError, IndexError):
    """Raised when a cell index is outside the 27-cell grid."""

    def __init__(self, index: Any):
        self.index = index
        super().__init__(f"Cell index {index!r} is out of range (expected 0-26)")

    def context(self) -> Dict[str, Any]:
        return {"index": self.index}


class IllegalMove(TicTacCubeError):
    """Raised when a claim or activation breaks the rules."""

    def __init__(
        self,
        reason: MoveRejection,
        index: Optional[int] = None,
        player: Optional[Any] = None,
        detail: Optional[str] = None,
    ):
        self.reason = reason
        self.index = index
        self.player = player
        message = detail or f"Illegal move: {reason.value}"
        if index is not None and detail is None:
            message += f" (cell {index})"
        super().__init__(message)

    def context(self) -> Dict[str, Any]:
        return {
            "reason": self.reason.value,
            "index": self.index,
            "player": getattr(self.player, "name", self.player),
        }


class GatedCellBusy(TicTacCubeError):
    """Raised when the gated cell already has a pending claim."""

    def __init__(self, index: int, pending_player: Any):
        self.index = index
        self.pending_player = pending_player
        super().__init__(
            f"Cell {index} already has a pending claim by "
            f"{getattr(pending_player, 'name', pending_player)}"
        )

    def context(self) -> Dict[str, Any]:
        return {
            "index": self.index,
            "pending_player": getattr(self.pending_player, "name", self.pending_player),
        }


class ConfigError(TicTacCubeError):
    """Raised when engine configuration fails validation."""

    def __init__(self, message: str, errors: Optional[list] = None):
        self.errors = errors or []
        super().__init__(message)

    def context(self) -> Dict[str, Any]:
        return {"errors": [str(e) for e in self.errors]}


def _format_error_block(error_type: str, message: str, context: Dict[str, Any]) -> str:
    """Format a structured error block for logs."""
    lines = [
        "",
        "=" * 64,
        f" {error_type}",
        "=" * 64,
        f" Message:      {message}",
    ]
    for key, value in context.items():
        lines.append(f" {key + ':':<13} {value}")
    lines.append("=" * 64)
    return "\n".join(lines)
