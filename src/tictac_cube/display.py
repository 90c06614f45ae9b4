"""
tictac_cube.display — Text rendering of a board snapshot
========================================================

Draws the cube as three 3x3 layers side by side (one per x), rows
are y and columns are z. Player 1 is red, player 2 is blue, as in
the 3D front end.
"""

from __future__ import annotations

from typing import List

from ._board.enums import Occupant, Player
from ._board.patterns import CENTER_INDEX, GRID_SIZE, index_of
from .snapshot import BoardSnapshot

RED = "\033[31m"
BLUE = "\033[34m"
YELLOW = "\033[33m"
RESET = "\033[0m"

SYMBOLS = {Player.ONE: "R", Player.TWO: "B"}
COLORS = {Player.ONE: RED, Player.TWO: BLUE}


def cell_symbol(occupant: Occupant, color: bool = False) -> str:
    if occupant is None:
        return "."
    symbol = SYMBOLS[occupant]
    return f"{COLORS[occupant]}{symbol}{RESET}" if color else symbol


def render_board(snapshot: BoardSnapshot, color: bool = False) -> str:
    """Render the three layers plus a status line."""
    lines: List[str] = ["   ".join(f"x={x}  " for x in range(GRID_SIZE))]
    for y in range(GRID_SIZE):
        layers = []
        for x in range(GRID_SIZE):
            cells = []
            for z in range(GRID_SIZE):
                index = index_of(x, y, z)
                symbol = cell_symbol(snapshot.board[index], color)
                if (index == CENTER_INDEX and snapshot.board[index] is None
                        and snapshot.pending_gated_player is not None):
                    symbol = f"{YELLOW}*{RESET}" if color else "*"
                cells.append(symbol)
            layers.append(" ".join(cells))
        lines.append("   ".join(layers))
    lines.append(render_status(snapshot))
    return "\n".join(lines)


def render_status(snapshot: BoardSnapshot) -> str:
    status = snapshot.status
    if status.is_terminal:
        if status.is_draw:
            return "DRAW"
        return f"{status.winner.label.upper()} WINS! Line {list(status.pattern)}"
    text = f"Turn: {snapshot.current_player.label}"
    if snapshot.pending_gated_player is not None:
        text += f"  (centre pending for {snapshot.pending_gated_player.label})"
    return text


def render_index_guide() -> str:
    """Cell indices laid out like render_board()."""
    lines = []
    for y in range(GRID_SIZE):
        lines.append("   ".join(
            " ".join(f"{index_of(x, y, z):2d}" for z in range(GRID_SIZE))
            for x in range(GRID_SIZE)
        ))
    return "\n".join(lines)
