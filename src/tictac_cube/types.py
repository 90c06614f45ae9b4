"""
tictac_cube.types — TypedDict schemas for front-end payloads
============================================================

Plain-dict shapes produced by ``BoardSnapshot.to_dict()`` for front
ends that prefer JSON-like data to engine objects.

    >>> SnapshotDict.__annotations__.keys()
    dict_keys(['board', 'current_player', 'status', 'pending_gated_player'])
"""

from typing import List, Optional, TypedDict


class StatusDict(TypedDict):
    """Game status.

    Fields
    ------
    kind : str
        "in_progress", "won" or "draw".
    winner : Optional[int]
        1 or 2 when kind is "won", else None.
    pattern : Optional[List[int]]
        The three cell indices of the winning line, else None.
    """
    kind: str
    winner: Optional[int]
    pattern: Optional[List[int]]


class SnapshotDict(TypedDict):
    """Read-only board view.

    Fields
    ------
    board : List[int]
        27 entries, 0 for empty, 1 or 2 for the owning player.
        Index = x*9 + y*3 + z.
    current_player : int
        Player to move (1 or 2).
    status : StatusDict
        Current game status.
    pending_gated_player : Optional[int]
        Player with a pending centre-cell claim, else None.
    """
    board: List[int]
    current_player: int
    status: StatusDict
    pending_gated_player: Optional[int]


__all__ = ["StatusDict", "SnapshotDict"]
