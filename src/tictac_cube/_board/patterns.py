# Area: Board
"""
tictac_cube._board.patterns — Winning line catalog
==================================================

Builds the 49 straight lines of the 3x3x3 grid once and indexes them
by cell, so a win check only looks at the lines through the cell that
was just claimed (at most 13, for the centre) instead of all 49.

Cell indices follow ``index = x*9 + y*3 + z``.
"""

from __future__ import annotations

from enum import Enum
from itertools import product
from typing import Dict, Iterator, List, Tuple

from .enums import Pattern
from ..errors import OutOfRange

GRID_SIZE = 3
CELL_COUNT = GRID_SIZE ** 3
CENTER_INDEX = 13


class PatternKind(Enum):
    """Line families, by how many axes the line moves along."""
    AXIS = 1              # 27 lines, 9 per axis
    FACE_DIAGONAL = 2     # 18 lines, 6 per plane family
    SPACE_DIAGONAL = 3    # 4 lines through the centre


def index_of(x: int, y: int, z: int) -> int:
    """Convert grid coordinates to a cell index."""
    for value in (x, y, z):
        if not 0 <= value < GRID_SIZE:
            raise OutOfRange((x, y, z))
    return x * GRID_SIZE * GRID_SIZE + y * GRID_SIZE + z


def coords_of(index: int) -> Tuple[int, int, int]:
    """Convert a cell index to (x, y, z)."""
    check_index(index)
    x, rest = divmod(index, GRID_SIZE * GRID_SIZE)
    y, z = divmod(rest, GRID_SIZE)
    return x, y, z


def check_index(index) -> int:
    """Return index unchanged, or raise OutOfRange."""
    if isinstance(index, bool) or not isinstance(index, int):
        raise OutOfRange(index)
    if not 0 <= index < CELL_COUNT:
        raise OutOfRange(index)
    return index


def _line_directions() -> List[Tuple[int, int, int]]:
    """The 13 line directions, one per +/- pair (first non-zero step positive)."""
    directions = []
    for step in product((-1, 0, 1), repeat=3):
        nonzero = [s for s in step if s != 0]
        if nonzero and nonzero[0] > 0:
            directions.append(step)
    # Axis lines first, then face diagonals, then space diagonals
    directions.sort(key=lambda d: (sum(1 for s in d if s), [-s for s in d]))
    return directions


def _build_lines() -> List[Tuple[Pattern, PatternKind]]:
    lines = []
    for dx, dy, dz in _line_directions():
        kind = PatternKind(sum(1 for s in (dx, dy, dz) if s))
        for x, y, z in product(range(GRID_SIZE), repeat=3):
            end = (x + 2 * dx, y + 2 * dy, z + 2 * dz)
            if not all(0 <= c < GRID_SIZE for c in end):
                continue
            cells = tuple(
                index_of(x + k * dx, y + k * dy, z + k * dz) for k in range(GRID_SIZE)
            )
            lines.append((cells, kind))
    return lines


class WinPatternCatalog:
    """
    Immutable table of all winning lines.

    Patterns are ascending index triples. The catalog is validated on
    construction: 49 unique lines of 3 distinct in-range cells, covering
    every cell.
    """

    EXPECTED_COUNT = 49

    def __init__(self) -> None:
        lines = _build_lines()
        self._patterns: Tuple[Pattern, ...] = tuple(cells for cells, _ in lines)
        self._kinds: Dict[Pattern, PatternKind] = dict(lines)

        by_cell: Dict[int, List[Pattern]] = {i: [] for i in range(CELL_COUNT)}
        for pattern in self._patterns:
            for index in pattern:
                by_cell[index].append(pattern)
        self._by_cell: Dict[int, Tuple[Pattern, ...]] = {
            index: tuple(patterns) for index, patterns in by_cell.items()
        }
        self._validate()

    def _validate(self) -> None:
        if len(set(self._patterns)) != self.EXPECTED_COUNT:
            raise ValueError(
                f"Expected {self.EXPECTED_COUNT} unique patterns, "
                f"built {len(set(self._patterns))}"
            )
        for pattern in self._patterns:
            if len(set(pattern)) != GRID_SIZE:
                raise ValueError(f"Pattern {pattern} repeats a cell")
        if any(not patterns for patterns in self._by_cell.values()):
            raise ValueError("Some cell is not on any pattern")

    def patterns_containing(self, index: int) -> Tuple[Pattern, ...]:
        """Return every pattern that passes through the given cell."""
        return self._by_cell[check_index(index)]

    def kind_of(self, pattern: Pattern) -> PatternKind:
        return self._kinds[tuple(pattern)]

    def all(self) -> Tuple[Pattern, ...]:
        return self._patterns

    def __len__(self) -> int:
        return len(self._patterns)

    def __iter__(self) -> Iterator[Pattern]:
        return iter(self._patterns)

    def __contains__(self, pattern) -> bool:
        return tuple(pattern) in self._kinds


# Built once per process; the catalog never changes
DEFAULT_CATALOG = WinPatternCatalog()
