# Area: Input
"""
tictac_cube._input.gesture — Click vs. drag disambiguation
==========================================================

A press followed by a release is a click only if the pointer never
travelled more than the drag threshold and the release came before
the click time limit. Anything else is view manipulation (orbit,
rotate) and produces no click. Only the primary button is tracked.

The classifier knows nothing about the board: it reports a screen
position, and the rendering layer maps that position to a cell.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple

logger = logging.getLogger("tictac_cube.gesture")

Position = Tuple[float, float]

PRIMARY_BUTTON = 0
DRAG_THRESHOLD = 5.0
MAX_CLICK_DURATION_MS = 200.0


class GestureState(Enum):
    """Per-cycle gesture state. DRAGGING is final until release."""
    IDLE = "idle"
    PRESSED = "pressed"
    DRAGGING = "dragging"


@dataclass(frozen=True)
class Click:
    """A disambiguated click at the release position."""
    position: Position
    time: float


@dataclass
class PointerGesture:
    """State of one press-release cycle."""
    start_position: Position
    start_time: float
    dragging: bool = False


class PointerGestureClassifier:
    """Turns pointer down/move/up samples into at most one Click per cycle."""

    def __init__(
        self,
        drag_threshold: float = DRAG_THRESHOLD,
        max_click_duration: float = MAX_CLICK_DURATION_MS,
    ) -> None:
        self.drag_threshold = drag_threshold
        self.max_click_duration = max_click_duration
        self._gesture: Optional[PointerGesture] = None

    @property
    def state(self) -> GestureState:
        if self._gesture is None:
            return GestureState.IDLE
        return GestureState.DRAGGING if self._gesture.dragging else GestureState.PRESSED

    def press(self, position: Position, time: float, button: int = PRIMARY_BUTTON) -> None:
        if button != PRIMARY_BUTTON:
            return
        self._gesture = PointerGesture(start_position=tuple(position), start_time=time)

    def move(self, position: Position, time: float) -> None:
        gesture = self._gesture
        if gesture is None or gesture.dragging:
            return
        if _distance(gesture.start_position, position) > self.drag_threshold:
            gesture.dragging = True
            logger.debug("Drag started at t=%s", time)

    def release(self, position: Position, time: float, button: int = PRIMARY_BUTTON) -> Optional[Click]:
        """
        End the cycle.

        Returns:
            A Click if the cycle was short and never dragged, else None
        """
        if button != PRIMARY_BUTTON:
            return None
        gesture, self._gesture = self._gesture, None
        if gesture is None:
            return None

        elapsed = time - gesture.start_time
        if gesture.dragging or elapsed >= self.max_click_duration:
            return None
        return Click(position=tuple(position), time=time)

    def cancel(self) -> None:
        """Drop the current cycle, e.g. when the pointer leaves the view."""
        self._gesture = None


def _distance(a: Position, b: Position) -> float:
    return math.hypot(b[0] - a[0], b[1] - a[1])
