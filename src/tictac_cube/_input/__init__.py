# Area: Input
"""
Input layer - pointer gestures and click-to-claim glue.
"""

from .gesture import (
    PointerGestureClassifier,
    PointerGesture,
    GestureState,
    Click,
    Position,
    PRIMARY_BUTTON,
    DRAG_THRESHOLD,
    MAX_CLICK_DURATION_MS,
)
from .bridge import ClickToClaimBridge, CellPicker

__all__ = [
    "PointerGestureClassifier",
    "PointerGesture",
    "GestureState",
    "Click",
    "Position",
    "PRIMARY_BUTTON",
    "DRAG_THRESHOLD",
    "MAX_CLICK_DURATION_MS",
    "ClickToClaimBridge",
    "CellPicker",
]
