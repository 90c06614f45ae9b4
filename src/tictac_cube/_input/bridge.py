# Area: Input
"""
tictac_cube._input.bridge — Pointer input to cell claims
========================================================

Glue between the input layer, the rendering layer's picking step and
the engine: pointer samples go through the gesture classifier, each
click is resolved to a cell index by the renderer, and hits are
claimed. Rejected claims are logged and reported as None, which front
ends treat as "ignore the click".
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Callable, Optional

from .gesture import PRIMARY_BUTTON, PointerGestureClassifier, Position
from ..errors import IllegalMove

if TYPE_CHECKING:
    from ..engine import GameEngine
    from ..snapshot import BoardSnapshot

logger = logging.getLogger("tictac_cube.input")

# Rendering-layer picking: screen position -> cell index, or None for a miss
CellPicker = Callable[[Position], Optional[int]]


class ClickToClaimBridge:
    """Feeds pointer samples to a classifier and claims clicked cells."""

    def __init__(
        self,
        engine: "GameEngine",
        resolve_cell: CellPicker,
        classifier: Optional[PointerGestureClassifier] = None,
    ) -> None:
        self.engine = engine
        self.resolve_cell = resolve_cell
        self.classifier = classifier or PointerGestureClassifier(
            drag_threshold=engine.config.drag_threshold,
            max_click_duration=engine.config.click_max_duration_ms,
        )

    def pointer_down(self, position: Position, time: float, button: int = PRIMARY_BUTTON) -> None:
        self.classifier.press(position, time, button)

    def pointer_move(self, position: Position, time: float) -> None:
        self.classifier.move(position, time)

    def pointer_up(self, position: Position, time: float,
                   button: int = PRIMARY_BUTTON) -> Optional["BoardSnapshot"]:
        """Finish a gesture; returns the new snapshot if a cell was claimed."""
        click = self.classifier.release(position, time, button)
        if click is None:
            return None
        return self.handle_click(click.position)

    def handle_click(self, position: Position) -> Optional["BoardSnapshot"]:
        index = self.resolve_cell(position)
        if index is None:
            logger.debug("Click at %s hit no cell", position)
            return None
        try:
            return self.engine.claim_cell(index)
        except IllegalMove as e:
            logger.info("Click on cell %s ignored: %s", index, e)
            return None
