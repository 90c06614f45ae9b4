# Area: Engine
"""
tictac_cube._engine.events — Observer registry
==============================================

Front ends register callbacks for game events. Callbacks run
synchronously, in registration order, on the thread that caused the
event. Exceptions raised by a listener propagate to the caller.
"""

from __future__ import annotations

import logging
from enum import Enum
from typing import Any, Callable, Dict, List

logger = logging.getLogger("tictac_cube.events")


class GameEvent(Enum):
    """Events published by the engine and their payloads."""
    TURN_CHANGED    = "turn_changed"     # Player now to move
    GAME_ENDED      = "game_ended"       # Terminal GameStatus
    GATED_PENDING   = "gated_pending"    # ClaimRequest just activated
    GATED_COMMITTED = "gated_committed"  # ClaimRequest just committed
    GATED_CANCELLED = "gated_cancelled"  # ClaimRequest just cancelled
    GAME_RESET      = "game_reset"       # BoardSnapshot after reset


Listener = Callable[[Any], None]


class EventHub:
    """Per-engine listener lists, one per GameEvent."""

    def __init__(self) -> None:
        self._listeners: Dict[GameEvent, List[Listener]] = {e: [] for e in GameEvent}

    def subscribe(self, event: GameEvent, listener: Listener) -> Callable[[], None]:
        """Register a listener. Returns a function that unregisters it."""
        self._listeners[event].append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners[event]:
                self._listeners[event].remove(listener)

        return unsubscribe

    def emit(self, event: GameEvent, payload: Any) -> None:
        logger.debug("Event %s: %s", event.value, payload)
        for listener in list(self._listeners[event]):
            listener(payload)

    def listener_count(self, event: GameEvent) -> int:
        return len(self._listeners[event])
