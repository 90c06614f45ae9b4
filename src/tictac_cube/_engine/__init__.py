# Area: Engine
"""
Engine layer - turns, claims and the game lifecycle.

This package handles:
- Turn tracking
- Ordinary and gated (two-phase) claims
- Deferred commit scheduling
- Win/draw evaluation and event publishing
"""

from .turn_manager import TurnManager
from .commit_scheduler import CommitScheduler, ScheduledTask, Clock, monotonic_ms
from .events import EventHub, GameEvent
from .claim_request import ClaimRequest, ClaimPhase
from .lifecycle import GameLifecycle, LifecycleEvent, TRANSITIONS
from .claim_protocol import ClaimProtocol, CANCEL_RESET, CANCEL_GAME_OVER

__all__ = [
    "TurnManager",
    "CommitScheduler",
    "ScheduledTask",
    "Clock",
    "monotonic_ms",
    "EventHub",
    "GameEvent",
    "ClaimRequest",
    "ClaimPhase",
    "GameLifecycle",
    "LifecycleEvent",
    "TRANSITIONS",
    "ClaimProtocol",
    "CANCEL_RESET",
    "CANCEL_GAME_OVER",
]
