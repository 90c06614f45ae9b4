# Area: Engine
"""
tictac_cube._engine.commit_scheduler — Deferred commit scheduling
=================================================================

Holds callbacks that should run once a delay has passed, such as the
gated centre-cell commit. Nothing runs in the background: the host
calls ``run_due()`` (through ``GameEngine.poll()``) from its own loop
or frame callback, and every task whose time has come fires then.

Every task is stamped with the scheduler generation at the time it
was scheduled. ``invalidate_all()`` bumps the generation, so a task
left over from before a reset can never fire.
"""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass, field
from itertools import count
from typing import Callable, Dict, List

logger = logging.getLogger("tictac_cube.scheduler")

Clock = Callable[[], float]


def monotonic_ms() -> float:
    """Default clock: monotonic time in milliseconds."""
    return time.monotonic() * 1000.0


@dataclass
class ScheduledTask:
    """A callback due at ``due_at`` (clock units, milliseconds by default)."""
    token: int
    generation: int
    due_at: float
    callback: Callable[[], None] = field(repr=False)
    label: str = ""


class CommitScheduler:
    """
    Cancellable, polled task list keyed by token.

    Attributes:
        generation: Bumped by invalidate_all(); tasks from older
            generations are dropped instead of fired
    """

    def __init__(self, clock: Clock = monotonic_ms) -> None:
        self._clock = clock
        self._tasks: Dict[int, ScheduledTask] = {}
        self._tokens = count(1)
        self.generation = 0

    def now(self) -> float:
        return self._clock()

    def schedule(self, delay: float, callback: Callable[[], None], label: str = "") -> ScheduledTask:
        """Schedule callback to run once ``delay`` has elapsed."""
        task = ScheduledTask(
            token=next(self._tokens),
            generation=self.generation,
            due_at=self._clock() + delay,
            callback=callback,
            label=label,
        )
        self._tasks[task.token] = task
        logger.debug("Scheduled %s (token %d) in %.1f", label or "task", task.token, delay)
        return task

    def cancel(self, task: ScheduledTask) -> bool:
        """Cancel a task. Returns False if it already ran or was cancelled."""
        if self._tasks.pop(task.token, None) is None:
            return False
        logger.debug("Cancelled %s (token %d)", task.label or "task", task.token)
        return True

    def is_scheduled(self, task: ScheduledTask) -> bool:
        return task.token in self._tasks

    def invalidate_all(self) -> None:
        """Drop every task and start a new generation."""
        self._tasks.clear()
        self.generation += 1
        logger.debug("Scheduler generation -> %d", self.generation)

    def pending_count(self) -> int:
        return len(self._tasks)

    def run_due(self) -> int:
        """
        Fire every task whose due time has passed.

        Tasks fire in due-time order. A task removed or invalidated by an
        earlier callback in the same pass is skipped.

        Returns:
            Number of callbacks fired
        """
        now = self._clock()
        due: List[ScheduledTask] = sorted(
            (t for t in self._tasks.values() if now >= t.due_at),
            key=lambda t: (t.due_at, t.token),
        )
        fired = 0
        for task in due:
            if self._tasks.pop(task.token, None) is None:
                continue
            if task.generation != self.generation:
                logger.debug("Dropped stale %s (token %d)", task.label or "task", task.token)
                continue
            task.callback()
            fired += 1
        return fired
