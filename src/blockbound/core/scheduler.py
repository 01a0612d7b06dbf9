"""Single-threaded deferred task queue driven by a virtual clock."""
from __future__ import annotations

import heapq
import itertools
from dataclasses import dataclass, field
from typing import Callable, List

from blockbound.core.logging import get_logger

logger = get_logger(__name__)

TaskCallback = Callable[[], None]


@dataclass(order=True, slots=True)
class ScheduledTask:
    """A callback due at ``due_at`` on the scheduler clock."""

    due_at: float
    sequence: int
    callback: TaskCallback = field(compare=False)
    label: str = field(default="", compare=False)


class TurnScheduler:
    """
    Cooperative event queue for deferred game steps.

    Nothing runs on its own: the owner moves the clock with ``advance`` (or
    drains everything with ``run_pending``) and due callbacks execute in
    due-time order, ties broken by scheduling order. Callbacks may schedule
    further tasks; those run in the same drain if they are already due.
    """

    def __init__(self) -> None:
        self._now = 0.0
        self._queue: List[ScheduledTask] = []
        self._counter = itertools.count()

    @property
    def now(self) -> float:
        return self._now

    @property
    def pending(self) -> int:
        return len(self._queue)

    def schedule(self, delay: float, callback: TaskCallback, *, label: str = "") -> ScheduledTask:
        """Queue ``callback`` to run ``delay`` time units from now."""
        if delay < 0:
            raise ValueError("Delay must be non-negative.")
        task = ScheduledTask(
            due_at=self._now + delay,
            sequence=next(self._counter),
            callback=callback,
            label=label,
        )
        heapq.heappush(self._queue, task)
        logger.debug(f"Scheduled '{label}' at t={task.due_at:.2f}")
        return task

    def cancel(self, task: ScheduledTask) -> bool:
        """Drop a queued task; returns False if it already ran or was dropped."""
        remaining = [queued for queued in self._queue if queued is not task]
        if len(remaining) == len(self._queue):
            return False
        heapq.heapify(remaining)
        self._queue = remaining
        logger.debug(f"Cancelled '{task.label}'")
        return True

    def advance(self, elapsed: float) -> int:
        """Move the clock forward and run every task that became due."""
        if elapsed < 0:
            raise ValueError("Elapsed time must be non-negative.")
        target = self._now + elapsed
        ran = 0
        while self._queue and self._queue[0].due_at <= target:
            task = heapq.heappop(self._queue)
            self._now = max(self._now, task.due_at)
            task.callback()
            ran += 1
        self._now = target
        return ran

    def run_pending(self) -> int:
        """Run all queued tasks regardless of their due time."""
        ran = 0
        while self._queue:
            task = heapq.heappop(self._queue)
            self._now = max(self._now, task.due_at)
            task.callback()
            ran += 1
        return ran

    def clear(self) -> None:
        """Drop every queued task without running it."""
        self._queue.clear()
