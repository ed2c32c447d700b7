# dopareserve/sim/scheduler.py
from __future__ import annotations

import heapq
import itertools
from typing import Callable, List, Tuple

from dopareserve.core.config import SIMULATION_SPEED


class TickScheduler:
    """
    Qt-free stand-in for QTimer.singleShot: callbacks fire when enough ticks
    have elapsed. Used by the headless runner and the tests.
    """

    def __init__(self, speed: int = SIMULATION_SPEED):
        self.speed = int(speed)
        self.ticks = 0
        self._seq = itertools.count()
        self._queue: List[Tuple[int, int, Callable[[], None]]] = []

    def __call__(self, delay_ms: int, callback: Callable[[], None]) -> None:
        due = self.ticks + max(1, int(round(delay_ms * self.speed / 1000)))
        heapq.heappush(self._queue, (due, next(self._seq), callback))

    @property
    def pending(self) -> int:
        return len(self._queue)

    def advance(self, ticks: int = 1) -> int:
        """Move the clock forward; returns how many callbacks fired."""
        fired = 0
        self.ticks += int(ticks)
        while self._queue and self._queue[0][0] <= self.ticks:
            _, _, callback = heapq.heappop(self._queue)
            callback()
            fired += 1
        return fired
