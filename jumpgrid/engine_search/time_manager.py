"""Time-budget utilities for search."""

from __future__ import annotations

import time
from typing import Callable


class TimeManager:
    def __init__(self, budget_ms: float, clock: Callable[[], float] = time.perf_counter):
        self._clock = clock
        self.started = clock()
        self.deadline = self.started + max(0.0, budget_ms) / 1000.0

    def time_left_ms(self) -> float:
        return max(0.0, (self.deadline - self._clock()) * 1000.0)

    def expired(self) -> bool:
        return self._clock() >= self.deadline

    def elapsed_ms(self) -> float:
        return (self._clock() - self.started) * 1000.0
