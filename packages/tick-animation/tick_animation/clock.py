"""Millisecond clocks sampled on demand by durations."""

import time
from typing import Callable

Clock = Callable[[], int]


def monotonic_ms() -> int:
    return time.monotonic_ns() // 1_000_000


class ManualClock:
    """Clock that only moves when told to. Used by fixed-step loops and tests."""

    def __init__(self, start_ms: int = 0) -> None:
        self._now_ms = start_ms

    def __call__(self) -> int:
        return self._now_ms

    @property
    def now_ms(self) -> int:
        return self._now_ms

    def advance(self, ms: int) -> int:
        if ms < 0:
            raise ValueError("cannot advance a clock backwards")
        self._now_ms += ms
        return self._now_ms

    def reset(self, now_ms: int = 0) -> None:
        self._now_ms = now_ms
