from __future__ import annotations

import time
from typing import Callable

Clock = Callable[[], float]

# Resolved once per process; springs without an injected clock share it.
_DEFAULT_CLOCK: Clock = time.perf_counter


def default_clock() -> Clock:
    return _DEFAULT_CLOCK


class ManualClock:
    """
    Deterministic time source for tests, replays and offline sampling.

    Call it like any clock function; time only moves through `advance` / `set`.
    """

    def __init__(self, *, start: float = 0.0) -> None:
        self._now = float(start)

    def __call__(self) -> float:
        return self._now

    @property
    def now(self) -> float:
        return self._now

    def advance(self, dt: float) -> float:
        step = float(dt)
        if step < 0.0:
            raise ValueError(f"ManualClock cannot advance by a negative delta ({step}).")
        self._now += step
        return self._now

    def set(self, t: float) -> None:
        self._now = float(t)
