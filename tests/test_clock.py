from __future__ import annotations

import time

import pytest

from springkit.clock import ManualClock, default_clock


def test_default_clock_is_shared_monotonic_source() -> None:
    clock = default_clock()
    assert clock is default_clock()
    assert clock is time.perf_counter
    a = clock()
    b = clock()
    assert b >= a


def test_manual_clock_only_moves_when_told() -> None:
    clock = ManualClock(start=2.0)
    assert clock() == 2.0
    assert clock() == 2.0

    assert clock.advance(0.5) == 2.5
    assert clock() == 2.5

    clock.set(10.0)
    assert clock.now == 10.0


def test_manual_clock_rejects_negative_advance() -> None:
    clock = ManualClock()
    with pytest.raises(ValueError):
        clock.advance(-0.1)
    assert clock() == 0.0
