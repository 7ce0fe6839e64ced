from __future__ import annotations

from collections.abc import Callable

import pytest

from timekeeper.sources import ManualSource
from timekeeper.timer import Timer
from timekeeper.timerset import TimerSet


def _busy_work(n: int = 200_000) -> int:
    total = 0
    for value in range(n):
        total += value * value
    return total


@pytest.fixture()
def busy_work() -> Callable[[int], int]:
    """Burns a little CPU so CPU-time clocks have something to measure."""

    return _busy_work


@pytest.fixture()
def manual_source() -> ManualSource:
    return ManualSource()


@pytest.fixture()
def manual_timer(manual_source: ManualSource) -> Timer:
    return Timer(source=manual_source)


@pytest.fixture()
def manual_timer_set(manual_source: ManualSource) -> TimerSet:
    return TimerSet(source=manual_source)
