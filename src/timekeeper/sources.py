"""Time sources supplying monotonic nanosecond readings."""

from __future__ import annotations

import time
from abc import ABC, abstractmethod

from .config import SOURCE_KINDS
from .errors import ConfigurationError


class Source(ABC):
    """Interface for clocks that feed timers.

    Readings are integer nanoseconds since an implementation-defined epoch and
    never decrease over the lifetime of the source. A clock that cannot be
    read raises; it never returns a placeholder value.
    """

    @abstractmethod
    def get_time(self) -> int:
        """Return the current reading in nanoseconds."""


class RealTime(Source):
    """Monotonic wall-clock time measured from the source's construction."""

    def __init__(self) -> None:
        self._start = time.perf_counter_ns()

    def get_time(self) -> int:
        return time.perf_counter_ns() - self._start


class ProcessTime(Source):
    """CPU time (user + system) consumed by the current process."""

    def get_time(self) -> int:
        return time.process_time_ns()


class ThreadTime(Source):
    """CPU time consumed by the calling thread.

    Only meaningful when every reading is taken from the same thread.
    """

    def get_time(self) -> int:
        return time.thread_time_ns()


class ManualSource(Source):
    """Deterministic source that only moves when told to."""

    def __init__(self, start_ns: int = 0) -> None:
        if start_ns < 0:
            raise ValueError("start_ns must be >= 0")
        self._now = start_ns

    def get_time(self) -> int:
        return self._now

    def advance(self, duration_ns: int) -> int:
        """Move the clock forward and return the new reading."""

        if duration_ns < 0:
            raise ValueError("ManualSource cannot move backwards")
        self._now += duration_ns
        return self._now

    def set_time(self, reading_ns: int) -> None:
        if reading_ns < self._now:
            raise ValueError(f"ManualSource cannot move backwards ({reading_ns} < {self._now})")
        self._now = reading_ns


_SOURCES: dict[str, type[Source]] = {
    "real": RealTime,
    "process": ProcessTime,
    "thread": ThreadTime,
}


def build_source(kind: str) -> Source:
    """Return a fresh source for ``kind`` (one of ``real``, ``process``, ``thread``)."""

    if kind not in SOURCE_KINDS:
        raise ConfigurationError(
            f"Unknown time source {kind!r}; expected one of {sorted(SOURCE_KINDS)}"
        )
    return _SOURCES[kind]()
