"""Single start/stop timer built from one source and one tracker."""

from __future__ import annotations

from datetime import timedelta
from types import TracebackType
from typing import Any

from .config import config
from .errors import TimerAlreadyRunningError, TimerNotRunningError
from .sources import Source, build_source
from .trackers import SimpleTracker, Tracker
from .units import (
    NANOS_PER_HOUR,
    NANOS_PER_MICROSECOND,
    NANOS_PER_MILLISECOND,
    NANOS_PER_MINUTE,
    NANOS_PER_SECOND,
)


class Timer:
    """Accumulates the time spent between matching ``start``/``stop`` calls.

    The timer is either idle or running. Queries work in both states: while
    running, the time since the last ``start`` is included without stopping
    the timer.
    """

    def __init__(self, tracker: Tracker[Any] | None = None, source: Source | None = None) -> None:
        self._tracker: Tracker[Any] = tracker if tracker is not None else SimpleTracker()
        self._source = source if source is not None else build_source(config.default_source)
        self._last: int | None = None

    @property
    def tracker(self) -> Tracker[Any]:
        return self._tracker

    @property
    def source(self) -> Source:
        return self._source

    def start(self) -> None:
        """Start timing. Raises ``TimerAlreadyRunningError`` if already running."""

        if self._last is not None:
            raise TimerAlreadyRunningError()
        self._last = self._source.get_time()

    def stop(self) -> None:
        """Stop timing. Raises ``TimerNotRunningError`` if the timer is idle."""

        if self._last is None:
            raise TimerNotRunningError()
        now = self._source.get_time()
        started_at, self._last = self._last, None
        self._tracker.record(now - started_at)

    def is_running(self) -> bool:
        return self._last is not None

    def _partial(self) -> int | None:
        if self._last is None:
            return None
        return self._source.get_time() - self._last

    def get_stats(self) -> Any:
        return self._tracker.get_stats(self._partial())

    def num_nanoseconds(self) -> int:
        """Returns the elapsed time in nanoseconds."""

        return self._tracker.get(self._partial())

    def num_microseconds(self) -> int:
        return self.num_nanoseconds() // NANOS_PER_MICROSECOND

    def num_milliseconds(self) -> int:
        return self.num_nanoseconds() // NANOS_PER_MILLISECOND

    def num_seconds(self) -> int:
        return self.num_nanoseconds() // NANOS_PER_SECOND

    def num_minutes(self) -> int:
        return self.num_nanoseconds() // NANOS_PER_MINUTE

    def num_hours(self) -> int:
        return self.num_nanoseconds() // NANOS_PER_HOUR

    def elapsed(self) -> timedelta:
        """Return the elapsed time as a ``timedelta``, truncated to microseconds.

        Raises ``OverflowError`` when the total does not fit in a ``timedelta``.
        """

        return timedelta(microseconds=self.num_microseconds())

    def __enter__(self) -> Timer:
        self.start()
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.stop()

    def __repr__(self) -> str:
        state = "running" if self.is_running() else "idle"
        return f"Timer({state}, tracker={self._tracker!r}, source={type(self._source).__name__})"
