"""Keyed timers sharing one source, with at most one key running at a time."""

from __future__ import annotations

import logging
from collections.abc import Callable, Hashable, Iterator
from contextlib import contextmanager
from datetime import UTC, datetime
from typing import Any

from .config import config
from .errors import TimerAlreadyRunningError
from .schemas import TimerSetSnapshot, TimingEntry
from .sources import Source, build_source
from .trackers import SimpleTracker, Tracker
from .units import (
    NANOS_PER_HOUR,
    NANOS_PER_MICROSECOND,
    NANOS_PER_MILLISECOND,
    NANOS_PER_MINUTE,
    NANOS_PER_SECOND,
)

logger = logging.getLogger("timekeeper.timerset")


class TimerSet:
    """A collection of timers of which at most one runs at any given time.

    Starting a key while another is running hands over at a single source
    reading: the old key is charged up to that instant and the new key starts
    from it, so no time is lost or counted twice.
    """

    def __init__(
        self,
        tracker_factory: Callable[[], Tracker[Any]] = SimpleTracker,
        source: Source | None = None,
    ) -> None:
        self._tracker_factory = tracker_factory
        self._source = source if source is not None else build_source(config.default_source)
        self._trackers: dict[Hashable, Tracker[Any]] = {}
        self._current: tuple[Hashable, int] | None = None

    @property
    def source(self) -> Source:
        return self._source

    @property
    def current_key(self) -> Hashable | None:
        return self._current[0] if self._current is not None else None

    def start(self, key: Hashable) -> None:
        """Start ``key``, stopping the currently running key (if any)."""

        now = self._source.get_time()
        if self._current is not None:
            active, started_at = self._current
            if active == key:
                raise TimerAlreadyRunningError(f"cannot start running timer {key!r}")
            self._trackers[active].record(now - started_at)
            if config.log_switches:
                logger.debug("switching from key=%r to key=%r after %d ns", active, key, now - started_at)

        if key not in self._trackers:
            self._trackers[key] = self._tracker_factory()
        self._current = (key, now)

    def stop(self) -> None:
        """Stop the running key without starting another. No-op when idle."""

        if self._current is None:
            return
        active, started_at = self._current
        self._trackers[active].record(self._source.get_time() - started_at)
        self._current = None

    def is_running(self) -> bool:
        return self._current is not None

    def keys(self) -> list[Hashable]:
        """Every key that has been started at least once."""

        return list(self._trackers)

    def __contains__(self, key: object) -> bool:
        return key in self._trackers

    def __len__(self) -> int:
        return len(self._trackers)

    def _is_active(self, key: Hashable) -> bool:
        return self._current is not None and self._current[0] == key

    def _partial(self, key: Hashable, now: int | None = None) -> int | None:
        if self._current is None or self._current[0] != key:
            return None
        if now is None:
            now = self._source.get_time()
        return now - self._current[1]

    def get_stats(self, key: Hashable) -> Any | None:
        tracker = self._trackers.get(key)
        if tracker is None:
            return None
        return tracker.get_stats(self._partial(key))

    def num_nanoseconds(self, key: Hashable) -> int | None:
        """Returns the elapsed time in nanoseconds, or ``None`` for an unseen key."""

        tracker = self._trackers.get(key)
        if tracker is None:
            return None
        return tracker.get(self._partial(key))

    def _convert(self, key: Hashable, factor: int) -> int | None:
        nanoseconds = self.num_nanoseconds(key)
        return None if nanoseconds is None else nanoseconds // factor

    def num_microseconds(self, key: Hashable) -> int | None:
        return self._convert(key, NANOS_PER_MICROSECOND)

    def num_milliseconds(self, key: Hashable) -> int | None:
        return self._convert(key, NANOS_PER_MILLISECOND)

    def num_seconds(self, key: Hashable) -> int | None:
        return self._convert(key, NANOS_PER_SECOND)

    def num_minutes(self, key: Hashable) -> int | None:
        return self._convert(key, NANOS_PER_MINUTE)

    def num_hours(self, key: Hashable) -> int | None:
        return self._convert(key, NANOS_PER_HOUR)

    @contextmanager
    def track(self, key: Hashable) -> Iterator[None]:
        """Run ``key`` for the duration of the block.

        On exit the key that was running before the block is resumed, or the
        set is stopped if nothing was. If the block switched to another key
        itself, that key is left running.
        """

        resume = self._current
        self.start(key)
        try:
            yield
        finally:
            if self._is_active(key):
                if resume is not None:
                    self.start(resume[0])
                else:
                    self.stop()

    def snapshot(self) -> TimerSetSnapshot:
        """Return the current total of every key, running key included."""

        now = self._source.get_time()
        entries = []
        for key, tracker in self._trackers.items():
            entries.append(
                TimingEntry(
                    key=key,
                    nanoseconds=tracker.get(self._partial(key, now)),
                    running=self._is_active(key),
                )
            )
        return TimerSetSnapshot(taken_at=datetime.now(UTC), entries=entries)

    def __repr__(self) -> str:
        return f"TimerSet(keys={len(self._trackers)}, current={self.current_key!r})"
