"""Accumulators that turn recorded durations into statistics."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Generic, TypeVar

from .schemas import TrackerSummary

StatsT = TypeVar("StatsT")


class Tracker(ABC, Generic[StatsT]):
    """Interface for accumulators of elapsed time.

    ``partial_ns`` is the in-flight duration of a timer that is still running.
    Queries fold it in as though it had just been recorded but leave the
    accumulated state untouched, so a running timer can be sampled without
    stopping it.
    """

    @abstractmethod
    def record(self, duration_ns: int) -> None:
        """Add a completed, non-negative interval."""

    @abstractmethod
    def get_stats(self, partial_ns: int | None = None) -> StatsT:
        """Return accumulated statistics, including ``partial_ns`` if given."""

    @abstractmethod
    def get(self, partial_ns: int | None = None) -> int:
        """Return the total in nanoseconds, including ``partial_ns`` if given."""


class SimpleTracker(Tracker[int]):
    """Running sum of recorded nanoseconds."""

    def __init__(self) -> None:
        self.elapsed = 0

    def record(self, duration_ns: int) -> None:
        self.elapsed += duration_ns

    def get_stats(self, partial_ns: int | None = None) -> int:
        return self.elapsed + (partial_ns or 0)

    def get(self, partial_ns: int | None = None) -> int:
        return self.get_stats(partial_ns)

    def __repr__(self) -> str:
        return f"SimpleTracker(elapsed={self.elapsed})"


class SummaryTracker(Tracker[TrackerSummary]):
    """Keeps count, total, and min/max of the recorded intervals."""

    def __init__(self) -> None:
        self.count = 0
        self.total_ns = 0
        self.min_ns: int | None = None
        self.max_ns: int | None = None

    def record(self, duration_ns: int) -> None:
        self.count += 1
        self.total_ns += duration_ns
        self.min_ns = duration_ns if self.min_ns is None else min(self.min_ns, duration_ns)
        self.max_ns = duration_ns if self.max_ns is None else max(self.max_ns, duration_ns)

    def get_stats(self, partial_ns: int | None = None) -> TrackerSummary:
        if partial_ns is None:
            return TrackerSummary(
                count=self.count,
                total_ns=self.total_ns,
                min_ns=self.min_ns,
                max_ns=self.max_ns,
            )
        return TrackerSummary(
            count=self.count + 1,
            total_ns=self.total_ns + partial_ns,
            min_ns=partial_ns if self.min_ns is None else min(self.min_ns, partial_ns),
            max_ns=partial_ns if self.max_ns is None else max(self.max_ns, partial_ns),
        )

    def get(self, partial_ns: int | None = None) -> int:
        return self.total_ns + (partial_ns or 0)
