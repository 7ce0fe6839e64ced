"""Pydantic models for statistics handed back to callers."""

from __future__ import annotations

from collections.abc import Hashable
from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field, computed_field


class TrackerSummary(BaseModel):
    """Count, sum, and extremes of the intervals a tracker has seen."""

    model_config = ConfigDict(frozen=True)

    count: int = Field(default=0, ge=0, description="Number of recorded intervals.")
    total_ns: int = Field(default=0, ge=0, description="Sum of all intervals in nanoseconds.")
    min_ns: int | None = Field(default=None, ge=0, description="Shortest interval, if any.")
    max_ns: int | None = Field(default=None, ge=0, description="Longest interval, if any.")

    @computed_field  # type: ignore[prop-decorator]
    @property
    def mean_ns(self) -> float:
        return self.total_ns / self.count if self.count else 0.0


class TimingEntry(BaseModel):
    """Elapsed time of a single timer set key."""

    key: Hashable
    nanoseconds: int = Field(..., ge=0)
    running: bool = False

    @property
    def milliseconds(self) -> float:
        return self.nanoseconds / 1_000_000


class TimerSetSnapshot(BaseModel):
    """Point-in-time view of every key in a timer set."""

    taken_at: datetime
    entries: list[TimingEntry] = Field(default_factory=list)

    @property
    def total_ns(self) -> int:
        return sum(entry.nanoseconds for entry in self.entries)

    def as_dict(self) -> dict[Hashable, int]:
        """Return a ``key -> nanoseconds`` mapping."""

        return {entry.key: entry.nanoseconds for entry in self.entries}
