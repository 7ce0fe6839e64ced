"""Timekeeper: track the time used by different parts of a program."""

from .errors import (
    ConfigurationError,
    TimekeeperError,
    TimerAlreadyRunningError,
    TimerNotRunningError,
    TimerUsageError,
)
from .reporting import log_timings
from .schemas import TimerSetSnapshot, TimingEntry, TrackerSummary
from .sources import ManualSource, ProcessTime, RealTime, Source, ThreadTime, build_source
from .timer import Timer
from .timerset import TimerSet
from .trackers import SimpleTracker, SummaryTracker, Tracker

__all__ = [
    "ConfigurationError",
    "ManualSource",
    "ProcessTime",
    "RealTime",
    "SimpleTracker",
    "Source",
    "SummaryTracker",
    "ThreadTime",
    "TimekeeperError",
    "Timer",
    "TimerAlreadyRunningError",
    "TimerNotRunningError",
    "TimerSet",
    "TimerSetSnapshot",
    "TimerUsageError",
    "TimingEntry",
    "Tracker",
    "TrackerSummary",
    "build_source",
    "log_timings",
]
