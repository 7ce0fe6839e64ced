"""Exception types raised by timers and timer sets."""

from __future__ import annotations


class TimekeeperError(Exception):
    """Base class for every error raised by the library."""


class TimerUsageError(TimekeeperError, RuntimeError):
    """Raised when an operation is invalid for the timer's current state.

    Misuse surfaces as an exception instead of aborting the process so that a
    long-running service can catch it and carry on.
    """


class TimerAlreadyRunningError(TimerUsageError):
    """A timer (or timer set key) was started while already running."""

    def __init__(self, message: str = "cannot start a running timer") -> None:
        super().__init__(message)


class TimerNotRunningError(TimerUsageError):
    """A timer was stopped while idle."""

    def __init__(self, message: str = "cannot stop a paused timer") -> None:
        super().__init__(message)


class ConfigurationError(TimekeeperError, ValueError):
    """Raised for an unknown time source kind or similar bad settings."""
