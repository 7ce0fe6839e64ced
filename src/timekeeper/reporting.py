"""Log summaries of timer set totals."""

from __future__ import annotations

import logging

from .config import config
from .schemas import TimerSetSnapshot
from .timerset import TimerSet

_logger = logging.getLogger("timekeeper.reporting")


def log_timings(
    timer_set: TimerSet,
    *,
    logger: logging.Logger | None = None,
    level: int | None = None,
) -> TimerSetSnapshot:
    """Log one line per key of ``timer_set`` and return the snapshot that was logged."""

    log = logger or _logger
    level = config.report_level if level is None else level
    snapshot = timer_set.snapshot()
    for entry in snapshot.entries:
        log.log(
            level,
            "key=%s elapsed_ms=%.3f running=%s",
            entry.key,
            entry.milliseconds,
            entry.running,
        )
    log.log(level, "keys=%d total_ms=%.3f", len(snapshot.entries), snapshot.total_ns / 1_000_000)
    return snapshot
