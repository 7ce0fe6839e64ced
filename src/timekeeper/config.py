"""Runtime configuration and environment helpers for timekeeper."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass

SOURCE_KINDS = frozenset({"real", "process", "thread"})

_DEFAULT_SOURCE = "real"
_DEFAULT_REPORT_LEVEL = logging.INFO


@dataclass(frozen=True)
class TimekeeperConfig:
    """Immutable library configuration."""

    default_source: str
    log_switches: bool
    report_level: int


def _parse_bool(value: str | None, fallback: bool) -> bool:
    if value is None:
        return fallback
    return value.lower() in {"1", "true", "yes", "on"}


def _parse_source(value: str | None, fallback: str) -> str:
    if value is None:
        return fallback
    kind = value.strip().lower()
    return kind if kind in SOURCE_KINDS else fallback


def _parse_level(value: str | None, fallback: int) -> int:
    if value is None:
        return fallback
    if value.isdigit():
        return int(value)
    level = logging.getLevelName(value.strip().upper())
    return level if isinstance(level, int) else fallback


def load_config() -> TimekeeperConfig:
    """Load configuration from environment variables, applying defaults."""

    default_source = _parse_source(os.getenv("TIMEKEEPER_SOURCE"), _DEFAULT_SOURCE)
    log_switches = _parse_bool(os.getenv("TIMEKEEPER_LOG_SWITCHES"), False)
    report_level = _parse_level(os.getenv("TIMEKEEPER_LOG_LEVEL"), _DEFAULT_REPORT_LEVEL)

    return TimekeeperConfig(
        default_source=default_source,
        log_switches=log_switches,
        report_level=report_level,
    )


config = load_config()
"""Singleton config loaded at import time for convenience."""
