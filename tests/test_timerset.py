import logging
from dataclasses import replace

import pytest

from timekeeper.config import config
from timekeeper.errors import TimerAlreadyRunningError
from timekeeper.schemas import TrackerSummary
from timekeeper.sources import ManualSource, RealTime
from timekeeper.timerset import TimerSet
from timekeeper.trackers import SummaryTracker


def test_switching_keys_charges_both() -> None:
    timers = TimerSet(source=RealTime())

    timers.start(1)
    timers.start(2)
    timers.stop()

    assert timers.num_nanoseconds(1) > 0
    assert timers.num_nanoseconds(2) > 0
    assert timers.num_nanoseconds(3) is None


def test_fresh_set_knows_no_keys(manual_timer_set: TimerSet) -> None:
    assert not manual_timer_set.is_running()
    assert manual_timer_set.current_key is None
    assert len(manual_timer_set) == 0
    assert manual_timer_set.get_stats("parse") is None
    assert manual_timer_set.num_milliseconds("parse") is None


def test_started_key_begins_at_zero(manual_timer_set: TimerSet) -> None:
    manual_timer_set.start("parse")

    assert manual_timer_set.num_nanoseconds("parse") == 0
    assert "parse" in manual_timer_set
    assert manual_timer_set.keys() == ["parse"]


def test_switch_hands_over_at_single_reading(
    manual_timer_set: TimerSet, manual_source: ManualSource
) -> None:
    manual_source.set_time(100)
    manual_timer_set.start("a")
    manual_source.set_time(130)
    manual_timer_set.start("b")
    manual_source.set_time(180)
    manual_timer_set.start("a")
    manual_source.set_time(185)
    manual_timer_set.stop()

    assert manual_timer_set.num_nanoseconds("a") == 35
    assert manual_timer_set.num_nanoseconds("b") == 50
    assert manual_timer_set.num_nanoseconds("a") + manual_timer_set.num_nanoseconds("b") == 85


def test_only_active_key_gets_partial(manual_timer_set: TimerSet, manual_source: ManualSource) -> None:
    manual_timer_set.start("a")
    manual_source.advance(10)
    manual_timer_set.start("b")
    manual_source.advance(7)

    assert manual_timer_set.current_key == "b"
    assert manual_timer_set.num_nanoseconds("a") == 10
    assert manual_timer_set.num_nanoseconds("b") == 7
    assert manual_timer_set.get_stats("b") == 7
    assert manual_timer_set.num_nanoseconds("b") == 7
    assert manual_timer_set.is_running()


def test_stop_is_idempotent(manual_timer_set: TimerSet, manual_source: ManualSource) -> None:
    manual_timer_set.stop()
    manual_timer_set.start("io")
    manual_source.advance(40)
    manual_timer_set.stop()
    manual_source.advance(1_000)
    manual_timer_set.stop()

    assert not manual_timer_set.is_running()
    assert manual_timer_set.num_nanoseconds("io") == 40


def test_restarting_active_key_is_a_usage_error(
    manual_timer_set: TimerSet, manual_source: ManualSource
) -> None:
    manual_timer_set.start("io")
    manual_source.advance(5)

    with pytest.raises(TimerAlreadyRunningError):
        manual_timer_set.start("io")

    assert manual_timer_set.current_key == "io"
    assert manual_timer_set.num_nanoseconds("io") == 5


def test_restart_after_stop_accumulates(manual_timer_set: TimerSet, manual_source: ManualSource) -> None:
    for _ in range(3):
        manual_timer_set.start("io")
        manual_source.advance(5)
        manual_timer_set.stop()
        manual_source.advance(100)

    assert manual_timer_set.num_nanoseconds("io") == 15


def test_unit_queries_truncate(manual_timer_set: TimerSet, manual_source: ManualSource) -> None:
    manual_timer_set.start("short")
    manual_source.advance(999)
    manual_timer_set.start("long")
    manual_source.advance(3_600_000_000_000 + 1_000)
    manual_timer_set.stop()

    assert manual_timer_set.num_microseconds("short") == 0
    assert manual_timer_set.num_microseconds("long") == 3_600_000_001
    assert manual_timer_set.num_milliseconds("long") == 3_600_000
    assert manual_timer_set.num_seconds("long") == 3_600
    assert manual_timer_set.num_minutes("long") == 60
    assert manual_timer_set.num_hours("long") == 1
    assert manual_timer_set.num_hours("missing") is None


def test_custom_tracker_factory(manual_source: ManualSource) -> None:
    timers = TimerSet(tracker_factory=SummaryTracker, source=manual_source)
    timers.start("query")
    manual_source.advance(4)
    timers.stop()
    timers.start("query")
    manual_source.advance(6)

    assert timers.get_stats("query") == TrackerSummary(count=2, total_ns=10, min_ns=4, max_ns=6)
    timers.stop()
    assert timers.get_stats("query") == TrackerSummary(count=2, total_ns=10, min_ns=4, max_ns=6)


def test_track_resumes_previous_key(manual_timer_set: TimerSet, manual_source: ManualSource) -> None:
    manual_timer_set.start("request")
    manual_source.advance(10)
    with manual_timer_set.track("db"):
        manual_source.advance(30)
    manual_source.advance(5)

    assert manual_timer_set.current_key == "request"
    assert manual_timer_set.num_nanoseconds("request") == 15
    assert manual_timer_set.num_nanoseconds("db") == 30


def test_track_stops_when_nothing_was_running(
    manual_timer_set: TimerSet, manual_source: ManualSource
) -> None:
    with pytest.raises(RuntimeError):
        with manual_timer_set.track("render"):
            manual_source.advance(8)
            raise RuntimeError("render failed")

    assert not manual_timer_set.is_running()
    assert manual_timer_set.num_nanoseconds("render") == 8


def test_track_leaves_key_switched_inside_block(
    manual_timer_set: TimerSet, manual_source: ManualSource
) -> None:
    with manual_timer_set.track("a"):
        manual_source.advance(1)
        manual_timer_set.start("b")
        manual_source.advance(2)

    assert manual_timer_set.current_key == "b"
    assert manual_timer_set.num_nanoseconds("a") == 1
    assert manual_timer_set.num_nanoseconds("b") == 2


def test_snapshot_includes_running_key(manual_timer_set: TimerSet, manual_source: ManualSource) -> None:
    manual_timer_set.start("a")
    manual_source.advance(3)
    manual_timer_set.start("b")
    manual_source.advance(4)

    snapshot = manual_timer_set.snapshot()

    assert snapshot.as_dict() == {"a": 3, "b": 4}
    assert [entry.running for entry in snapshot.entries] == [False, True]
    assert snapshot.total_ns == 7
    assert manual_timer_set.num_nanoseconds("b") == 4


def test_key_switches_logged_when_enabled(
    monkeypatch: pytest.MonkeyPatch,
    manual_timer_set: TimerSet,
    manual_source: ManualSource,
    caplog: pytest.LogCaptureFixture,
) -> None:
    monkeypatch.setattr("timekeeper.timerset.config", replace(config, log_switches=True))

    with caplog.at_level(logging.DEBUG, logger="timekeeper.timerset"):
        manual_timer_set.start("a")
        manual_source.advance(12)
        manual_timer_set.start("b")

    assert [record.getMessage() for record in caplog.records] == [
        "switching from key='a' to key='b' after 12 ns"
    ]
