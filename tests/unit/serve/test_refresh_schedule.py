"""Unit tests for refresh scheduling."""

from __future__ import annotations

from datetime import datetime, time
from zoneinfo import ZoneInfo

from serve.refresh_schedule import next_run_at, seconds_until_next_run


def test_next_run_at_is_later_today_when_time_not_reached() -> None:
    """A scheduled time still ahead runs the same day."""
    now = datetime(2024, 5, 1, 9, 30)

    assert next_run_at(now, time(12, 0)) == datetime(2024, 5, 1, 12, 0)


def test_next_run_at_rolls_to_tomorrow_at_exact_time() -> None:
    """A scheduled time equal to now runs the next day."""
    now = datetime(2024, 5, 1, 0, 0)

    assert next_run_at(now, time(0, 0)) == datetime(2024, 5, 2, 0, 0)


def test_seconds_until_next_run_counts_to_midnight() -> None:
    """Midnight refreshes wait until the next day starts."""
    now = datetime(2024, 12, 31, 23, 0)

    assert seconds_until_next_run(now, time(0, 0)) == 3600.0


def test_next_run_at_keeps_wall_clock_across_dst_start() -> None:
    """A midnight run stays at midnight after clocks spring forward."""
    zone = ZoneInfo("America/New_York")
    now = datetime(2026, 3, 8, 0, 0, 1, tzinfo=zone)

    run_at = next_run_at(now, time(0, 0))

    assert run_at == datetime(2026, 3, 9, 0, 0, tzinfo=zone)
    assert (run_at.hour, run_at.minute) == (0, 0)


def test_seconds_until_next_run_spans_short_dst_day() -> None:
    """The day clocks spring forward is one hour shorter."""
    now = datetime(2026, 3, 8, 0, 0, 1, tzinfo=ZoneInfo("America/New_York"))

    assert seconds_until_next_run(now, time(0, 0)) == 23 * 3600 - 1


def test_seconds_until_next_run_spans_long_dst_day() -> None:
    """The day clocks fall back is one hour longer."""
    now = datetime(2026, 11, 1, 0, 0, tzinfo=ZoneInfo("America/New_York"))

    assert seconds_until_next_run(now, time(0, 0)) == 25 * 3600
