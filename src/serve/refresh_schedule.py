"""Refresh scheduling helpers.

Schedules are wall-clock times of day. Naive datetimes are local time;
aware datetimes should carry a real zone so offsets follow DST.
"""

from __future__ import annotations

from datetime import datetime, time, timedelta, timezone


def next_run_at(now: datetime, at: time) -> datetime:
    """Return the next occurrence of a wall-clock time strictly after ``now``.

    Args:
        now: Current time, naive local or aware in a named zone.
        at: Scheduled time of day.

    Returns:
        Next scheduled datetime in the same zone as ``now``.
    """
    candidate = datetime.combine(now.date(), at, tzinfo=now.tzinfo)
    if candidate <= now:
        candidate = datetime.combine(now.date() + timedelta(days=1), at, tzinfo=now.tzinfo)
    return candidate


def seconds_until_next_run(now: datetime, at: time) -> float:
    """Return the elapsed seconds until the next scheduled run."""
    # Same-zone subtraction ignores offsets; compare absolute instants.
    delay = next_run_at(now, at).astimezone(timezone.utc) - now.astimezone(timezone.utc)
    return max(delay.total_seconds(), 0.0)
