"""Time remaining until the next whole day, hour, minute or second."""

from __future__ import annotations

from datetime import datetime, timedelta

__all__ = [
    "duration_to_next_day",
    "duration_to_next_hour",
    "duration_to_next_minute",
    "duration_to_next_second",
]

_ZERO = timedelta(0)


def _resolve(now: datetime | None) -> datetime:
    return datetime.now() if now is None else now


def _remaining(period: timedelta, elapsed: timedelta) -> timedelta:
    """Time left in ``period`` once ``elapsed`` of it has passed; zero on a boundary."""
    if elapsed == _ZERO:
        return _ZERO
    return period - elapsed


def duration_to_next_day(now: datetime | None = None) -> timedelta:
    """Return the time until the next local midnight (00:00:00.000000).

    Exactly at midnight the result is zero.
    """
    now = _resolve(now)
    elapsed = timedelta(
        hours=now.hour,
        minutes=now.minute,
        seconds=now.second,
        microseconds=now.microsecond,
    )
    return _remaining(timedelta(days=1), elapsed)


def duration_to_next_hour(now: datetime | None = None) -> timedelta:
    """Return the time until the next whole hour (__:00:00.000000).

    Exactly on the hour the result is zero.
    """
    now = _resolve(now)
    elapsed = timedelta(
        minutes=now.minute, seconds=now.second, microseconds=now.microsecond
    )
    return _remaining(timedelta(hours=1), elapsed)


def duration_to_next_minute(now: datetime | None = None) -> timedelta:
    """Return the time until the next whole minute (__:__:00.000000).

    Exactly on the minute the result is zero.
    """
    now = _resolve(now)
    elapsed = timedelta(seconds=now.second, microseconds=now.microsecond)
    return _remaining(timedelta(minutes=1), elapsed)


def duration_to_next_second(now: datetime | None = None) -> timedelta:
    """Return the time until the next whole second (__:__:__.000000).

    Exactly on the second the result is zero.
    """
    now = _resolve(now)
    elapsed = timedelta(microseconds=now.microsecond)
    return _remaining(timedelta(seconds=1), elapsed)