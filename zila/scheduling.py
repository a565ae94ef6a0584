"""Blocking helpers that call a function on time events."""

from __future__ import annotations

import time
from datetime import timedelta
from typing import Callable, NoReturn, TypeVar

from zila.durations import (
    duration_to_next_day,
    duration_to_next_hour,
    duration_to_next_minute,
    duration_to_next_second,
)

__all__ = [
    "call_every_day",
    "call_every_hour",
    "call_every_minute",
    "call_every_second",
    "set_timeout",
    "set_interval",
]

T = TypeVar("T")
Duration = timedelta | float | int


def _to_seconds(duration: Duration) -> float:
    seconds = (
        duration.total_seconds()
        if isinstance(duration, timedelta)
        else float(duration)
    )
    if seconds < 0:
        raise ValueError(f"duration must not be negative: {duration!r}")
    return seconds


def _call_on_boundary(
    callback: Callable[[], object], until_next: Callable[[], timedelta]
) -> NoReturn:
    while True:
        time.sleep(until_next().total_seconds())
        callback()


def call_every_day(callback: Callable[[], object]) -> NoReturn:
    """Call ``callback`` at every local midnight, forever."""
    _call_on_boundary(callback, duration_to_next_day)


def call_every_hour(callback: Callable[[], object]) -> NoReturn:
    """Call ``callback`` at the start of every hour, forever."""
    _call_on_boundary(callback, duration_to_next_hour)


def call_every_minute(callback: Callable[[], object]) -> NoReturn:
    """Call ``callback`` at the start of every minute, forever."""
    _call_on_boundary(callback, duration_to_next_minute)


def call_every_second(callback: Callable[[], object]) -> NoReturn:
    """Call ``callback`` at the start of every second, forever."""
    _call_on_boundary(callback, duration_to_next_second)


def set_timeout(callback: Callable[[], T], duration: Duration) -> T:
    """Wait ``duration`` (a timedelta or seconds), then call ``callback`` once."""
    time.sleep(_to_seconds(duration))
    return callback()


def set_interval(callback: Callable[[], object], duration: Duration) -> NoReturn:
    """Call ``callback`` after every ``duration`` (a timedelta or seconds), forever."""
    seconds = _to_seconds(duration)
    while True:
        time.sleep(seconds)
        callback()