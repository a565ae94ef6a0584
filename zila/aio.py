"""Asynchronous helpers that call a function on time events."""

from __future__ import annotations

import asyncio
import inspect
from datetime import timedelta
from typing import Any, Awaitable, Callable, NoReturn, TypeVar, Union

from zila.durations import (
    duration_to_next_day,
    duration_to_next_hour,
    duration_to_next_minute,
    duration_to_next_second,
)
from zila.scheduling import Duration, _to_seconds

__all__ = [
    "call_every_day_async",
    "call_every_hour_async",
    "call_every_minute_async",
    "call_every_second_async",
    "set_timeout_async",
    "set_interval_async",
]

T = TypeVar("T")
AsyncCallback = Callable[[], Union[Awaitable[Any], Any]]


async def _invoke(callback: Callable[[], Any]) -> Any:
    """Call ``callback`` and await its result when it is awaitable."""
    result = callback()
    if inspect.isawaitable(result):
        return await result
    return result


async def _call_on_boundary(
    callback: AsyncCallback, until_next: Callable[[], timedelta]
) -> NoReturn:
    while True:
        await asyncio.sleep(until_next().total_seconds())
        await _invoke(callback)


async def call_every_day_async(callback: AsyncCallback) -> NoReturn:
    """Await ``callback()`` at every local midnight, forever."""
    await _call_on_boundary(callback, duration_to_next_day)


async def call_every_hour_async(callback: AsyncCallback) -> NoReturn:
    """Await ``callback()`` at the start of every hour, forever."""
    await _call_on_boundary(callback, duration_to_next_hour)


async def call_every_minute_async(callback: AsyncCallback) -> NoReturn:
    """Await ``callback()`` at the start of every minute, forever."""
    await _call_on_boundary(callback, duration_to_next_minute)


async def call_every_second_async(callback: AsyncCallback) -> NoReturn:
    """Await ``callback()`` at the start of every second, forever."""
    await _call_on_boundary(callback, duration_to_next_second)


async def set_timeout_async(callback: Callable[[], Any], duration: Duration) -> Any:
    """Wait ``duration`` (a timedelta or seconds), then await ``callback()`` once."""
    await asyncio.sleep(_to_seconds(duration))
    return await _invoke(callback)


async def set_interval_async(callback: AsyncCallback, duration: Duration) -> NoReturn:
    """Await ``callback()`` after every ``duration`` (a timedelta or seconds), forever."""
    seconds = _to_seconds(duration)
    while True:
        await asyncio.sleep(seconds)
        await _invoke(callback)