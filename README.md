# zila

Call functions on time-based events: at the start of every day, hour,
minute or second, once after a timeout, or repeatedly at a fixed interval.
Both blocking and asyncio variants are provided. No third-party
dependencies.

## Installation

    pip install zila

## Time until the next boundary

```python
from datetime import datetime
from zila.durations import duration_to_next_minute

print(duration_to_next_minute())                           # from the current local time
print(duration_to_next_minute(datetime(2024, 1, 1, 12, 30, 45)))  # 0:00:15
```

`duration_to_next_day`, `duration_to_next_hour`, `duration_to_next_minute`
and `duration_to_next_second` in `zila.durations` return a
`datetime.timedelta`. Each takes an optional `now` datetime and uses the
current local time when it is omitted. When the time is exactly on the
boundary (for example 00:00:00.000000 for the day), the result is zero.

## Blocking scheduling

```python
from datetime import timedelta
from zila.scheduling import call_every_second, set_timeout, set_interval

result = set_timeout(lambda: "done", timedelta(seconds=2))  # returns "done"
set_interval(lambda: print("every two seconds"), 2)
call_every_second(lambda: print("tick"))
```

`zila.scheduling` provides:

- `set_timeout(callback, duration)` sleeps for `duration`, calls
  `callback` once and returns what it returned.
- `set_interval(callback, duration)` sleeps for `duration` and calls
  `callback`, forever.
- `call_every_day`, `call_every_hour`, `call_every_minute` and
  `call_every_second` sleep until the next boundary and call the callback,
  forever.

A duration is a `timedelta` or a number of seconds. A negative duration
raises `ValueError`.

## Asyncio scheduling

```python
import asyncio
from datetime import timedelta
from zila.aio import set_interval_async

async def callback():
    print("every two seconds")

asyncio.run(set_interval_async(callback, timedelta(seconds=2)))
```

`zila.aio` provides `set_timeout_async`, `set_interval_async`,
`call_every_day_async`, `call_every_hour_async`, `call_every_minute_async`
and `call_every_second_async`, which behave like their blocking
counterparts but use `asyncio.sleep`. The callback may be a coroutine
function or a plain function; if what it returns is awaitable, it is
awaited. `set_timeout_async` returns the callback's result.

## Command line

    zila next {day,hour,minute,second}
    zila timeout [--seconds N] [--message TEXT]
    zila interval [--seconds N] [--message TEXT] [--count N]
    zila every {day,hour,minute,second} [--message TEXT] [--count N]

- `next` prints the time left until the next whole unit.
- `timeout` prints a message once after `--seconds` (default 2).
- `interval` prints a message every `--seconds` (default 2).
- `every` prints a message at the start of every unit.

`interval` and `every` run until interrupted unless `--count` limits the
number of messages. Seconds must not be negative and a count must be at
least 1. Interrupting with Ctrl-C exits with status 130.

## Limitations

Callbacks run in the calling thread or task; there is no background
scheduler, no way to cancel a blocking loop other than raising from the
callback or interrupting, and no persistence of scheduled jobs.