"""Command-line interface for the zila time-event helpers."""

from __future__ import annotations

import argparse
import sys
from datetime import timedelta
from typing import Callable, Sequence, TextIO

from zila.durations import (
    duration_to_next_day,
    duration_to_next_hour,
    duration_to_next_minute,
    duration_to_next_second,
)
from zila.scheduling import (
    call_every_day,
    call_every_hour,
    call_every_minute,
    call_every_second,
    set_interval,
    set_timeout,
)

__all__ = ["main"]

_UNITS = ("day", "hour", "minute", "second")

_DURATIONS: dict[str, Callable[[], timedelta]] = {
    "day": duration_to_next_day,
    "hour": duration_to_next_hour,
    "minute": duration_to_next_minute,
    "second": duration_to_next_second,
}

_FOREVER: dict[str, Callable[[Callable[[], object]], object]] = {
    "day": call_every_day,
    "hour": call_every_hour,
    "minute": call_every_minute,
    "second": call_every_second,
}


def _non_negative_seconds(text: str) -> float:
    try:
        value = float(text)
    except ValueError:
        raise argparse.ArgumentTypeError(f"not a number: {text!r}") from None
    if value < 0:
        raise argparse.ArgumentTypeError(f"must not be negative: {text!r}")
    return value


def _positive_count(text: str) -> int:
    try:
        value = int(text)
    except ValueError:
        raise argparse.ArgumentTypeError(f"not an integer: {text!r}") from None
    if value < 1:
        raise argparse.ArgumentTypeError(f"must be at least 1: {text!r}")
    return value


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="zila", description="Call things on time events."
    )
    commands = parser.add_subparsers(dest="command", required=True)

    next_cmd = commands.add_parser(
        "next", help="print the time left until the next whole unit"
    )
    next_cmd.add_argument("unit", choices=_UNITS)

    timeout = commands.add_parser(
        "timeout", help="print a message once after a delay"
    )
    timeout.add_argument("--seconds", type=_non_negative_seconds, default=2.0)
    timeout.add_argument("--message", default=None)

    interval = commands.add_parser(
        "interval", help="print a message repeatedly at a fixed interval"
    )
    interval.add_argument("--seconds", type=_non_negative_seconds, default=2.0)
    interval.add_argument("--message", default=None)
    interval.add_argument("--count", type=_positive_count, default=None)

    every = commands.add_parser(
        "every", help="print a message at the start of every unit"
    )
    every.add_argument("unit", choices=_UNITS)
    every.add_argument("--message", default=None)
    every.add_argument("--count", type=_positive_count, default=None)

    return parser


def _printer(message: str, stream: TextIO | None = None) -> Callable[[], str]:
    """Return a callback that writes *message* as one line and returns it."""
    line = f"{message}\n"

    def emit() -> str:
        out = stream if stream is not None else sys.stdout
        out.write(line)
        out.flush()
        return message

    return emit


def _run_interval(args: argparse.Namespace) -> None:
    emit = _printer(args.message or f"This will be printed every {args.seconds:g} seconds")
    if args.count is None:
        set_interval(emit, args.seconds)
    for _ in range(args.count):
        set_timeout(emit, args.seconds)


def _run_every(args: argparse.Namespace) -> None:
    emit = _printer(args.message or f"This will be printed every {args.unit}.")
    if args.count is None:
        _FOREVER[args.unit](emit)
    until_next = _DURATIONS[args.unit]
    for _ in range(args.count):
        set_timeout(emit, until_next())


def main(argv: Sequence[str] | None = None) -> int:
    """Run the command line; return the exit status."""
    args = _build_parser().parse_args(argv)
    try:
        if args.command == "next":
            print(_DURATIONS[args.unit]())
        elif args.command == "timeout":
            message = args.message or f"This will be printed after {args.seconds:g} seconds"
            set_timeout(_printer(message), args.seconds)
        elif args.command == "interval":
            _run_interval(args)
        else:
            _run_every(args)
    except KeyboardInterrupt:
        return 130
    return 0


if __name__ == "__main__":
    sys.exit(main())