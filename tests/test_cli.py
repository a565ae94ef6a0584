import re
from datetime import timedelta
from unittest.mock import patch

import pytest

from zila.cli import main

_TIMEDELTA = re.compile(r"^(\d+):(\d{2}):(\d{2})(?:\.(\d{6}))?$")


def _parse(text):
    match = _TIMEDELTA.match(text.strip())
    assert match is not None, text
    hours, minutes, seconds, micro = match.groups()
    return timedelta(
        hours=int(hours),
        minutes=int(minutes),
        seconds=int(seconds),
        microseconds=int(micro or 0),
    )


@pytest.mark.parametrize(
    "unit, period",
    [
        ("day", timedelta(days=1)),
        ("hour", timedelta(hours=1)),
        ("minute", timedelta(minutes=1)),
        ("second", timedelta(seconds=1)),
    ],
)
def test_next_prints_duration_within_period(unit, period, capsys):
    assert main(["next", unit]) == 0
    value = _parse(capsys.readouterr().out)
    assert timedelta(0) <= value < period


def test_next_rejects_unknown_unit():
    with pytest.raises(SystemExit) as info:
        main(["next", "week"])
    assert info.value.code == 2


def test_timeout_prints_message_once(capsys):
    assert main(["timeout", "--seconds", "0", "--message", "hello"]) == 0
    assert capsys.readouterr().out.splitlines() == ["hello"]


def test_timeout_rejects_negative_seconds():
    with pytest.raises(SystemExit) as info:
        main(["timeout", "--seconds", "-1"])
    assert info.value.code == 2


def test_timeout_rejects_non_numeric_seconds():
    with pytest.raises(SystemExit) as info:
        main(["timeout", "--seconds", "soon"])
    assert info.value.code == 2


def test_interval_with_count_prints_that_many_times(capsys):
    assert main(["interval", "--seconds", "0", "--count", "3", "--message", "tick"]) == 0
    assert capsys.readouterr().out.splitlines() == ["tick", "tick", "tick"]


def test_interval_rejects_zero_count():
    with pytest.raises(SystemExit) as info:
        main(["interval", "--count", "0"])
    assert info.value.code == 2


def test_every_second_with_count_sleeps_less_than_a_second(capsys):
    with patch("time.sleep") as sleep:
        assert main(["every", "second", "--count", "2", "--message", "beat"]) == 0
    assert capsys.readouterr().out.splitlines() == ["beat", "beat"]
    assert sleep.call_count == 2
    for call in sleep.call_args_list:
        assert 0 <= call.args[0] < 1


def test_interval_forever_stops_on_keyboard_interrupt(capsys):
    with patch("time.sleep", side_effect=[None, None, KeyboardInterrupt]):
        assert main(["interval", "--seconds", "0", "--message", "x"]) == 130
    assert capsys.readouterr().out.splitlines() == ["x", "x"]


def test_missing_command_is_an_error():
    with pytest.raises(SystemExit) as info:
        main([])
    assert info.value.code == 2