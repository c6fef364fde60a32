# tests/test_time_values.py

from __future__ import annotations

import pytest

from taskboard.board.time_values import (
    Countdown,
    TimeEstimate,
    format_time_estimate,
    parse_int_field,
)


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        (5, 5),
        ("7", 7),
        (" 12abc", 12),
        (3.9, 3),
        ("", 0),
        ("abc", 0),
        (None, 0),
        (True, 0),
        (-4, 0),
        ("-2", 0),
        (float("nan"), 0),
        ("9" * 5000, 0),
        ("١٢", 0),
    ],
)
def test_parse_int_field_is_lenient(raw, expected) -> None:
    assert parse_int_field(raw) == expected


def test_estimate_normalizes_minutes_overflow() -> None:
    est = TimeEstimate.of(1, 75)
    assert (est.hours, est.minutes) == (2, 15)
    assert TimeEstimate.of("x", "130") == TimeEstimate(2, 10)


def test_estimate_sum_is_normalized() -> None:
    total = TimeEstimate(1, 45) + TimeEstimate(0, 30)
    assert total == TimeEstimate(2, 15)


def test_estimate_coerce_accepts_mapping_and_none() -> None:
    assert TimeEstimate.coerce({"hours": "3", "minutes": 61}) == TimeEstimate(4, 1)
    assert TimeEstimate.coerce({"minutes": "oops"}) == TimeEstimate(0, 0)
    assert TimeEstimate.coerce(None) == TimeEstimate()


def test_format_time_estimate_labels() -> None:
    assert format_time_estimate(TimeEstimate(4, 30)) == "4h 30min"
    assert format_time_estimate(TimeEstimate(1, 0)) == "1h"
    assert format_time_estimate(TimeEstimate(0, 45)) == "45min"
    assert format_time_estimate(TimeEstimate()) == "0min"
    assert format_time_estimate(None) == "0min"


def test_countdown_borrows_across_units() -> None:
    assert Countdown(1, 0, 0).decremented() == Countdown(0, 59, 59)
    assert Countdown(0, 1, 0).decremented() == Countdown(0, 0, 59)
    assert Countdown(0, 0, 1).decremented() == Countdown(0, 0, 0)


def test_countdown_never_goes_negative() -> None:
    zero = Countdown()
    assert zero.decremented() is zero
    assert str(Countdown(2, 5, 9)) == "02:05:09"
