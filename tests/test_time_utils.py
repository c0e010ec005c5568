from datetime import date

import pytest

from turfslots.exceptions import ParseError
from turfslots.services.slots.time_utils import (
    format_time_12hour,
    format_time_range,
    minutes_to_time_str,
    parse_time_to_minutes,
    upcoming_days,
)


@pytest.mark.parametrize(
    "value, expected",
    [
        ("00:00", 0),
        ("9:05", 545),
        ("09:05", 545),
        ("09:05:30", 545),
        ("23:59", 1439),
        (" 18:30 ", 1110),
    ],
)
def test_parse_time_to_minutes(value, expected):
    assert parse_time_to_minutes(value) == expected


@pytest.mark.parametrize("value", ["", "9", "24:00", "12:60", "ab:cd", "12:5", "12:00:61", "1:2:3:4"])
def test_parse_time_rejects_malformed(value):
    with pytest.raises(ParseError) as exc_info:
        parse_time_to_minutes(value)

    assert exc_info.value.value == value


def test_parse_time_rejects_non_string():
    with pytest.raises(ParseError):
        parse_time_to_minutes(None)


def test_parse_error_is_value_error():
    with pytest.raises(ValueError):
        parse_time_to_minutes("noon")


def test_minutes_to_time_str_wraps_past_midnight():
    assert minutes_to_time_str(0) == "00:00"
    assert minutes_to_time_str(545) == "09:05"
    assert minutes_to_time_str(1440) == "00:00"
    assert minutes_to_time_str(1500) == "01:00"


@pytest.mark.parametrize(
    "value, expected",
    [
        ("00:00", "12:00 AM"),
        ("00:30", "12:30 AM"),
        ("09:05", "9:05 AM"),
        ("12:00", "12:00 PM"),
        ("13:05", "1:05 PM"),
        ("23:59:00", "11:59 PM"),
    ],
)
def test_format_time_12hour(value, expected):
    assert format_time_12hour(value) == expected


def test_format_time_range():
    assert format_time_range("18:00", "19:30") == "6:00 PM – 7:30 PM"


def test_upcoming_days():
    days = upcoming_days(date(2026, 10, 19), count=3)

    assert [d.day for d in days] == ["Mon", "Tue", "Wed"]
    assert [d.date for d in days] == ["19/10", "20/10", "21/10"]
    assert days[-1].full_date == date(2026, 10, 21)


def test_upcoming_days_defaults_to_a_week():
    assert len(upcoming_days(date(2026, 12, 28))) == 7
