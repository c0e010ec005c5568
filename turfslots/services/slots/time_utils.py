# turfslots/services/slots/time_utils.py
"""
Wall-clock time helpers.

TimeOfDay is an int: minutes since local midnight, 0..1439.
"""

import re
from datetime import date, timedelta

from ...exceptions import ParseError
from ...schemas.slots import BookingDay

MINUTES_PER_DAY = 24 * 60

_TIME_RE = re.compile(r"^(\d{1,2}):(\d{2})(?::(\d{2}))?$")

_WEEKDAY_ABBR = ["Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun"]


def parse_time_to_minutes(time_str: str) -> int:
    """
    Convert "H:MM", "HH:MM" or "HH:MM:SS" to minutes since midnight.

    Seconds are accepted and dropped. Raises ParseError on anything else.
    """
    if not isinstance(time_str, str):
        raise ParseError(time_str)

    match = _TIME_RE.match(time_str.strip())
    if not match:
        raise ParseError(time_str)

    hours, minutes = int(match.group(1)), int(match.group(2))
    seconds = int(match.group(3) or 0)
    if hours > 23 or minutes > 59 or seconds > 59:
        raise ParseError(time_str)

    return hours * 60 + minutes


def minutes_to_time_str(minutes: int) -> str:
    """Convert minutes offset to "HH:MM" (wraps past midnight)."""
    minutes %= MINUTES_PER_DAY
    return f"{minutes // 60:02d}:{minutes % 60:02d}"


def format_time_12hour(time_str: str) -> str:
    """
    "13:05" -> "1:05 PM", "00:30" -> "12:30 AM", "12:00" -> "12:00 PM".
    """
    total = parse_time_to_minutes(time_str)
    hours, minutes = divmod(total, 60)
    suffix = "PM" if hours >= 12 else "AM"
    return f"{hours % 12 or 12}:{minutes:02d} {suffix}"


def format_time_range(start_time: str, end_time: str) -> str:
    return f"{format_time_12hour(start_time)} – {format_time_12hour(end_time)}"


def upcoming_days(today: date | None = None, count: int = 7) -> list[BookingDay]:
    """Date picker strip: `count` days starting today."""
    today = today or date.today()

    days = []
    for offset in range(count):
        dt = today + timedelta(days=offset)
        days.append(BookingDay(
            day=_WEEKDAY_ABBR[dt.weekday()],
            date=dt.strftime("%d/%m"),
            full_date=dt,
        ))
    return days
