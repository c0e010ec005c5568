# turfslots/services/slots/periods.py
"""
Day periods used to filter the slot grid.

The default periods partition the 24-hour cycle; Night wraps midnight.
"""

import logging
from typing import Sequence

from ...schemas.slots import DayPeriod
from .time_utils import parse_time_to_minutes

logger = logging.getLogger(__name__)


DEFAULT_DAY_PERIODS: tuple[DayPeriod, ...] = (
    DayPeriod(id=1, name="Morning", start="06:00", end="12:00"),
    DayPeriod(id=2, name="Afternoon", start="12:00", end="17:00"),
    DayPeriod(id=3, name="Evening", start="17:00", end="21:00"),
    DayPeriod(id=4, name="Night", start="21:00", end="06:00"),
)


def minutes_in_period(minutes: int, period: DayPeriod) -> bool:
    start = parse_time_to_minutes(period.start)
    end = parse_time_to_minutes(period.end)

    if start > end:
        return minutes >= start or minutes < end
    return start <= minutes < end


def is_within_period(time_str: str, period: DayPeriod) -> bool:
    """
    Check whether a wall-clock time falls in a period.

    Non-wrapping: start <= t < end.
    Wrapping (start > end): t >= start or t < end.
    """
    return minutes_in_period(parse_time_to_minutes(time_str), period)


def resolve_current_period(periods: Sequence[DayPeriod], now: int) -> DayPeriod:
    """
    Return the first period containing `now` (minutes since midnight).

    Falls back to the first period when none matches, which only happens
    when the periods leave a gap in the day.
    """
    if not periods:
        raise ValueError("periods must not be empty")

    for period in periods:
        if minutes_in_period(now, period):
            return period

    logger.debug("No period contains minute %s, falling back to %s", now, periods[0].name)
    return periods[0]


def find_period(periods: Sequence[DayPeriod], name: str) -> DayPeriod | None:
    """Case-insensitive lookup by period name."""
    wanted = name.strip().lower()
    for period in periods:
        if period.name.lower() == wanted:
            return period
    return None
