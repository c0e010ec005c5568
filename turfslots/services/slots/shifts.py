# turfslots/services/slots/shifts.py
"""
Pricing shift lookup (e.g. "Peak", "Off-peak") by weekday and time.
"""

from typing import Iterable, Optional

from ...schemas.turfs import PricingShift
from .time_utils import parse_time_to_minutes


def shift_for_time(
    shifts: Iterable[PricingShift],
    day_of_week: int,
    time_str: str,
) -> Optional[PricingShift]:
    """First shift of `day_of_week` whose [start, end) covers time_str."""
    minutes = parse_time_to_minutes(time_str)
    for shift in shifts:
        if shift.day_of_week != day_of_week:
            continue
        start = parse_time_to_minutes(shift.start_time)
        end = parse_time_to_minutes(shift.end_time)
        if start > end:
            if minutes >= start or minutes < end:
                return shift
        elif start <= minutes < end:
            return shift
    return None
