# turfslots/services/slots/calculator.py
"""
Slot partitioning.

Splits a turf's operating window for a date into contiguous
half-open [start, end) slots at a fixed granularity.

Contains:
✓ operating window (open flag, open/close time, overnight flag)
✓ slot granularity

Does NOT contain:
✗ Bookings (see capacity.py)
✗ Period filters and rates (see availability.py)
"""

from dataclasses import dataclass
from datetime import date
from typing import Iterable

from ...exceptions import AmbiguousWindowError
from ...schemas.turfs import OperatingWindow
from .time_utils import MINUTES_PER_DAY, minutes_to_time_str, parse_time_to_minutes


@dataclass(frozen=True, order=True)
class SlotCandidate:
    """
    Half-open slot [start_minutes, end_minutes) relative to the view date's
    midnight. Offsets past 1440 belong to the next day.
    """
    start_minutes: int
    end_minutes: int

    @property
    def start_time(self) -> str:
        return minutes_to_time_str(self.start_minutes)

    @property
    def end_time(self) -> str:
        return minutes_to_time_str(self.end_minutes)

    @property
    def duration_minutes(self) -> int:
        return self.end_minutes - self.start_minutes

    def overlaps(self, start_minutes: int, end_minutes: int) -> bool:
        return self.start_minutes < end_minutes and start_minutes < self.end_minutes


def window_bounds(window: OperatingWindow) -> tuple[int, int]:
    """
    Resolve (open, close) minute offsets of an open window.

    close <= open is only valid for overnight windows, where close is
    shifted to the next day.
    """
    open_min = parse_time_to_minutes(window.open_time)
    close_min = parse_time_to_minutes(window.close_time)

    if close_min <= open_min:
        if not window.overnight:
            raise AmbiguousWindowError(window.open_time, window.close_time)
        close_min += MINUTES_PER_DAY

    return open_min, close_min


def enumerate_slots(window: OperatingWindow, granularity_minutes: int) -> list[SlotCandidate]:
    """
    Produce slots tiling [open_time, close_time) in ascending order.

    Returns:
        List of SlotCandidate. Empty list = turf closed.
        The last slot is cut at close_time when the window length is not
        a multiple of the granularity.
    """
    if not isinstance(granularity_minutes, int) or not 0 < granularity_minutes <= MINUTES_PER_DAY:
        raise ValueError(f"granularity_minutes must be within 1..1440, got {granularity_minutes}")

    if not window.is_open:
        return []

    open_min, close_min = window_bounds(window)

    slots: list[SlotCandidate] = []
    t = open_min
    while t < close_min:
        slots.append(SlotCandidate(t, min(t + granularity_minutes, close_min)))
        t += granularity_minutes

    return slots


def api_weekday(target_date: date) -> int:
    """Weekday index used by the turf API: 0 = Sunday ... 6 = Saturday."""
    return (target_date.weekday() + 1) % 7


def window_for_date(
    operating_hours: Iterable[OperatingWindow],
    target_date: date,
) -> OperatingWindow | None:
    """Pick the operating window for target_date's weekday, if any."""
    weekday = api_weekday(target_date)
    for window in operating_hours:
        if window.day_of_week == weekday:
            return window
    return None
