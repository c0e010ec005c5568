# turfslots/services/slots/capacity.py
"""
Capacity resolution for a single slot.

available = max(0, max_concurrent - consumed) per booking type, where
consumed counts capacity-consuming bookings of that type overlapping the
slot. An overlapping exclusive booking or blackout locks the whole slot.

Cancelled bookings never consume capacity. The status filter is applied
here, so callers may pass unfiltered booking lists.
"""

import logging
from datetime import date, timedelta
from typing import Iterable, Sequence

from ...schemas.bookings import BookingRecord, BookingStatus, UnavailablePeriod
from ...schemas.turfs import BookingTypeCapacity
from .calculator import SlotCandidate
from .time_utils import MINUTES_PER_DAY, parse_time_to_minutes

logger = logging.getLogger(__name__)


CAPACITY_CONSUMING_STATUSES: frozenset[BookingStatus] = frozenset({
    BookingStatus.PENDING,
    BookingStatus.CONFIRMED,
    BookingStatus.COMPLETED,
})

BLACKOUT = "blackout"


def consuming_bookings(
    bookings: Iterable[BookingRecord],
    statuses: frozenset[BookingStatus] = CAPACITY_CONSUMING_STATUSES,
) -> list[BookingRecord]:
    """Keep only bookings whose status takes up capacity."""
    return [b for b in bookings if b.status in statuses]


def _interval(start_time: str, end_time: str) -> tuple[int, int]:
    start = parse_time_to_minutes(start_time)
    end = parse_time_to_minutes(end_time)
    # "23:00"-"00:00" ends on the next day
    if end <= start:
        end += MINUTES_PER_DAY
    return start, end


def booking_interval(
    booking: BookingRecord,
    on_date: date | None = None,
) -> tuple[int, int] | None:
    """
    Minute interval of a booking relative to on_date's midnight.

    Bookings of the day after are shifted past 1440 for overnight windows.
    Bookings of the day before only count when they run past midnight.
    Returns None when the booking cannot touch on_date's grid.
    """
    start, end = _interval(booking.start_time, booking.end_time)
    if on_date is None or booking.booking_date == on_date:
        return start, end
    if booking.booking_date == on_date + timedelta(days=1):
        return start + MINUTES_PER_DAY, end + MINUTES_PER_DAY
    # Previous day's booking running past midnight into on_date
    if booking.booking_date == on_date - timedelta(days=1) and end > MINUTES_PER_DAY:
        return start - MINUTES_PER_DAY, end - MINUTES_PER_DAY
    return None


def _blackout_overlaps(slot: SlotCandidate, period: UnavailablePeriod) -> bool:
    start, end = _interval(period.start_time, period.end_time)
    # Overnight slots live past 1440; blackouts are given as wall-clock times.
    return slot.overlaps(start, end) or slot.overlaps(start + MINUTES_PER_DAY, end + MINUTES_PER_DAY)


def resolve_capacity(
    slot: SlotCandidate,
    booking_types: Sequence[BookingTypeCapacity],
    existing_bookings: Iterable[BookingRecord],
    *,
    unavailable_periods: Iterable[UnavailablePeriod] = (),
    on_date: date | None = None,
    consuming_statuses: frozenset[BookingStatus] = CAPACITY_CONSUMING_STATUSES,
) -> dict[int, int]:
    """
    Compute remaining concurrent bookings per booking type for a slot.

    Returns:
        {booking_type_id: available_slots}, in booking_types order.
        Every value is within [0, max_concurrent].
    """
    types_by_id = {bt.id: bt for bt in booking_types}
    consumed = {bt.id: 0 for bt in booking_types}
    locked = False

    for booking in consuming_bookings(existing_bookings or (), consuming_statuses):
        booking_type = types_by_id.get(booking.booking_type_id)
        if booking_type is None:
            continue

        interval = booking_interval(booking, on_date)
        if interval is None or not slot.overlaps(*interval):
            continue

        consumed[booking_type.id] += 1
        if booking_type.is_exclusive:
            locked = True

    if not locked:
        for period in unavailable_periods:
            if period.type == BLACKOUT and _blackout_overlaps(slot, period):
                locked = True
                break

    if locked:
        return {bt.id: 0 for bt in booking_types}

    capacity = {}
    for bt in booking_types:
        available = bt.max_concurrent - consumed[bt.id]
        if available < 0:
            logger.debug(
                "Booking type %s oversubscribed at %s: %s of %s",
                bt.id, slot.start_time, consumed[bt.id], bt.max_concurrent,
            )
        capacity[bt.id] = max(0, available)
    return capacity


def is_slot_available(capacity: dict[int, int]) -> bool:
    """A slot is bookable if any booking type has room left."""
    return any(available > 0 for available in capacity.values())
