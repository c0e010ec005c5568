# turfslots/services/slots/invalidator.py
"""
Cache invalidation for turf availability views.

Triggers:
✓ Booking created/cancelled/status changed → invalidate the booking's date
  (and the previous date, whose overnight window may reach into it, and
  the next date when the booking runs past midnight)
✓ Operating hours, booking types or blackouts changed → invalidate all dates
"""

from datetime import date, timedelta

from redis import Redis

from ...schemas.bookings import BookingRecord
from .redis_store import SlotsRedisStore
from .time_utils import parse_time_to_minutes


def invalidate_turf_cache(
    redis: Redis,
    turf_id: str,
    dates: list[date] | None = None,
) -> int:
    """
    Invalidate cached views for turf.

    Args:
        redis: Redis client
        turf_id: Turf ID
        dates: List of specific dates to invalidate,
               or None to invalidate all cached dates

    Returns:
        Number of deleted cache keys
    """
    store = SlotsRedisStore(redis)
    return store.delete_views(turf_id, dates)


def get_affected_dates(date_start: date, date_end: date) -> list[date]:
    """Dates in [date_start, date_end], order of arguments not significant."""
    if date_start > date_end:
        date_start, date_end = date_end, date_start

    dates = []
    current = date_start
    while current <= date_end:
        dates.append(current)
        current += timedelta(days=1)
    return dates


def get_affected_dates_from_booking(booking: BookingRecord) -> list[date]:
    """Booking date and the day before, plus the next day when it runs past midnight."""
    last = booking.booking_date
    if parse_time_to_minutes(booking.end_time) <= parse_time_to_minutes(booking.start_time):
        last += timedelta(days=1)
    return get_affected_dates(booking.booking_date - timedelta(days=1), last)


def invalidate_booking(redis: Redis, booking: BookingRecord) -> int:
    """Invalidate the views a booking change can affect."""
    if not booking.turf_id:
        return 0
    return invalidate_turf_cache(redis, booking.turf_id, get_affected_dates_from_booking(booking))
