# turfslots/services/slots/__init__.py
"""
Slot availability engine.

time_utils / periods → calculator (partition) → capacity → availability
redis_store / invalidator cache built views outside the pure core.
"""

from .time_utils import (
    parse_time_to_minutes,
    minutes_to_time_str,
    format_time_12hour,
    format_time_range,
    upcoming_days,
)
from .periods import DEFAULT_DAY_PERIODS, is_within_period, resolve_current_period, find_period
from .calculator import SlotCandidate, enumerate_slots, window_for_date
from .capacity import CAPACITY_CONSUMING_STATUSES, consuming_bookings, resolve_capacity, is_slot_available
from .availability import NOT_AVAILABLE, build_availability_view, build_turf_availability
from .redis_store import SlotsRedisStore
from .invalidator import invalidate_turf_cache, invalidate_booking

__all__ = [
    "parse_time_to_minutes",
    "minutes_to_time_str",
    "format_time_12hour",
    "format_time_range",
    "upcoming_days",
    "DEFAULT_DAY_PERIODS",
    "is_within_period",
    "resolve_current_period",
    "find_period",
    "SlotCandidate",
    "enumerate_slots",
    "window_for_date",
    "CAPACITY_CONSUMING_STATUSES",
    "consuming_bookings",
    "resolve_capacity",
    "is_slot_available",
    "NOT_AVAILABLE",
    "build_availability_view",
    "build_turf_availability",
    "SlotsRedisStore",
    "invalidate_turf_cache",
    "invalidate_booking",
]
