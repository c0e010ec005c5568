# turfslots/services/slots/availability.py
"""
Availability view for a turf on a specific date.

Takes into account:
- Operating window of the date (calculator.py)
- Booking type capacities and existing bookings (capacity.py)
- Blackout periods
- Optional day period filter (periods.py)

Each slot carries the minimum hourly rate among booking types that still
have room, or the "not available" sentinel.
"""

from datetime import date, timedelta
from decimal import Decimal
from typing import Iterable, Sequence

from ...config import SlotEngineConfig, get_engine_config
from ...schemas.bookings import BookingRecord, UnavailablePeriod
from ...schemas.slots import AvailabilityView, BookingTypeAvailability, DayPeriod, SlotAvailability
from ...schemas.turfs import BookingTypeCapacity, OperatingWindow, PricingShift, TurfDetails
from .calculator import SlotCandidate, api_weekday, enumerate_slots, window_for_date
from .capacity import consuming_bookings, is_slot_available, resolve_capacity
from .periods import DEFAULT_DAY_PERIODS, minutes_in_period, find_period
from .shifts import shift_for_time
from .time_utils import MINUTES_PER_DAY

NOT_AVAILABLE = "not available"


def build_availability_view(
    target_date: date,
    window: OperatingWindow | None,
    booking_types: Sequence[BookingTypeCapacity] | None,
    existing_bookings: Iterable[BookingRecord] | None,
    period_filter: DayPeriod | str | None = None,
    *,
    turf_id: str | None = None,
    unavailable_periods: Iterable[UnavailablePeriod] = (),
    pricing_shifts: Iterable[PricingShift] = (),
    periods: Sequence[DayPeriod] = DEFAULT_DAY_PERIODS,
    config: SlotEngineConfig | None = None,
) -> AvailabilityView:
    """
    Build the slot grid for target_date.

    Returns:
        AvailabilityView. is_open=False (and no slots) when the turf is
        closed that day; an over-restrictive period filter yields
        is_open=True with no slots.
    """
    config = config or get_engine_config()
    booking_types = list(booking_types or [])
    bookings = consuming_bookings(existing_bookings or [])
    blackouts = list(unavailable_periods)
    shifts = list(pricing_shifts)

    period = _resolve_filter(period_filter, periods)

    if window is None or not window.is_open:
        return AvailabilityView(
            date=target_date,
            turf_id=turf_id,
            is_open=False,
            period=period.name if period else None,
            slots=[],
        )

    slots: list[SlotAvailability] = []
    for candidate in enumerate_slots(window, config.slot_step_minutes):
        wall_minutes = candidate.start_minutes % MINUTES_PER_DAY
        if period is not None and not minutes_in_period(wall_minutes, period):
            continue

        capacity = resolve_capacity(
            candidate,
            booking_types,
            bookings,
            unavailable_periods=blackouts,
            on_date=target_date,
        )
        slots.append(_build_slot(
            candidate, target_date, booking_types, capacity, shifts, periods, config,
        ))

    return AvailabilityView(
        date=target_date,
        turf_id=turf_id,
        is_open=True,
        period=period.name if period else None,
        slots=slots,
    )


def build_turf_availability(
    turf: TurfDetails,
    target_date: date,
    existing_bookings: Iterable[BookingRecord] | None,
    period_filter: DayPeriod | str | None = None,
    *,
    unavailable_periods: Iterable[UnavailablePeriod] = (),
    config: SlotEngineConfig | None = None,
) -> AvailabilityView:
    """build_availability_view over a turf details payload."""
    return build_availability_view(
        target_date,
        window_for_date(turf.operating_hours, target_date),
        turf.booking_types,
        existing_bookings,
        period_filter,
        turf_id=turf.id,
        unavailable_periods=unavailable_periods,
        pricing_shifts=turf.pricing_shifts,
        config=config,
    )


# ── Helpers ──────────────────────────────────────────────────────────────


def _resolve_filter(
    period_filter: DayPeriod | str | None,
    periods: Sequence[DayPeriod],
) -> DayPeriod | None:
    """Unknown period names apply no filter."""
    if period_filter is None or isinstance(period_filter, DayPeriod):
        return period_filter
    return find_period(periods, period_filter)


def _build_slot(
    candidate: SlotCandidate,
    target_date: date,
    booking_types: Sequence[BookingTypeCapacity],
    capacity: dict[int, int],
    shifts: list[PricingShift],
    periods: Sequence[DayPeriod],
    config: SlotEngineConfig,
) -> SlotAvailability:
    type_rows = [
        BookingTypeAvailability(
            id=bt.id,
            name=bt.name,
            display_name=bt.display_name,
            hourly_rate=bt.hourly_rate,
            available_slots=capacity[bt.id],
            max_concurrent=bt.max_concurrent,
        )
        for bt in booking_types
    ]

    open_rates = [row.hourly_rate for row in type_rows if row.available_slots > 0]
    min_rate = min(open_rates) if open_rates else None

    wall_minutes = candidate.start_minutes % MINUTES_PER_DAY
    slot_period = next((p for p in periods if minutes_in_period(wall_minutes, p)), None)

    shift = None
    if shifts:
        slot_date = target_date + timedelta(days=candidate.start_minutes // MINUTES_PER_DAY)
        shift = shift_for_time(shifts, api_weekday(slot_date), candidate.start_time)

    return SlotAvailability(
        start_time=candidate.start_time,
        end_time=candidate.end_time,
        booking_types=type_rows,
        is_bookable=is_slot_available(capacity),
        min_rate=min_rate,
        rate_display=format_rate(min_rate, config.currency_symbol),
        period=slot_period.name if slot_period else None,
        shift_name=shift.shift_name if shift else None,
    )


def format_rate(rate: Decimal | None, currency_symbol: str = "₹") -> str:
    """'From ₹1200/hr', or the "not available" sentinel when rate is None."""
    if rate is None:
        return NOT_AVAILABLE
    rate = Decimal(rate)
    if rate == rate.to_integral_value():
        text = str(rate.quantize(Decimal(1)))
    else:
        text = str(rate.quantize(Decimal("0.01")))
    return f"From {currency_symbol}{text}/hr"
