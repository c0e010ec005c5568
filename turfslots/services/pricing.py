# turfslots/services/pricing.py
"""
Booking price calculation.

A booking is split into slots at the configured granularity. Each slot is
charged the rate of the pricing shift covering its start, or the booking
type's hourly rate when no shift applies. The platform fee is added on top
and the advance is ADVANCE_RATIO of the turf fee.
"""

from datetime import date, timedelta
from decimal import Decimal, ROUND_HALF_UP
from typing import Iterable

from ..config import SlotEngineConfig, get_engine_config
from ..schemas.pricing import PriceLine, PriceQuote
from ..schemas.turfs import BookingTypeCapacity, OperatingWindow, PricingShift
from .slots.calculator import api_weekday, enumerate_slots
from .slots.shifts import shift_for_time
from .slots.time_utils import MINUTES_PER_DAY, parse_time_to_minutes

CENT = Decimal("0.01")


def to_money(value) -> Decimal:
    """Coerce int/float/str/Decimal to a 2-place Decimal."""
    if not isinstance(value, Decimal):
        value = Decimal(str(value))
    return value.quantize(CENT, rounding=ROUND_HALF_UP)


def calculate_price(
    booking_type: BookingTypeCapacity,
    booking_date: date,
    start_time: str,
    end_time: str,
    *,
    pricing_shifts: Iterable[PricingShift] = (),
    config: SlotEngineConfig | None = None,
) -> PriceQuote:
    """
    Quote a booking of booking_type on booking_date from start_time to end_time.

    End at or before start is read as ending on the next day.
    """
    config = config or get_engine_config()
    shifts = list(pricing_shifts)

    start_min = parse_time_to_minutes(start_time)
    end_min = parse_time_to_minutes(end_time)
    if start_min == end_min:
        raise ValueError(f"Empty booking range {start_time}-{end_time}")

    # Reuse the partitioner on a synthetic window spanning the booking.
    window = OperatingWindow(
        day_of_week=api_weekday(booking_date),
        open_time=start_time,
        close_time=end_time,
        overnight=end_min < start_min,
    )
    slots = enumerate_slots(window, config.slot_step_minutes)

    breakdown: list[PriceLine] = []
    turf_fee = Decimal("0")

    for slot in slots:
        slot_date = booking_date + timedelta(days=slot.start_minutes // MINUTES_PER_DAY)
        shift = shift_for_time(shifts, api_weekday(slot_date), slot.start_time)
        rate = shift.hourly_rate if shift else booking_type.hourly_rate

        amount = to_money(Decimal(rate) * slot.duration_minutes / 60)
        turf_fee += amount
        breakdown.append(PriceLine(
            period=f"{slot.start_time}-{slot.end_time}",
            rate=to_money(rate),
            amount=amount,
            shift=shift.shift_name if shift else None,
        ))

    total_minutes = sum(slot.duration_minutes for slot in slots)
    duration_hours = to_money(Decimal(total_minutes) / 60)
    platform_fee = to_money(config.platform_fee)
    advance = to_money(turf_fee * Decimal(config.advance_ratio))

    return PriceQuote(
        duration_hours=duration_hours,
        number_of_slots=len(slots),
        hourly_rate=to_money(turf_fee * 60 / total_minutes) if total_minutes else to_money(0),
        turf_fee=to_money(turf_fee),
        platform_fee=platform_fee,
        total_fee=to_money(turf_fee + platform_fee),
        advance_amount=advance,
        remaining_amount=to_money(turf_fee - advance),
        breakdown=breakdown,
    )
