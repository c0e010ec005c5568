from datetime import date
from decimal import Decimal

import pytest

from turfslots.config import SlotEngineConfig
from turfslots.schemas import BookingRecord, BookingTypeCapacity, OperatingWindow

# Monday; the turf API numbers it 1 (0 = Sunday)
MONDAY = date(2026, 10, 19)


def make_booking(
    booking_id: str,
    start: str,
    end: str,
    booking_type_id: int = 1,
    status: str = "confirmed",
    booking_date: date = MONDAY,
    **extra,
) -> BookingRecord:
    return BookingRecord(
        id=booking_id,
        turf_id="turf-1",
        booking_type_id=booking_type_id,
        booking_date=booking_date,
        start_time=start,
        end_time=end,
        status=status,
        **extra,
    )


@pytest.fixture
def config() -> SlotEngineConfig:
    return SlotEngineConfig(slot_step_minutes=60, platform_fee=Decimal("100"))


@pytest.fixture
def five_a_side() -> BookingTypeCapacity:
    return BookingTypeCapacity(
        id=1,
        name="5-a-side",
        display_name="5 a Side",
        hourly_rate=Decimal("1200"),
        max_concurrent=2,
    )


@pytest.fixture
def full_turf() -> BookingTypeCapacity:
    return BookingTypeCapacity(
        id=2,
        name="full",
        display_name="Full Turf (Exclusive)",
        hourly_rate=Decimal("2000"),
        max_concurrent=1,
        is_exclusive=True,
    )


@pytest.fixture
def day_window() -> OperatingWindow:
    return OperatingWindow(day_of_week=1, is_open=True, open_time="09:00", close_time="17:00")
