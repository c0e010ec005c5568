# turfslots/schemas/slots.py
"""
Pydantic schemas for slot availability views.
"""

from datetime import date
from decimal import Decimal
from typing import Optional

from pydantic import BaseModel, Field

from .turfs import API_MODEL_CONFIG


class DayPeriod(BaseModel):
    """Named bucket of the day. start > end means the period wraps midnight."""
    id: int
    name: str
    start: str  # "HH:MM"
    end: str    # "HH:MM"

    model_config = {**API_MODEL_CONFIG, "frozen": True}


class BookingTypeAvailability(BaseModel):
    """Remaining capacity of one booking type within one slot."""
    id: int
    name: str
    display_name: Optional[str] = None
    hourly_rate: Decimal
    available_slots: int
    max_concurrent: int

    model_config = API_MODEL_CONFIG


class SlotAvailability(BaseModel):
    start_time: str  # "HH:MM"
    end_time: str    # "HH:MM"
    booking_types: list[BookingTypeAvailability] = Field(default_factory=list)
    is_bookable: bool
    min_rate: Optional[Decimal] = None
    rate_display: str
    period: Optional[str] = None
    shift_name: Optional[str] = None

    model_config = API_MODEL_CONFIG


class AvailabilityView(BaseModel):
    """
    Slot grid for one turf and date.

    is_open=False with no slots means the turf is closed that day;
    is_open=True with no slots means the period filter left nothing.
    """
    date: date
    turf_id: Optional[str] = None
    is_open: bool
    period: Optional[str] = None
    slots: list[SlotAvailability] = Field(default_factory=list)

    model_config = API_MODEL_CONFIG


class BookingDay(BaseModel):
    """Entry of the date picker strip."""
    day: str        # "Mon"
    date: str       # "27/06"
    full_date: date

    model_config = API_MODEL_CONFIG
