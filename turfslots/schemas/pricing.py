# turfslots/schemas/pricing.py

from datetime import date
from decimal import Decimal
from typing import Optional

from pydantic import BaseModel, Field

from .turfs import API_MODEL_CONFIG, BookingTypeCapacity, PricingShift


class PriceLine(BaseModel):
    """Rate applied to one slot of a booking."""
    period: str  # "HH:MM-HH:MM"
    rate: Decimal
    amount: Decimal
    shift: Optional[str] = None

    model_config = API_MODEL_CONFIG


class PriceQuote(BaseModel):
    duration_hours: Decimal
    number_of_slots: int
    hourly_rate: Decimal
    turf_fee: Decimal
    platform_fee: Decimal
    total_fee: Decimal
    advance_amount: Decimal
    remaining_amount: Decimal
    breakdown: list[PriceLine] = Field(default_factory=list)

    model_config = API_MODEL_CONFIG


class PriceQuoteRequest(BaseModel):
    booking_type: BookingTypeCapacity
    date: date
    start_time: str
    end_time: str
    pricing_shifts: list[PricingShift] = Field(default_factory=list)

    model_config = API_MODEL_CONFIG
