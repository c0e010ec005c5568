# turfslots/schemas/bookings.py

from datetime import date
from decimal import Decimal
from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field

from .turfs import API_MODEL_CONFIG


class BookingStatus(str, Enum):
    PENDING = "pending"
    CONFIRMED = "confirmed"
    CANCELLED = "cancelled"
    COMPLETED = "completed"


class BookingRecord(BaseModel):
    id: str
    turf_id: Optional[str] = None
    booking_type_id: Optional[int] = None

    booking_date: date
    start_time: str
    end_time: str

    status: BookingStatus = BookingStatus.PENDING
    total_turf_fee: Decimal = Decimal("0")
    advance_paid: bool = False
    remaining_paid: bool = False

    model_config = API_MODEL_CONFIG


class UnavailablePeriod(BaseModel):
    start_time: str
    end_time: str
    reason: Optional[str] = None
    type: str = "blackout"  # "blackout" | "booked"

    model_config = API_MODEL_CONFIG


class PaymentState(str, Enum):
    PAID = "paid"
    ADVANCE_PAID = "advance_paid"
    REMAINING_PAID = "remaining_paid"
    UNPAID = "unpaid"


class PaymentRequest(BaseModel):
    total_fee: Decimal = Field(ge=0)
    platform_fee: Optional[Decimal] = Field(default=None, ge=0)
    advance_paid: bool = False
    remaining_paid: bool = False

    model_config = API_MODEL_CONFIG


class PaymentSummary(BaseModel):
    total_fee: Decimal
    platform_fee: Decimal
    actual_fee: Decimal
    advance_amount: Decimal
    remaining_amount: Decimal
    state: PaymentState
    label: str

    model_config = API_MODEL_CONFIG
