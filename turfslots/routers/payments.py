# turfslots/routers/payments.py

from fastapi import APIRouter, Depends, HTTPException

from ..config import SlotEngineConfig, get_engine_config
from ..schemas.bookings import BookingRecord, PaymentRequest, PaymentSummary
from ..schemas.pricing import PriceQuote, PriceQuoteRequest
from ..services.payments import summarize_booking_payment, summarize_payment
from ..services.pricing import calculate_price

router = APIRouter(tags=["payments"])


@router.post("/payments/remaining", response_model=PaymentSummary)
def get_remaining_amount(
    data: PaymentRequest,
    config: SlotEngineConfig = Depends(get_engine_config),
):
    return summarize_payment(
        data.total_fee,
        data.advance_paid,
        data.remaining_paid,
        platform_fee=data.platform_fee,
        config=config,
    )


@router.post("/payments/booking", response_model=PaymentSummary)
def get_booking_payment(
    booking: BookingRecord,
    config: SlotEngineConfig = Depends(get_engine_config),
):
    return summarize_booking_payment(booking, config)


@router.post("/pricing/quote", response_model=PriceQuote)
def get_price_quote(
    data: PriceQuoteRequest,
    config: SlotEngineConfig = Depends(get_engine_config),
):
    try:
        return calculate_price(
            data.booking_type,
            data.date,
            data.start_time,
            data.end_time,
            pricing_shifts=data.pricing_shifts,
            config=config,
        )
    except ValueError as e:
        raise HTTPException(status_code=422, detail=str(e)) from e
