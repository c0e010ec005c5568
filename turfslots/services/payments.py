# turfslots/services/payments.py
"""
Payment reconciliation for a booking.

A booking's fee is paid in two phases: an advance and the remaining part,
each ADVANCE_RATIO of the actual fee (total fee minus platform fee).
The remaining amount is derived on every read and never stored.

    advance_paid | remaining_paid | remaining owed
    -------------+----------------+---------------
    True         | True           | 0
    True         | False          | actual * (1 - ratio)
    False        | False          | actual
    False        | True           | actual * ratio
"""

import logging
from decimal import Decimal

from ..config import ADVANCE_RATIO, SlotEngineConfig, get_engine_config
from ..schemas.bookings import BookingRecord, PaymentState, PaymentSummary
from .pricing import to_money

logger = logging.getLogger(__name__)


PAYMENT_LABELS = {
    PaymentState.PAID: "Fully paid",
    PaymentState.ADVANCE_PAID: "Advance paid",
    PaymentState.REMAINING_PAID: "Remaining paid, advance due",
    PaymentState.UNPAID: "Payment pending",
}


def _actual_fee(total_fee, platform_fee) -> Decimal:
    actual = to_money(total_fee) - to_money(platform_fee)
    if actual < 0:
        logger.warning(
            "Platform fee %s exceeds total fee %s, treating actual fee as 0",
            platform_fee, total_fee,
        )
        return to_money(0)
    return actual


def compute_remaining_amount(
    total_fee,
    platform_fee,
    advance_paid: bool,
    remaining_paid: bool,
    advance_ratio: Decimal = ADVANCE_RATIO,
) -> Decimal:
    """Outstanding balance of a booking, rounded to 2 places."""
    actual = _actual_fee(total_fee, platform_fee)
    ratio = Decimal(advance_ratio)

    if advance_paid and remaining_paid:
        return to_money(0)
    if advance_paid:
        return to_money(actual - actual * ratio)
    if remaining_paid:
        return to_money(actual * ratio)
    return to_money(actual)


def payment_state(advance_paid: bool, remaining_paid: bool) -> PaymentState:
    if advance_paid and remaining_paid:
        return PaymentState.PAID
    if advance_paid:
        return PaymentState.ADVANCE_PAID
    if remaining_paid:
        return PaymentState.REMAINING_PAID
    return PaymentState.UNPAID


def summarize_payment(
    total_fee,
    advance_paid: bool,
    remaining_paid: bool,
    *,
    platform_fee=None,
    config: SlotEngineConfig | None = None,
) -> PaymentSummary:
    """
    Payment figures for display.

    platform_fee defaults to the configured platform fee.
    """
    config = config or get_engine_config()
    if platform_fee is None:
        platform_fee = config.platform_fee

    actual = _actual_fee(total_fee, platform_fee)
    state = payment_state(advance_paid, remaining_paid)

    return PaymentSummary(
        total_fee=to_money(total_fee),
        platform_fee=to_money(platform_fee),
        actual_fee=actual,
        advance_amount=to_money(actual * Decimal(config.advance_ratio)),
        remaining_amount=compute_remaining_amount(
            total_fee, platform_fee, advance_paid, remaining_paid, config.advance_ratio,
        ),
        state=state,
        label=PAYMENT_LABELS[state],
    )


def summarize_booking_payment(
    booking: BookingRecord,
    config: SlotEngineConfig | None = None,
) -> PaymentSummary:
    return summarize_payment(
        booking.total_turf_fee,
        booking.advance_paid,
        booking.remaining_paid,
        config=config,
    )
