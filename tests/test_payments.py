from decimal import Decimal

import pytest

from conftest import make_booking
from turfslots.config import SlotEngineConfig
from turfslots.schemas import PaymentState
from turfslots.services.payments import (
    compute_remaining_amount,
    payment_state,
    summarize_booking_payment,
    summarize_payment,
)


@pytest.mark.parametrize(
    "advance_paid, remaining_paid, expected",
    [
        (True, True, Decimal("0")),
        (True, False, Decimal("500")),
        (False, False, Decimal("1000")),
        (False, True, Decimal("500")),
    ],
)
def test_remaining_amount_table(advance_paid, remaining_paid, expected):
    assert compute_remaining_amount(1100, 100, advance_paid, remaining_paid) == expected


def test_remaining_amount_accepts_strings_and_rounds():
    assert compute_remaining_amount("1333.33", "100", True, False) == Decimal("616.67")


def test_remaining_amount_is_two_place_decimal():
    amount = compute_remaining_amount(Decimal("1100"), Decimal("100"), False, False)

    assert isinstance(amount, Decimal)
    assert amount.as_tuple().exponent == -2


def test_platform_fee_above_total_clamps_to_zero():
    assert compute_remaining_amount(50, 100, False, False) == 0


def test_custom_advance_ratio():
    assert compute_remaining_amount(1100, 100, True, False, Decimal("0.3")) == Decimal("700")
    assert compute_remaining_amount(1100, 100, False, True, Decimal("0.3")) == Decimal("300")


@pytest.mark.parametrize(
    "advance_paid, remaining_paid, state",
    [
        (True, True, PaymentState.PAID),
        (True, False, PaymentState.ADVANCE_PAID),
        (False, True, PaymentState.REMAINING_PAID),
        (False, False, PaymentState.UNPAID),
    ],
)
def test_payment_state(advance_paid, remaining_paid, state):
    assert payment_state(advance_paid, remaining_paid) is state


def test_summarize_payment_uses_configured_platform_fee(config):
    summary = summarize_payment(1100, True, False, config=config)

    assert summary.platform_fee == Decimal("100")
    assert summary.actual_fee == Decimal("1000")
    assert summary.advance_amount == Decimal("500")
    assert summary.remaining_amount == Decimal("500")
    assert summary.state is PaymentState.ADVANCE_PAID
    assert summary.label == "Advance paid"


def test_summarize_payment_explicit_platform_fee_wins(config):
    summary = summarize_payment(1100, False, False, platform_fee=0, config=config)

    assert summary.remaining_amount == Decimal("1100")


def test_summarize_booking_payment():
    booking = make_booking(
        "b1", "18:00", "19:00",
        total_turf_fee=Decimal("2100"),
        advance_paid=True,
        remaining_paid=True,
    )

    summary = summarize_booking_payment(booking, SlotEngineConfig(platform_fee=Decimal("100")))

    assert summary.remaining_amount == 0
    assert summary.state is PaymentState.PAID
