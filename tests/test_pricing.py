from decimal import Decimal

import pytest

from conftest import MONDAY
from turfslots.config import SlotEngineConfig
from turfslots.exceptions import ParseError
from turfslots.schemas import PricingShift
from turfslots.services.pricing import calculate_price, to_money
from turfslots.services.slots.shifts import shift_for_time

PEAK = PricingShift(
    day_of_week=1, start_time="19:00", end_time="23:00",
    hourly_rate=Decimal("1500"), shift_name="Peak",
)
LATE = PricingShift(
    day_of_week=2, start_time="22:00", end_time="02:00",
    hourly_rate=Decimal("700"), shift_name="Late",
)


def test_to_money():
    assert to_money(10) == Decimal("10.00")
    assert to_money(0.1 + 0.2) == Decimal("0.30")
    assert to_money("2.345") == Decimal("2.35")


class TestShiftForTime:

    def test_matches_weekday_and_time(self):
        assert shift_for_time([PEAK], 1, "19:00") == PEAK
        assert shift_for_time([PEAK], 1, "23:00") is None
        assert shift_for_time([PEAK], 2, "20:00") is None

    def test_wrapping_shift(self):
        assert shift_for_time([LATE], 2, "01:00") == LATE
        assert shift_for_time([LATE], 2, "12:00") is None


class TestCalculatePrice:

    def test_base_rate(self, five_a_side, config):
        quote = calculate_price(five_a_side, MONDAY, "17:00", "19:00", config=config)

        assert quote.number_of_slots == 2
        assert quote.duration_hours == Decimal("2")
        assert quote.turf_fee == Decimal("2400")
        assert quote.platform_fee == Decimal("100")
        assert quote.total_fee == Decimal("2500")
        assert quote.advance_amount == Decimal("1200")
        assert quote.remaining_amount == Decimal("1200")
        assert [line.period for line in quote.breakdown] == ["17:00-18:00", "18:00-19:00"]

    def test_shift_rates(self, five_a_side, config):
        quote = calculate_price(
            five_a_side, MONDAY, "18:00", "20:00", pricing_shifts=[PEAK], config=config,
        )

        assert [line.rate for line in quote.breakdown] == [Decimal("1200"), Decimal("1500")]
        assert [line.shift for line in quote.breakdown] == [None, "Peak"]
        assert quote.turf_fee == Decimal("2700")
        assert quote.hourly_rate == Decimal("1350")

    def test_half_hour_slots(self, five_a_side):
        quote = calculate_price(
            five_a_side, MONDAY, "18:00", "19:30", config=SlotEngineConfig(slot_step_minutes=30),
        )

        assert quote.number_of_slots == 3
        assert quote.turf_fee == Decimal("1800")
        assert quote.duration_hours == Decimal("1.5")

    def test_partial_hour_keeps_hourly_rate(self, five_a_side, config):
        quote = calculate_price(five_a_side, MONDAY, "09:00", "09:20", config=config)

        assert quote.number_of_slots == 1
        assert quote.duration_hours == Decimal("0.33")
        assert quote.turf_fee == Decimal("400")
        assert quote.hourly_rate == Decimal("1200.00")

    def test_overnight_booking_uses_next_day_shift(self, five_a_side, config):
        quote = calculate_price(
            five_a_side, MONDAY, "23:00", "01:00", pricing_shifts=[LATE], config=config,
        )

        assert [line.period for line in quote.breakdown] == ["23:00-00:00", "00:00-01:00"]
        assert [line.shift for line in quote.breakdown] == [None, "Late"]
        assert quote.turf_fee == Decimal("1900")

    def test_payment_reconciliation_agrees_with_quote(self, five_a_side, config):
        from turfslots.services.payments import compute_remaining_amount

        quote = calculate_price(five_a_side, MONDAY, "17:00", "19:00", config=config)

        assert compute_remaining_amount(
            quote.total_fee, quote.platform_fee, True, False,
        ) == quote.remaining_amount

    def test_empty_range_rejected(self, five_a_side, config):
        with pytest.raises(ValueError):
            calculate_price(five_a_side, MONDAY, "18:00", "18:00", config=config)

    def test_malformed_time(self, five_a_side, config):
        with pytest.raises(ParseError):
            calculate_price(five_a_side, MONDAY, "6pm", "19:00", config=config)
