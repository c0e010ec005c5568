from .turfs import OperatingWindow, BookingTypeCapacity, PricingShift, TurfDetails
from .bookings import (
    BookingStatus,
    BookingRecord,
    UnavailablePeriod,
    PaymentState,
    PaymentRequest,
    PaymentSummary,
)
from .slots import (
    DayPeriod,
    BookingTypeAvailability,
    SlotAvailability,
    AvailabilityView,
    BookingDay,
)
from .pricing import PriceLine, PriceQuote, PriceQuoteRequest

__all__ = [
    "OperatingWindow",
    "BookingTypeCapacity",
    "PricingShift",
    "TurfDetails",
    "BookingStatus",
    "BookingRecord",
    "UnavailablePeriod",
    "PaymentState",
    "PaymentRequest",
    "PaymentSummary",
    "DayPeriod",
    "BookingTypeAvailability",
    "SlotAvailability",
    "AvailabilityView",
    "BookingDay",
    "PriceLine",
    "PriceQuote",
    "PriceQuoteRequest",
]
