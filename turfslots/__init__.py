"""Slot availability and payment reconciliation engine for turf bookings."""

__version__ = "0.1.0"
