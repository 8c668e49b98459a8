"""Booking rules: slot availability."""

from doctors_portal.booking.availability import (
    AvailableService,
    apply_availability,
    filter_available_slots,
)

__all__ = [
    "AvailableService",
    "apply_availability",
    "filter_available_slots",
]
