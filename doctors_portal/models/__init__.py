"""Database models for the Doctors Portal."""

from doctors_portal.models.booking import Booking
from doctors_portal.models.doctor import Doctor
from doctors_portal.models.payment import Payment
from doctors_portal.models.service import Service
from doctors_portal.models.user import User, UserRole

__all__ = [
    # Catalogue
    "Service",
    "Doctor",
    # Users
    "User",
    "UserRole",
    # Bookings & payments
    "Booking",
    "Payment",
]
