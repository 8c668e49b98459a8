"""Business logic services."""

from doctors_portal.services.booking import AdmissionResult, BookingService
from doctors_portal.services.catalogue import CatalogueService
from doctors_portal.services.doctors import DoctorService
from doctors_portal.services.payments import (
    PaymentGateway,
    PaymentService,
    ReconciliationResult,
    StripePaymentGateway,
)
from doctors_portal.services.users import UserDirectory

__all__ = [
    "AdmissionResult",
    "BookingService",
    "CatalogueService",
    "DoctorService",
    "PaymentGateway",
    "PaymentService",
    "ReconciliationResult",
    "StripePaymentGateway",
    "UserDirectory",
]
