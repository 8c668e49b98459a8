"""Pydantic schemas for API request/response validation."""

from doctors_portal.schemas.auth import LenientEmail, TokenClaim
from doctors_portal.schemas.booking import AdmissionResponse, BookingCreate, BookingResponse
from doctors_portal.schemas.doctor import DeleteResult, DoctorCreate, DoctorResponse
from doctors_portal.schemas.payment import (
    PaymentConfirmation,
    PaymentIntentRequest,
    PaymentIntentResponse,
    PaymentResponse,
    ReconciliationResponse,
)
from doctors_portal.schemas.service import ServiceNameResponse, ServiceResponse
from doctors_portal.schemas.user import (
    AdminStatusResponse,
    UpdateResult,
    UpsertResult,
    UserProfileUpdate,
    UserResponse,
    UserSessionResponse,
)

__all__ = [
    # Auth
    "LenientEmail",
    "TokenClaim",
    # Services
    "ServiceResponse",
    "ServiceNameResponse",
    # Bookings
    "BookingCreate",
    "BookingResponse",
    "AdmissionResponse",
    # Payments
    "PaymentConfirmation",
    "PaymentResponse",
    "ReconciliationResponse",
    "PaymentIntentRequest",
    "PaymentIntentResponse",
    # Users
    "UserProfileUpdate",
    "UserResponse",
    "UserSessionResponse",
    "UpsertResult",
    "UpdateResult",
    "AdminStatusResponse",
    # Doctors
    "DoctorCreate",
    "DoctorResponse",
    "DeleteResult",
]
