"""Booking schemas."""

from datetime import datetime

from pydantic import Field

from doctors_portal.schemas.auth import LenientEmail
from doctors_portal.schemas.base import PortalSchema


class BookingCreate(PortalSchema):
    """Booking request submitted by a patient."""

    treatment: str = Field(min_length=1, max_length=255)
    date: str = Field(min_length=1, max_length=50)
    slot: str = Field(min_length=1, max_length=50)
    patient: LenientEmail
    patient_name: str | None = Field(default=None, max_length=255)
    phone: str | None = Field(default=None, max_length=50)
    price: float | None = Field(default=None, ge=0)


class BookingResponse(PortalSchema):
    """Stored booking."""

    id: str
    treatment: str
    date: str
    slot: str
    patient: str
    patient_name: str | None = None
    phone: str | None = None
    price: float | None = None
    paid: bool
    transaction_id: str | None = None
    paid_at: datetime | None = None


class AdmissionResponse(PortalSchema):
    """Outcome of a booking submission.

    ``existing`` is set when the patient already holds a booking for the same
    treatment and date; ``inserted`` is set when the booking was stored.
    """

    accepted: bool
    existing: BookingResponse | None = None
    inserted: BookingResponse | None = None
