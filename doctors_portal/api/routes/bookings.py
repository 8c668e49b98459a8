"""Booking endpoints: submission, listing and payment reconciliation."""

from fastapi import APIRouter, Query

from doctors_portal.api.deps import CurrentClaim, DbSession, ensure_self
from doctors_portal.core.exceptions import NotFoundError
from doctors_portal.schemas.booking import AdmissionResponse, BookingCreate, BookingResponse
from doctors_portal.schemas.payment import (
    PaymentConfirmation,
    PaymentResponse,
    ReconciliationResponse,
)
from doctors_portal.services.booking import BookingService
from doctors_portal.services.payments import PaymentService

router = APIRouter()


@router.get(
    "/booking",
    response_model=list[BookingResponse],
    summary="List my bookings",
    description="List the caller's own bookings; `patient` must be the caller's email",
)
async def list_bookings(
    claim: CurrentClaim,
    session: DbSession,
    patient: str | None = Query(None),
) -> list[BookingResponse]:
    ensure_self(claim, patient)

    bookings = await BookingService(session).list_patient_bookings(patient)
    return [BookingResponse.model_validate(b) for b in bookings]


@router.get(
    "/booking/{booking_id}",
    response_model=BookingResponse,
    summary="Get booking",
)
async def get_booking(
    booking_id: str,
    claim: CurrentClaim,
    session: DbSession,
) -> BookingResponse:
    booking = await BookingService(session).get_booking(booking_id)

    if booking is None:
        raise NotFoundError(f"Booking {booking_id} not found")

    return BookingResponse.model_validate(booking)


@router.post(
    "/booking",
    response_model=AdmissionResponse,
    summary="Submit booking",
    description=(
        "Book a slot. A patient can hold one booking per treatment per day; "
        "a duplicate is not stored and the existing booking is returned."
    ),
)
async def submit_booking(data: BookingCreate, session: DbSession) -> AdmissionResponse:
    result = await BookingService(session).submit_booking(data)

    return AdmissionResponse(
        accepted=result.accepted,
        existing=BookingResponse.model_validate(result.existing) if result.existing else None,
        inserted=BookingResponse.model_validate(result.inserted) if result.inserted else None,
    )


@router.patch(
    "/booking/{booking_id}",
    response_model=ReconciliationResponse,
    summary="Confirm payment",
    description="Record a completed payment and mark the booking paid",
)
async def confirm_payment(
    booking_id: str,
    confirmation: PaymentConfirmation,
    claim: CurrentClaim,
    session: DbSession,
) -> ReconciliationResponse:
    """Attach payment evidence to a booking.

    ``matchedCount`` is 0 when the booking does not exist; the payment
    record is stored either way.
    """
    result = await PaymentService(session).reconcile(
        booking_id, confirmation, actor=claim.email
    )

    return ReconciliationResponse(
        matched_count=result.matched_count,
        payment=PaymentResponse.model_validate(result.payment),
        booking=BookingResponse.model_validate(result.booking) if result.booking else None,
    )
