"""Booking service: slot availability and booking admission.

A patient may hold one booking per treatment per day. Duplicate
submissions are reported back to the caller and are not stored; the
``(treatment, date, patient)`` unique constraint on the bookings table
settles concurrent submissions that both pass the existence check.
"""

import logging
from collections.abc import Sequence
from dataclasses import dataclass

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from doctors_portal.booking.availability import AvailableService, apply_availability
from doctors_portal.core.logging import audit_logger
from doctors_portal.models.booking import Booking
from doctors_portal.services.catalogue import CatalogueService
from doctors_portal.schemas.booking import BookingCreate

logger = logging.getLogger(__name__)


@dataclass
class AdmissionResult:
    """Outcome of a booking submission.

    Attributes:
        accepted: Whether the booking was stored
        existing: Prior booking for the same treatment, date and patient
        inserted: Newly stored booking
    """

    accepted: bool
    existing: Booking | None = None
    inserted: Booking | None = None


class BookingService:
    """Service for computing availability and admitting bookings."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def compute_availability(self, date: str | None) -> list[AvailableService]:
        """Compute open slots of every service for a date.

        Without a date no bookings are considered and every service comes
        back with its full template.

        Args:
            date: Calendar date label, e.g. "2024-01-01"

        Returns:
            Services with slots narrowed to those not yet booked
        """
        services = await CatalogueService(self.session).list_services()

        if not date:
            logger.warning("Availability requested without a date; no date filter applied")
            return apply_availability(services, [])

        bookings = await self.list_bookings_for_date(date)
        return apply_availability(services, bookings)

    async def list_bookings_for_date(self, date: str) -> Sequence[Booking]:
        """List all bookings on a date."""
        result = await self.session.execute(
            select(Booking).where(Booking.date == date)
        )
        return result.scalars().all()

    async def find_duplicate(self, treatment: str, date: str, patient: str) -> Booking | None:
        """Find a booking with the same treatment, date and patient."""
        result = await self.session.execute(
            select(Booking).where(
                Booking.treatment == treatment,
                Booking.date == date,
                Booking.patient == patient,
            )
        )
        return result.scalars().first()

    async def submit_booking(self, data: BookingCreate) -> AdmissionResult:
        """Admit a booking unless the patient already booked this treatment that day.

        Args:
            data: Validated booking request

        Returns:
            AdmissionResult with either the stored booking or the existing one
        """
        existing = await self.find_duplicate(data.treatment, data.date, data.patient)
        if existing is not None:
            logger.info(
                f"Duplicate booking rejected: {data.treatment} on {data.date} "
                f"for {data.patient}"
            )
            return AdmissionResult(accepted=False, existing=existing)

        booking = Booking(
            treatment=data.treatment,
            date=data.date,
            slot=data.slot,
            patient=data.patient,
            patient_name=data.patient_name,
            phone=data.phone,
            price=data.price,
        )
        self.session.add(booking)

        try:
            await self.session.commit()
        except IntegrityError:
            # Lost the race against a concurrent identical submission
            await self.session.rollback()
            winner = await self.find_duplicate(data.treatment, data.date, data.patient)
            logger.info(
                f"Concurrent duplicate booking rejected: {data.treatment} on "
                f"{data.date} for {data.patient}"
            )
            return AdmissionResult(accepted=False, existing=winner)

        await self.session.refresh(booking)

        audit_logger.log(
            action="booking_created",
            actor=data.patient,
            entity_type="booking",
            entity_id=booking.id,
            metadata={"treatment": booking.treatment, "date": booking.date, "slot": booking.slot},
        )
        return AdmissionResult(accepted=True, inserted=booking)

    async def list_patient_bookings(self, patient: str) -> Sequence[Booking]:
        """List a patient's bookings, oldest first."""
        result = await self.session.execute(
            select(Booking)
            .where(Booking.patient == patient.lower())
            .order_by(Booking.created_at)
        )
        return result.scalars().all()

    async def get_booking(self, booking_id: str) -> Booking | None:
        """Get a booking by id."""
        return await self.session.get(Booking, booking_id)
