"""Doctor registry."""

import logging
from collections.abc import Sequence

from sqlalchemy import delete, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from doctors_portal.core.exceptions import ConflictError
from doctors_portal.core.logging import audit_logger
from doctors_portal.models.doctor import Doctor
from doctors_portal.schemas.doctor import DoctorCreate

logger = logging.getLogger(__name__)


class DoctorService:
    """Service for registering and removing doctors."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def list_doctors(self) -> Sequence[Doctor]:
        result = await self.session.execute(select(Doctor).order_by(Doctor.created_at))
        return result.scalars().all()

    async def add_doctor(self, data: DoctorCreate, added_by: str) -> Doctor:
        """Register a doctor.

        Raises:
            ConflictError: If a doctor with the same email exists
        """
        doctor = Doctor(
            name=data.name,
            email=data.email,
            specialty=data.specialty,
            img=data.img,
        )
        self.session.add(doctor)

        try:
            await self.session.commit()
        except IntegrityError as exc:
            await self.session.rollback()
            raise ConflictError(f"Doctor {data.email} is already registered") from exc

        await self.session.refresh(doctor)

        audit_logger.log(
            action="doctor_added",
            actor=added_by,
            entity_type="doctor",
            entity_id=doctor.id,
            metadata={"email": doctor.email, "specialty": doctor.specialty},
        )
        return doctor

    async def remove_doctor(self, email: str) -> int:
        """Delete doctors by email and return how many were removed."""
        result = await self.session.execute(
            delete(Doctor).where(Doctor.email == email.lower())
        )
        await self.session.commit()

        if result.rowcount:
            audit_logger.log(
                action="doctor_removed",
                actor=None,
                entity_type="doctor",
                entity_id=email,
            )
        return result.rowcount
