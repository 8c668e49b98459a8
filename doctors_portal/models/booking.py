"""Patient booking model."""

from datetime import datetime

from sqlalchemy import Boolean, DateTime, Float, String, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column

from doctors_portal.db.base import Base, TimestampMixin


class Booking(Base, TimestampMixin):
    """A patient's booking of one slot of a treatment on a date.

    A patient holds at most one booking per treatment per day.
    """

    __tablename__ = "bookings"
    __table_args__ = (
        UniqueConstraint(
            "treatment",
            "date",
            "patient",
            name="uq_bookings_treatment_date_patient",
        ),
    )

    treatment: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
        index=True,
    )
    # Calendar label as sent by the client, e.g. "2024-01-01"
    date: Mapped[str] = mapped_column(
        String(50),
        nullable=False,
        index=True,
    )
    slot: Mapped[str] = mapped_column(
        String(50),
        nullable=False,
    )
    patient: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
        index=True,
    )
    patient_name: Mapped[str | None] = mapped_column(
        String(255),
        nullable=True,
    )
    phone: Mapped[str | None] = mapped_column(
        String(50),
        nullable=True,
    )
    price: Mapped[float | None] = mapped_column(
        Float,
        nullable=True,
    )

    # Payment state
    paid: Mapped[bool] = mapped_column(
        Boolean,
        default=False,
        nullable=False,
    )
    transaction_id: Mapped[str | None] = mapped_column(
        String(255),
        nullable=True,
    )
    paid_at: Mapped[datetime | None] = mapped_column(
        DateTime(timezone=True),
        nullable=True,
    )

    def __repr__(self) -> str:
        return f"<Booking {self.treatment} {self.date} {self.slot} ({self.patient})>"
