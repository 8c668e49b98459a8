"""Payment confirmation record."""

from typing import Any

from sqlalchemy import JSON, Float, String
from sqlalchemy.orm import Mapped, mapped_column

from doctors_portal.db.base import Base, TimestampMixin


class Payment(Base, TimestampMixin):
    """Evidence of a completed payment.

    Append-only: written once per confirmation and never updated.
    """

    __tablename__ = "payments"

    booking_id: Mapped[str] = mapped_column(
        String(36),
        nullable=False,
        index=True,
    )
    transaction_id: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
        index=True,
    )
    amount: Mapped[float | None] = mapped_column(
        Float,
        nullable=True,
    )
    # Opaque fields forwarded from the payment confirmation
    details: Mapped[dict[str, Any]] = mapped_column(
        JSON,
        default=dict,
        nullable=False,
    )

    def __repr__(self) -> str:
        return f"<Payment {self.transaction_id} booking={self.booking_id}>"
