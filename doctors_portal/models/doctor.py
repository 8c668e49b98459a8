"""Doctor model."""

from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column

from doctors_portal.db.base import Base, TimestampMixin


class Doctor(Base, TimestampMixin):
    """Doctor registered by an administrator."""

    __tablename__ = "doctors"

    name: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
    )
    email: Mapped[str] = mapped_column(
        String(255),
        unique=True,
        nullable=False,
        index=True,
    )
    # Name of the treatment service the doctor provides
    specialty: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
    )
    img: Mapped[str | None] = mapped_column(
        String(1024),
        nullable=True,
    )

    def __repr__(self) -> str:
        return f"<Doctor {self.email} ({self.specialty})>"
