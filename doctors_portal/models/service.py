"""Treatment service model."""

from sqlalchemy import JSON, Float, String
from sqlalchemy.orm import Mapped, mapped_column

from doctors_portal.db.base import Base, TimestampMixin


class Service(Base, TimestampMixin):
    """A bookable treatment with its daily slot template.

    ``slots`` is the ordered list of time labels the treatment can ever be
    booked into on any day.
    """

    __tablename__ = "services"

    name: Mapped[str] = mapped_column(
        String(255),
        unique=True,
        nullable=False,
        index=True,
    )
    price: Mapped[float] = mapped_column(
        Float,
        default=0,
        nullable=False,
    )
    slots: Mapped[list[str]] = mapped_column(
        JSON,
        default=list,
        nullable=False,
    )

    def __repr__(self) -> str:
        return f"<Service {self.name} ({len(self.slots or [])} slots)>"
