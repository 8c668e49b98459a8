"""Portal user model."""

from enum import Enum
from typing import Any

from sqlalchemy import JSON, String
from sqlalchemy.orm import Mapped, mapped_column

from doctors_portal.db.base import Base, TimestampMixin


class UserRole(str, Enum):
    """Elevated roles. Users without a role are patients."""

    ADMIN = "admin"


class User(Base, TimestampMixin):
    """User record keyed by email.

    Created or refreshed on every login. ``role`` is written only by
    the admin promotion flow.
    """

    __tablename__ = "users"

    email: Mapped[str] = mapped_column(
        String(255),
        unique=True,
        nullable=False,
        index=True,
    )
    name: Mapped[str | None] = mapped_column(
        String(255),
        nullable=True,
    )
    role: Mapped[str | None] = mapped_column(
        String(50),
        nullable=True,
    )
    # Any other profile fields sent by the client on login
    profile: Mapped[dict[str, Any]] = mapped_column(
        JSON,
        default=dict,
        nullable=False,
    )

    @property
    def is_admin(self) -> bool:
        return self.role == UserRole.ADMIN.value

    def __repr__(self) -> str:
        return f"<User {self.email} ({self.role or 'patient'})>"
