"""Doctor schemas."""

from pydantic import Field

from doctors_portal.schemas.auth import LenientEmail
from doctors_portal.schemas.base import PortalSchema


class DoctorCreate(PortalSchema):
    """Doctor registration request."""

    name: str = Field(min_length=1, max_length=255)
    email: LenientEmail
    specialty: str = Field(min_length=1, max_length=255)
    img: str | None = Field(default=None, max_length=1024)


class DoctorResponse(PortalSchema):
    """Stored doctor."""

    id: str
    name: str
    email: str
    specialty: str
    img: str | None = None


class DeleteResult(PortalSchema):
    """Store-level outcome of a delete by filter."""

    deleted_count: int
