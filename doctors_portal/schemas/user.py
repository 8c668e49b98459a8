"""User schemas."""

from typing import Any

from pydantic import ConfigDict, Field

from doctors_portal.schemas.base import PortalSchema

# Fields a client may never set through the profile upsert
PROTECTED_PROFILE_FIELDS = frozenset({"id", "email", "role"})


class UserProfileUpdate(PortalSchema):
    """Profile fields sent on login. Unknown fields are stored in ``profile``."""

    model_config = ConfigDict(extra="allow")

    name: str | None = Field(default=None, max_length=255)

    @property
    def extra_fields(self) -> dict[str, Any]:
        return {
            key: value
            for key, value in (self.model_extra or {}).items()
            if key not in PROTECTED_PROFILE_FIELDS
        }


class UserResponse(PortalSchema):
    """Stored user record."""

    id: str
    email: str
    name: str | None = None
    role: str | None = None
    profile: dict[str, Any]


class UpsertResult(PortalSchema):
    """Store-level outcome of a user upsert."""

    matched_count: int
    upserted_id: str | None = None


class UserSessionResponse(PortalSchema):
    """Upsert outcome plus a fresh session token."""

    result: UpsertResult
    token: str


class AdminStatusResponse(PortalSchema):
    """Whether an email belongs to an admin."""

    admin: bool


class UpdateResult(PortalSchema):
    """Store-level outcome of an update by filter."""

    matched_count: int
    modified_count: int
