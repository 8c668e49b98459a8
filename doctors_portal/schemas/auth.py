"""Authentication schemas."""

import re
from typing import Annotated

from pydantic import AfterValidator, BaseModel


def validate_email_lenient(v: str) -> str:
    """Validate email with lenient rules that allow .local domains for testing."""
    if not v or "@" not in v:
        raise ValueError("Invalid email address")
    pattern = r"^[a-zA-Z0-9._%+-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,}$"
    if not re.match(pattern, v):
        raise ValueError("Invalid email address format")
    return v.lower()


LenientEmail = Annotated[str, AfterValidator(validate_email_lenient)]


class TokenClaim(BaseModel):
    """Decoded identity claim carried by a session token."""

    email: str
    iat: int
    exp: int
