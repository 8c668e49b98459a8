"""FastAPI dependency injection utilities.

Authorization guards raise ``PortalError`` subclasses before any handler
logic runs; ``main`` renders them as JSON.
"""

import logging
from typing import Annotated

from fastapi import Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession

from doctors_portal.core.config import settings
from doctors_portal.core.exceptions import (
    ForbiddenError,
    InvalidCredentialError,
    UnauthenticatedError,
)
from doctors_portal.core.security import TokenService
from doctors_portal.db.session import get_db
from doctors_portal.models.user import User
from doctors_portal.schemas.auth import TokenClaim
from doctors_portal.services.payments import PaymentGateway, StripePaymentGateway
from doctors_portal.services.users import UserDirectory

logger = logging.getLogger(__name__)


def get_token_service() -> TokenService:
    """Build the token service from application settings."""
    return TokenService.from_settings(settings)


def get_payment_gateway() -> PaymentGateway:
    """Build the payment gateway from application settings."""
    return StripePaymentGateway.from_settings(settings)


async def get_current_claim(
    request: Request,
    token_service: Annotated[TokenService, Depends(get_token_service)],
) -> TokenClaim:
    """Require a valid bearer token and return its claim.

    Raises:
        UnauthenticatedError: If no Authorization header was sent
        InvalidCredentialError: If the header is not "Bearer <token>" or the
            token is malformed, wrongly signed or expired
    """
    authorization = request.headers.get("Authorization")
    if not authorization:
        raise UnauthenticatedError()

    scheme, _, token = authorization.partition(" ")
    token = token.strip()
    if scheme.lower() != "bearer" or not token:
        raise InvalidCredentialError()

    return token_service.verify(token)


async def require_admin(
    claim: Annotated[TokenClaim, Depends(get_current_claim)],
    session: Annotated[AsyncSession, Depends(get_db)],
) -> User:
    """Require the authenticated caller to be an admin.

    A caller without a user record is treated like a non-admin.

    Raises:
        ForbiddenError: If the caller has no user record or is not an admin
    """
    user = await UserDirectory(session).get_by_email(claim.email)

    if user is None or not user.is_admin:
        logger.warning("Admin access denied", extra={"email": claim.email})
        raise ForbiddenError()

    return user


def ensure_self(claim: TokenClaim, email: str | None) -> None:
    """Require ``email`` to be the caller's own email, ignoring case.

    Raises:
        ForbiddenError: If the email is missing or belongs to someone else
    """
    if not email or email.lower() != claim.email.lower():
        raise ForbiddenError()


# Type aliases for cleaner dependency injection
CurrentClaim = Annotated[TokenClaim, Depends(get_current_claim)]
AdminUser = Annotated[User, Depends(require_admin)]
DbSession = Annotated[AsyncSession, Depends(get_db)]
Tokens = Annotated[TokenService, Depends(get_token_service)]
Payments = Annotated[PaymentGateway, Depends(get_payment_gateway)]
