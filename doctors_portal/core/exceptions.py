"""Application error taxonomy.

Every error carries the HTTP status it maps to and a machine-readable code.
The API layer renders them as ``{"message": ..., "code": ...}``.
"""

from fastapi import status


class PortalError(Exception):
    """Base class for errors surfaced to API callers."""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR
    code: str = "internal_error"
    default_message: str = "Internal server error"

    def __init__(self, message: str | None = None) -> None:
        self.message = message or self.default_message
        super().__init__(self.message)

    def to_dict(self) -> dict[str, str]:
        return {"message": self.message, "code": self.code}


class UnauthenticatedError(PortalError):
    """No credential was supplied.

    Maps to 403 rather than 401; existing clients depend on that status.
    """

    status_code = status.HTTP_403_FORBIDDEN
    code = "unauthenticated"
    default_message = "Unauthorized access"


class InvalidCredentialError(PortalError):
    """A credential was supplied but its signature or expiry is invalid."""

    status_code = status.HTTP_401_UNAUTHORIZED
    code = "invalid_credential"
    default_message = "Invalid or expired credential"


class ForbiddenError(PortalError):
    """Authenticated caller lacks the role or ownership required."""

    status_code = status.HTTP_403_FORBIDDEN
    code = "forbidden"
    default_message = "Forbidden access"


class NotFoundError(PortalError):
    """Requested record does not exist."""

    status_code = status.HTTP_404_NOT_FOUND
    code = "not_found"
    default_message = "Not found"


class PaymentGatewayError(PortalError):
    """The payment processor rejected or failed the request."""

    status_code = status.HTTP_502_BAD_GATEWAY
    code = "payment_gateway_error"
    default_message = "Payment processor request failed"


class ConflictError(PortalError):
    """A record with the same unique key already exists."""

    status_code = status.HTTP_409_CONFLICT
    code = "conflict"
    default_message = "Record already exists"
