"""Session token issuing and verification."""

from datetime import datetime, timedelta, timezone

from jose import JWTError, jwt
from pydantic import ValidationError

from doctors_portal.core.config import Settings
from doctors_portal.core.exceptions import InvalidCredentialError
from doctors_portal.schemas.auth import TokenClaim


class TokenService:
    """Issues and verifies signed identity tokens binding an email to a session.

    The signing secret is injected so tests can build a service with their own
    key instead of reading process configuration.
    """

    def __init__(
        self,
        secret_key: str,
        algorithm: str = "HS256",
        expires_delta: timedelta = timedelta(hours=1),
    ) -> None:
        self.secret_key = secret_key
        self.algorithm = algorithm
        self.expires_delta = expires_delta

    @classmethod
    def from_settings(cls, settings: Settings) -> "TokenService":
        return cls(
            secret_key=settings.secret_key,
            algorithm=settings.algorithm,
            expires_delta=timedelta(minutes=settings.access_token_expire_minutes),
        )

    def issue(self, email: str, expires_delta: timedelta | None = None) -> str:
        """Create a signed token for an email address.

        Args:
            email: Identity the token is bound to
            expires_delta: Optional override of the configured lifetime

        Returns:
            Encoded JWT string
        """
        now = datetime.now(timezone.utc)
        expire = now + (expires_delta if expires_delta is not None else self.expires_delta)

        to_encode = {
            "sub": email,
            "email": email,
            "iat": now,
            "exp": expire,
        }
        return jwt.encode(to_encode, self.secret_key, algorithm=self.algorithm)

    def verify(self, token: str) -> TokenClaim:
        """Decode and validate a token.

        Raises:
            InvalidCredentialError: If the signature, expiry or payload is invalid
        """
        try:
            payload = jwt.decode(token, self.secret_key, algorithms=[self.algorithm])
            return TokenClaim.model_validate(payload)
        except (JWTError, ValidationError) as exc:
            raise InvalidCredentialError() from exc
