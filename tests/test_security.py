"""Tests for session token issuing and verification."""

from datetime import timedelta

import pytest
from jose import jwt

from doctors_portal.core.exceptions import InvalidCredentialError
from doctors_portal.core.security import TokenService


@pytest.fixture
def tokens() -> TokenService:
    return TokenService(secret_key="unit-test-secret")


def test_issue_then_verify_returns_email_claim(tokens: TokenService) -> None:
    claim = tokens.verify(tokens.issue("a@x.com"))

    assert claim.email == "a@x.com"
    assert claim.exp > claim.iat


def test_default_lifetime_is_one_hour(tokens: TokenService) -> None:
    claim = tokens.verify(tokens.issue("a@x.com"))

    assert claim.exp - claim.iat == 3600


def test_expired_token_is_rejected(tokens: TokenService) -> None:
    token = tokens.issue("a@x.com", expires_delta=timedelta(seconds=-10))

    with pytest.raises(InvalidCredentialError):
        tokens.verify(token)


def test_token_signed_with_other_secret_is_rejected(tokens: TokenService) -> None:
    forged = TokenService(secret_key="someone-else").issue("a@x.com")

    with pytest.raises(InvalidCredentialError):
        tokens.verify(forged)


def test_garbage_token_is_rejected(tokens: TokenService) -> None:
    with pytest.raises(InvalidCredentialError):
        tokens.verify("not-a-jwt")


def test_token_without_email_is_rejected(tokens: TokenService) -> None:
    token = jwt.encode({"sub": "a@x.com", "iat": 0, "exp": 4102444800}, "unit-test-secret")

    with pytest.raises(InvalidCredentialError):
        tokens.verify(token)
