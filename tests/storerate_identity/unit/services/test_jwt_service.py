"""Unit tests for JWTService."""

from datetime import datetime, timedelta, timezone
from uuid import uuid4

import jwt
import pytest

from storerate_identity.exceptions import InvalidTokenError
from storerate_identity.services import JWTService

SECRET = "test-jwt-secret-for-testing-only"


@pytest.fixture
def service():
    return JWTService(secret_key=SECRET)


def test_round_trip_claims(service):
    user_id = uuid4()
    token = service.create_access_token(
        user_id,
        "Regular Test User Account",
        "user@example.com",
        "user",
    )

    payload = service.verify_token(token)

    assert payload.user_id == user_id
    assert payload.name == "Regular Test User Account"
    assert payload.email == "user@example.com"
    assert payload.role == "user"
    assert payload.exp > datetime.now(tz=timezone.utc)


def test_token_is_hs256(service):
    token = service.create_access_token(uuid4(), "n", "a@b.io", "user")

    assert jwt.get_unverified_header(token)["alg"] == "HS256"


def test_default_expiry_is_24_hours(service):
    token = service.create_access_token(uuid4(), "n", "a@b.io", "user")

    claims = jwt.decode(token, SECRET, algorithms=["HS256"])
    assert claims["exp"] - claims["iat"] == 24 * 3600


def test_expired_token_rejected(service):
    token = service.create_access_token(
        uuid4(),
        "n",
        "a@b.io",
        "user",
        expires_delta=timedelta(seconds=-1),
    )

    with pytest.raises(InvalidTokenError, match="expired"):
        service.verify_token(token)


def test_wrong_signature_rejected(service):
    other = JWTService(secret_key="some-other-secret")
    token = other.create_access_token(uuid4(), "n", "a@b.io", "admin")

    with pytest.raises(InvalidTokenError):
        service.verify_token(token)


@pytest.mark.parametrize("token", ["", "not-a-jwt", "a.b.c"])
def test_malformed_tokens_rejected(service, token):
    with pytest.raises(InvalidTokenError):
        service.verify_token(token)


def test_token_without_subject_rejected(service):
    token = jwt.encode(
        {"email": "a@b.io", "role": "user", "exp": 9999999999},
        SECRET,
        algorithm="HS256",
    )

    with pytest.raises(InvalidTokenError):
        service.verify_token(token)


def test_empty_secret_not_allowed():
    with pytest.raises(ValueError, match="cannot be empty"):
        JWTService(secret_key="")
