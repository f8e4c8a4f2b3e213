"""API tests for registration, login and token handling."""

from datetime import timedelta
from uuid import uuid4

from storerate_identity.services import JWTService
from tests.shared.fixtures.api import (
    ADMIN_EMAIL,
    ADMIN_PASSWORD,
    TEST_JWT_SECRET,
    USER_PASSWORD,
    login,
)

REGISTRATION = {
    "name": "Newly Registered Customer",
    "email": "new@example.com",
    "password": USER_PASSWORD,
    "address": "3 Elm Road",
}


def test_register_creates_normal_user(test_client, api_v1_prefix):
    response = test_client.post(f"{api_v1_prefix}/auth/register", json=REGISTRATION)

    assert response.status_code == 201
    data = response.json()
    assert data["role"] == "user"
    assert data["email"] == "new@example.com"
    assert "password" not in data
    assert "password_hash" not in data


def test_register_duplicate_email(test_client, api_v1_prefix):
    test_client.post(f"{api_v1_prefix}/auth/register", json=REGISTRATION)

    duplicate = {**REGISTRATION, "email": "NEW@example.com"}
    response = test_client.post(f"{api_v1_prefix}/auth/register", json=duplicate)

    assert response.status_code == 409
    assert response.json()["code"] == "DUPLICATE_EMAIL"


def test_register_reports_every_invalid_field(test_client, api_v1_prefix):
    response = test_client.post(
        f"{api_v1_prefix}/auth/register",
        json={"name": "Too short", "email": "bad", "password": "weak"},
    )

    assert response.status_code == 400
    body = response.json()
    assert body["code"] == "VALIDATION_ERROR"
    fields = {error["field"] for error in body["errors"]}
    assert {"name", "email", "password"} <= fields


def test_register_missing_field_is_400(test_client, api_v1_prefix):
    response = test_client.post(
        f"{api_v1_prefix}/auth/register",
        json={"email": "x@example.com"},
    )

    assert response.status_code == 400
    assert response.json()["code"] == "VALIDATION_ERROR"


def test_login_and_me(test_client, api_v1_prefix):
    test_client.post(f"{api_v1_prefix}/auth/register", json=REGISTRATION)
    headers = login(test_client, "new@example.com", USER_PASSWORD)

    response = test_client.get(f"{api_v1_prefix}/auth/me", headers=headers)

    assert response.status_code == 200
    assert response.json()["name"] == REGISTRATION["name"]


def test_login_failures_look_the_same(test_client, api_v1_prefix):
    wrong_password = test_client.post(
        f"{api_v1_prefix}/auth/login",
        json={"email": ADMIN_EMAIL, "password": "Wrong#Pass1"},
    )
    unknown_email = test_client.post(
        f"{api_v1_prefix}/auth/login",
        json={"email": "ghost@example.com", "password": ADMIN_PASSWORD},
    )

    assert wrong_password.status_code == unknown_email.status_code == 401
    assert wrong_password.json() == unknown_email.json()


def test_missing_token_is_401(test_client, api_v1_prefix):
    response = test_client.get(f"{api_v1_prefix}/auth/me")

    assert response.status_code == 401
    assert response.headers["www-authenticate"] == "Bearer"


def test_expired_token_is_401_not_403(test_client, api_v1_prefix, admin_headers):
    me = test_client.get(f"{api_v1_prefix}/auth/me", headers=admin_headers).json()
    expired = JWTService(TEST_JWT_SECRET).create_access_token(
        me["id"],
        me["name"],
        me["email"],
        me["role"],
        expires_delta=timedelta(seconds=-10),
    )

    response = test_client.get(
        f"{api_v1_prefix}/users",
        headers={"Authorization": f"Bearer {expired}"},
    )

    assert response.status_code == 401


def test_token_for_deleted_user_is_401(test_client, api_v1_prefix):
    token = JWTService(TEST_JWT_SECRET).create_access_token(
        uuid4(),
        "Someone Who Was Deleted",
        "gone@example.com",
        "admin",
    )

    response = test_client.get(
        f"{api_v1_prefix}/users",
        headers={"Authorization": f"Bearer {token}"},
    )

    assert response.status_code == 401


def test_change_password(test_client, api_v1_prefix, create_user):
    _, headers = create_user("changer@example.com")

    wrong = test_client.put(
        f"{api_v1_prefix}/auth/password",
        json={"current_password": "Wrong#Pass1", "new_password": "Better#Pass2"},
        headers=headers,
    )
    assert wrong.status_code == 400

    weak = test_client.put(
        f"{api_v1_prefix}/auth/password",
        json={"currentPassword": USER_PASSWORD, "newPassword": "alllowercase"},
        headers=headers,
    )
    assert weak.status_code == 400
    assert weak.json()["code"] == "VALIDATION_ERROR"

    ok = test_client.put(
        f"{api_v1_prefix}/auth/password",
        json={"current_password": USER_PASSWORD, "new_password": "Better#Pass2"},
        headers=headers,
    )
    assert ok.status_code == 200
    login(test_client, "changer@example.com", "Better#Pass2")
