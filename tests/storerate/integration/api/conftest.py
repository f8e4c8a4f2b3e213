"""Pytest fixtures for API integration tests.

Each test gets its own file-backed SQLite database. The administrator is
seeded on a private event loop before the app starts; the app then opens
its own engine inside the TestClient's loop through the lifespan, so no
connection ever crosses event loops.
"""

import asyncio

import pytest
from fastapi.testclient import TestClient
from pydantic import SecretStr

from storerate.presentation.api.app import API_V1_PREFIX, create_app
from storerate.presentation.cli.app import bootstrap_admin
from storerate_config.settings import Settings
from tests.shared.fixtures.api import (
    ADMIN_EMAIL,
    ADMIN_NAME,
    ADMIN_PASSWORD,
    TEST_JWT_SECRET,
    USER_PASSWORD,
    login,
)
from tests.shared.fixtures.database import sqlite_file_url


@pytest.fixture
def api_v1_prefix() -> str:
    """Get the API v1 prefix for building URLs."""
    return API_V1_PREFIX


@pytest.fixture
def api_settings(tmp_path) -> Settings:
    """Test API settings with debug enabled and fast password hashing."""
    return Settings(
        jwt_secret_key=SecretStr(TEST_JWT_SECRET),
        database_url_override=sqlite_file_url(tmp_path / "api.db"),
        api_debug=True,
        api_cors_origins="http://localhost:3000",
        bcrypt_rounds=4,
        log_level="WARNING",
    )


@pytest.fixture
def test_client(api_settings):
    """TestClient over a fresh database that already holds one admin."""
    asyncio.run(
        bootstrap_admin(api_settings, ADMIN_NAME, ADMIN_EMAIL, ADMIN_PASSWORD),
    )

    app = create_app(settings=api_settings)
    with TestClient(app) as client:
        yield client


@pytest.fixture
def admin_headers(test_client) -> dict:
    return login(test_client, ADMIN_EMAIL, ADMIN_PASSWORD)


@pytest.fixture
def create_user(test_client, admin_headers):
    """Create a user through the admin API and return (user_json, headers)."""

    def _create(email: str, role: str = "user", name: str | None = None):
        response = test_client.post(
            f"{API_V1_PREFIX}/users",
            json={
                "name": name or "Regular Test User Account",
                "email": email,
                "password": USER_PASSWORD,
                "address": "1 Test Street",
                "role": role,
            },
            headers=admin_headers,
        )
        assert response.status_code == 201, response.text
        return response.json(), login(test_client, email, USER_PASSWORD)

    return _create


@pytest.fixture
def create_store(test_client, admin_headers):
    """Create a store through the admin API and return its JSON."""

    def _create(email: str, owner_id: str | None = None):
        response = test_client.post(
            f"{API_V1_PREFIX}/stores",
            json={
                "name": "Neighbourhood Corner Store",
                "email": email,
                "address": "2 Main Street",
                "owner_id": owner_id,
            },
            headers=admin_headers,
        )
        assert response.status_code == 201, response.text
        return response.json()

    return _create
