"""Constants and helpers shared by the API integration tests."""

from fastapi.testclient import TestClient

from storerate.presentation.api.app import API_V1_PREFIX

TEST_JWT_SECRET = "test-jwt-secret-for-testing-only"  # NOQA: S105

ADMIN_NAME = "Platform Administrator Account"
ADMIN_EMAIL = "admin@example.com"
ADMIN_PASSWORD = "Admin#Pass1"  # NOQA: S105

USER_PASSWORD = "Secret#123"  # NOQA: S105


def login(client: TestClient, email: str, password: str) -> dict:
    """Log in and return Authorization headers."""
    response = client.post(
        f"{API_V1_PREFIX}/auth/login",
        json={"email": email, "password": password},
    )
    assert response.status_code == 200, response.text
    return {"Authorization": f"Bearer {response.json()['access_token']}"}
