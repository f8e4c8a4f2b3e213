"""API tests for dashboard statistics and the health endpoint."""

import pytest


def test_health(test_client):
    response = test_client.get("/health")

    assert response.status_code == 200
    assert response.json()["status"] == "healthy"


def test_admin_stats(
    test_client,
    api_v1_prefix,
    admin_headers,
    create_store,
    create_user,
):
    store = create_store("shop@example.com")
    for i, score in enumerate([5, 3]):
        _, headers = create_user(f"rater{i}@example.com")
        test_client.post(
            f"{api_v1_prefix}/ratings",
            json={"store_id": store["id"], "rating": score},
            headers=headers,
        )

    response = test_client.get(
        f"{api_v1_prefix}/dashboard/stats",
        headers=admin_headers,
    )

    assert response.status_code == 200
    assert response.json() == {"total_users": 3, "total_stores": 1, "total_ratings": 2}


def test_stats_are_admin_only(test_client, api_v1_prefix, create_user):
    _, headers = create_user("plain@example.com")

    response = test_client.get(f"{api_v1_prefix}/dashboard/stats", headers=headers)

    assert response.status_code == 403


def test_store_owner_stats(test_client, api_v1_prefix, create_user):
    _, owner_headers = create_user("owner@example.com", role="store_owner")
    own = test_client.get(f"{api_v1_prefix}/stores/me", headers=owner_headers).json()
    for i, score in enumerate([5, 4, 4]):
        _, headers = create_user(f"rater{i}@example.com")
        test_client.post(
            f"{api_v1_prefix}/ratings",
            json={"store_id": own["id"], "rating": score},
            headers=headers,
        )

    response = test_client.get(
        f"{api_v1_prefix}/dashboard/store",
        headers=owner_headers,
    )

    assert response.status_code == 200
    data = response.json()
    assert data["store_id"] == own["id"]
    assert data["total_ratings"] == 3
    assert data["average_rating"] == pytest.approx(13 / 3)
    assert data["distribution"] == [
        {"score": 5, "count": 1},
        {"score": 4, "count": 2},
    ]


def test_store_owner_stats_without_ratings(test_client, api_v1_prefix, create_user):
    _, owner_headers = create_user("owner@example.com", role="store_owner")

    response = test_client.get(
        f"{api_v1_prefix}/dashboard/store",
        headers=owner_headers,
    )

    assert response.json()["average_rating"] is None
    assert response.json()["total_ratings"] == 0
