"""API tests for store management and the store owner views."""

import pytest


def test_admin_creates_store(test_client, api_v1_prefix, create_store):
    store = create_store("Shop@Example.com")

    assert store["email"] == "shop@example.com"
    assert store["active"] is True
    assert store["owner_id"] is None
    assert store["average_rating"] is None
    assert store["rating_count"] == 0


def test_store_with_owner_promotes_user(
    test_client,
    api_v1_prefix,
    admin_headers,
    create_store,
    create_user,
):
    user, headers = create_user("future-owner@example.com")

    store = create_store("owned@example.com", owner_id=user["id"])

    assert store["owner_id"] == user["id"]
    me = test_client.get(f"{api_v1_prefix}/auth/me", headers=headers).json()
    assert me["role"] == "store_owner"
    own = test_client.get(f"{api_v1_prefix}/stores/me", headers=headers).json()
    assert own["id"] == store["id"]


def test_owner_with_active_store_conflicts(
    test_client,
    api_v1_prefix,
    admin_headers,
    create_user,
):
    owner, _ = create_user("owner@example.com", role="store_owner")

    response = test_client.post(
        f"{api_v1_prefix}/stores",
        json={
            "name": "A Second Store For Owner",
            "email": "second@example.com",
            "owner_id": owner["id"],
        },
        headers=admin_headers,
    )

    assert response.status_code == 409
    assert response.json()["code"] == "STORE_ALREADY_OWNED"


def test_former_owner_with_deactivated_store_conflicts(
    test_client,
    api_v1_prefix,
    admin_headers,
    create_user,
):
    owner, _ = create_user("owner@example.com", role="store_owner")
    test_client.put(
        f"{api_v1_prefix}/users/{owner['id']}",
        json={"role": "user"},
        headers=admin_headers,
    )

    response = test_client.post(
        f"{api_v1_prefix}/stores",
        json={
            "name": "A Second Store For Owner",
            "email": "second@example.com",
            "owner_id": owner["id"],
        },
        headers=admin_headers,
    )

    assert response.status_code == 409
    assert response.json()["code"] == "STORE_ALREADY_OWNED"
    stores = test_client.get(f"{api_v1_prefix}/stores", headers=admin_headers).json()
    assert len([s for s in stores if s["owner_id"] == owner["id"]]) == 1
    user = test_client.get(
        f"{api_v1_prefix}/users/{owner['id']}",
        headers=admin_headers,
    ).json()
    assert user["role"] == "user"


def test_former_owner_cannot_update_store(
    test_client,
    api_v1_prefix,
    admin_headers,
    create_user,
):
    owner, headers = create_user("owner@example.com", role="store_owner")
    store = test_client.get(f"{api_v1_prefix}/stores/me", headers=headers).json()
    test_client.put(
        f"{api_v1_prefix}/users/{owner['id']}",
        json={"role": "user"},
        headers=admin_headers,
    )

    response = test_client.put(
        f"{api_v1_prefix}/stores/{store['id']}",
        json={"address": "7 High Street"},
        headers=headers,
    )

    assert response.status_code == 403


def test_unknown_owner(test_client, api_v1_prefix, admin_headers):
    response = test_client.post(
        f"{api_v1_prefix}/stores",
        json={
            "name": "Neighbourhood Corner Store",
            "email": "shop@example.com",
            "owner_id": "00000000-0000-4000-8000-000000000000",
        },
        headers=admin_headers,
    )

    assert response.status_code == 404


def test_non_admin_cannot_create_store(test_client, api_v1_prefix, create_user):
    _, headers = create_user("plain@example.com")

    response = test_client.post(
        f"{api_v1_prefix}/stores",
        json={"name": "Neighbourhood Corner Store", "email": "shop@example.com"},
        headers=headers,
    )

    assert response.status_code == 403


def test_list_requires_authentication(test_client, api_v1_prefix):
    assert test_client.get(f"{api_v1_prefix}/stores").status_code == 401


def test_owner_updates_own_store_only(
    test_client,
    api_v1_prefix,
    create_store,
    create_user,
):
    _, owner_headers = create_user("owner@example.com", role="store_owner")
    own = test_client.get(f"{api_v1_prefix}/stores/me", headers=owner_headers).json()
    other = create_store("other@example.com")

    updated = test_client.put(
        f"{api_v1_prefix}/stores/{own['id']}",
        json={"address": "9 Updated Road"},
        headers=owner_headers,
    )
    assert updated.status_code == 200
    assert updated.json()["address"] == "9 Updated Road"

    denied = test_client.put(
        f"{api_v1_prefix}/stores/{other['id']}",
        json={"address": "9 Updated Road"},
        headers=owner_headers,
    )
    assert denied.status_code == 403


def test_update_without_fields(test_client, api_v1_prefix, admin_headers, create_store):
    store = create_store("shop@example.com")

    response = test_client.put(
        f"{api_v1_prefix}/stores/{store['id']}",
        json={},
        headers=admin_headers,
    )

    assert response.status_code == 400


def test_admin_deletes_store_with_ratings(
    test_client,
    api_v1_prefix,
    admin_headers,
    create_store,
    create_user,
):
    store = create_store("shop@example.com")
    _, headers = create_user("rater@example.com")
    test_client.post(
        f"{api_v1_prefix}/ratings",
        json={"store_id": store["id"], "rating": 4},
        headers=headers,
    )

    response = test_client.delete(
        f"{api_v1_prefix}/stores/{store['id']}",
        headers=admin_headers,
    )

    assert response.status_code == 204
    assert test_client.get(f"{api_v1_prefix}/ratings/me", headers=headers).json() == []
    missing = test_client.get(
        f"{api_v1_prefix}/stores/{store['id']}",
        headers=admin_headers,
    )
    assert missing.status_code == 404


def test_owner_sees_ratings_of_own_store(
    test_client,
    api_v1_prefix,
    create_store,
    create_user,
):
    _, owner_headers = create_user("owner@example.com", role="store_owner")
    own = test_client.get(f"{api_v1_prefix}/stores/me", headers=owner_headers).json()
    other = create_store("other@example.com")
    _, rater_headers = create_user("rater@example.com")
    for store_id in (own["id"], other["id"]):
        test_client.post(
            f"{api_v1_prefix}/ratings",
            json={"store_id": store_id, "rating": 5},
            headers=rater_headers,
        )

    mine = test_client.get(f"{api_v1_prefix}/stores/me/ratings", headers=owner_headers)
    assert mine.status_code == 200
    assert [r["user_email"] for r in mine.json()] == ["rater@example.com"]

    foreign = test_client.get(
        f"{api_v1_prefix}/ratings/store/{other['id']}",
        headers=owner_headers,
    )
    assert foreign.status_code == 403


@pytest.mark.parametrize("path", ["/stores/me", "/stores/me/ratings"])
def test_store_owner_views_reject_other_roles(
    test_client,
    api_v1_prefix,
    create_user,
    path,
):
    _, headers = create_user("plain@example.com")

    response = test_client.get(f"{api_v1_prefix}{path}", headers=headers)

    assert response.status_code == 403
