"""API tests for admin user management and role transitions."""


def _rate(client, prefix, headers, store_id, rating):
    response = client.post(
        f"{prefix}/ratings",
        json={"store_id": store_id, "rating": rating},
        headers=headers,
    )
    assert response.status_code in (200, 201), response.text


def _owned_store(client, prefix, admin_headers, owner_id):
    stores = client.get(f"{prefix}/stores", headers=admin_headers).json()
    return next(s for s in stores if s["owner_id"] == owner_id)


def test_admin_lists_users(test_client, api_v1_prefix, admin_headers, create_user):
    create_user("one@example.com")
    create_user("two@example.com")

    response = test_client.get(f"{api_v1_prefix}/users", headers=admin_headers)

    assert response.status_code == 200
    assert len(response.json()) == 3

    limited = test_client.get(
        f"{api_v1_prefix}/users",
        params={"limit": 1},
        headers=admin_headers,
    )
    assert len(limited.json()) == 1


def test_non_admin_cannot_manage_users(test_client, api_v1_prefix, create_user):
    _, headers = create_user("plain@example.com")

    assert test_client.get(f"{api_v1_prefix}/users", headers=headers).status_code == 403
    response = test_client.post(
        f"{api_v1_prefix}/users",
        json={
            "name": "Someone Sneaky Enough Here",
            "email": "sneaky@example.com",
            "password": "Secret#123",
            "role": "admin",
        },
        headers=headers,
    )
    assert response.status_code == 403


def test_invalid_role(test_client, api_v1_prefix, admin_headers):
    response = test_client.post(
        f"{api_v1_prefix}/users",
        json={
            "name": "Regular Test User Account",
            "email": "x@example.com",
            "password": "Secret#123",
            "role": "superuser",
        },
        headers=admin_headers,
    )

    assert response.status_code == 400
    assert "role" in {e["field"] for e in response.json()["errors"]}


def test_create_store_owner_provisions_store(
    test_client,
    api_v1_prefix,
    admin_headers,
    create_user,
):
    owner, owner_headers = create_user("owner@example.com", role="store_owner")

    store = test_client.get(f"{api_v1_prefix}/stores/me", headers=owner_headers)

    assert store.status_code == 200
    assert store.json()["owner_id"] == owner["id"]
    assert store.json()["active"] is True


def test_delete_store_owner_cascades(
    test_client,
    api_v1_prefix,
    admin_headers,
    create_user,
):
    owner, _ = create_user("owner@example.com", role="store_owner")
    store = _owned_store(test_client, api_v1_prefix, admin_headers, owner["id"])
    for i in range(3):
        _, headers = create_user(f"rater{i}@example.com")
        _rate(test_client, api_v1_prefix, headers, store["id"], i + 2)

    response = test_client.delete(
        f"{api_v1_prefix}/users/{owner['id']}",
        headers=admin_headers,
    )

    assert response.status_code == 204
    assert (
        test_client.get(
            f"{api_v1_prefix}/stores/{store['id']}",
            headers=admin_headers,
        ).status_code
        == 404
    )
    remaining = test_client.get(f"{api_v1_prefix}/ratings", headers=admin_headers)
    assert remaining.json() == []
    assert (
        test_client.get(
            f"{api_v1_prefix}/users/{owner['id']}",
            headers=admin_headers,
        ).status_code
        == 404
    )


def test_demoting_owner_deactivates_store_and_keeps_ratings(
    test_client,
    api_v1_prefix,
    admin_headers,
    create_user,
):
    owner, _ = create_user("owner@example.com", role="store_owner")
    store = _owned_store(test_client, api_v1_prefix, admin_headers, owner["id"])
    _, rater_headers = create_user("rater@example.com")
    _rate(test_client, api_v1_prefix, rater_headers, store["id"], 5)

    response = test_client.put(
        f"{api_v1_prefix}/users/{owner['id']}",
        json={"role": "user"},
        headers=admin_headers,
    )
    assert response.status_code == 200
    assert response.json()["role"] == "user"

    fetched = test_client.get(
        f"{api_v1_prefix}/stores/{store['id']}",
        headers=admin_headers,
    ).json()
    assert fetched["active"] is False
    assert fetched["rating_count"] == 1

    ratings = test_client.get(
        f"{api_v1_prefix}/ratings/store/{store['id']}",
        headers=admin_headers,
    )
    assert len(ratings.json()) == 1

    listed = test_client.get(f"{api_v1_prefix}/stores", headers=rater_headers).json()
    assert store["id"] not in {s["id"] for s in listed}


def test_repromoting_reactivates_previous_store(
    test_client,
    api_v1_prefix,
    admin_headers,
    create_user,
):
    owner, _ = create_user("owner@example.com", role="store_owner")
    store = _owned_store(test_client, api_v1_prefix, admin_headers, owner["id"])
    url = f"{api_v1_prefix}/users/{owner['id']}"

    test_client.put(url, json={"role": "user"}, headers=admin_headers)
    test_client.put(url, json={"role": "store_owner"}, headers=admin_headers)

    stores = test_client.get(f"{api_v1_prefix}/stores", headers=admin_headers).json()
    owned = [s for s in stores if s["owner_id"] == owner["id"]]
    assert [s["id"] for s in owned] == [store["id"]]
    assert owned[0]["active"] is True


def test_admin_cannot_delete_self(test_client, api_v1_prefix, admin_headers):
    me = test_client.get(f"{api_v1_prefix}/auth/me", headers=admin_headers).json()

    response = test_client.delete(
        f"{api_v1_prefix}/users/{me['id']}",
        headers=admin_headers,
    )

    assert response.status_code == 400
    assert response.json()["code"] == "CANNOT_DELETE_SELF"


def test_admin_cannot_change_own_role(test_client, api_v1_prefix, admin_headers):
    me = test_client.get(f"{api_v1_prefix}/auth/me", headers=admin_headers).json()

    response = test_client.put(
        f"{api_v1_prefix}/users/{me['id']}",
        json={"role": "user"},
        headers=admin_headers,
    )

    assert response.status_code == 400
    assert response.json()["code"] == "CANNOT_CHANGE_OWN_ROLE"


def test_user_role_field_is_ignored(test_client, api_v1_prefix, create_user):
    user, headers = create_user("plain@example.com")

    response = test_client.put(
        f"{api_v1_prefix}/users/{user['id']}",
        json={"address": "5 New Lane", "role": "admin"},
        headers=headers,
    )

    assert response.status_code == 200
    assert response.json()["role"] == "user"
    assert response.json()["address"] == "5 New Lane"


def test_user_cannot_read_other_user(test_client, api_v1_prefix, create_user):
    other, _ = create_user("other@example.com")
    _, headers = create_user("plain@example.com")

    response = test_client.get(f"{api_v1_prefix}/users/{other['id']}", headers=headers)

    assert response.status_code == 403


def test_store_owner_record_carries_rating(
    test_client,
    api_v1_prefix,
    admin_headers,
    create_user,
):
    owner, _ = create_user("owner@example.com", role="store_owner")
    store = _owned_store(test_client, api_v1_prefix, admin_headers, owner["id"])
    _, rater_headers = create_user("rater@example.com")
    _rate(test_client, api_v1_prefix, rater_headers, store["id"], 3)

    response = test_client.get(
        f"{api_v1_prefix}/users/{owner['id']}",
        headers=admin_headers,
    )

    assert response.json()["rating"] == 3.0
