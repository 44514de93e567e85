"""User endpoints: status codes, envelopes and error bodies.

Invariants:
    - POST → 201 {"message", "data"}; duplicate email → 409
    - Missing fields → 400 with the field(s) named
    - PUT/DELETE on an absent or malformed id → 404 "User not found"
    - DELETE → 200 with a confirmation message (not 204)
"""

from datetime import datetime

import pytest


async def _create(client, name="Alice", email="alice@example.com"):
    res = await client.post("/api/v1/users", json={"name": name, "email": email})
    assert res.status_code == 201
    return res.json()["data"]


async def test_create_user_returns_201_with_id(client):
    res = await client.post(
        "/api/v1/users", json={"name": "Alice", "email": "alice@example.com"},
    )
    assert res.status_code == 201
    body = res.json()
    assert body["message"] == "User created"
    assert body["data"]["id"] >= 1
    assert body["data"]["name"] == "Alice"
    assert body["data"]["email"] == "alice@example.com"
    assert "created_at" in body["data"] and "updated_at" in body["data"]


async def test_duplicate_email_returns_409_regardless_of_name(client):
    await _create(client)
    res = await client.post(
        "/api/v1/users", json={"name": "Other", "email": "alice@example.com"},
    )
    assert res.status_code == 409
    assert res.json() == {"error": "User already exists"}


@pytest.mark.parametrize("body", [
    {}, {"name": "Alice"}, {"email": "a@example.com"},
    {"name": "", "email": "a@example.com"},
])
async def test_create_user_missing_fields_returns_400(client, body):
    res = await client.post("/api/v1/users", json=body)
    assert res.status_code == 400
    assert res.json() == {"error": "Name and email are required"}


async def test_malformed_json_returns_400(client):
    res = await client.post(
        "/api/v1/users", content=b"{not json",
        headers={"Content-Type": "application/json"},
    )
    assert res.status_code == 400
    assert res.json()["error"] == "Invalid request data"


async def test_list_users_in_id_order(client):
    await _create(client, "Bob", "bob@example.com")
    await _create(client, "Alice", "alice@example.com")
    res = await client.get("/api/v1/users")
    assert res.status_code == 200
    assert [u["name"] for u in res.json()["data"]] == ["Bob", "Alice"]


async def test_get_user_by_id(client):
    user = await _create(client)
    res = await client.get(f"/api/v1/users/{user['id']}")
    assert res.status_code == 200
    assert res.json()["data"]["email"] == "alice@example.com"

    missing = await client.get("/api/v1/users/999")
    assert missing.status_code == 404
    assert missing.json() == {"error": "User not found"}


async def test_update_user_partial(client):
    user = await _create(client)
    res = await client.put(f"/api/v1/users/{user['id']}", json={"name": "Alicia"})
    assert res.status_code == 200
    body = res.json()
    assert body["message"] == "User updated"
    assert body["data"]["name"] == "Alicia"
    assert body["data"]["email"] == "alice@example.com"
    assert datetime.fromisoformat(body["data"]["updated_at"]) >= datetime.fromisoformat(
        body["data"]["created_at"],
    )


async def test_update_user_requires_a_field(client):
    user = await _create(client)
    res = await client.put(f"/api/v1/users/{user['id']}", json={})
    assert res.status_code == 400
    assert res.json() == {"error": "At least one field (name or email) is required"}


async def test_update_user_email_collision_returns_409(client):
    await _create(client)
    bob = await _create(client, "Bob", "bob@example.com")
    res = await client.put(
        f"/api/v1/users/{bob['id']}", json={"email": "alice@example.com"},
    )
    assert res.status_code == 409


@pytest.mark.parametrize("user_id", ["999", "abc", "-3"])
async def test_update_absent_or_malformed_id_returns_404(client, user_id):
    res = await client.put(f"/api/v1/users/{user_id}", json={"name": "Ghost"})
    assert res.status_code == 404
    assert res.json() == {"error": "User not found"}


async def test_delete_user_returns_200_then_404(client):
    user = await _create(client)
    res = await client.delete(f"/api/v1/users/{user['id']}")
    assert res.status_code == 200
    assert res.json() == {"message": "User deleted"}

    for _ in range(2):
        again = await client.delete(f"/api/v1/users/{user['id']}")
        assert again.status_code == 404
        assert again.json() == {"error": "User not found"}


OUT_OF_RANGE_ID = str(10**20)


async def test_out_of_range_id_is_not_found(client):
    path = f"/api/v1/users/{OUT_OF_RANGE_ID}"
    assert (await client.get(path)).status_code == 404
    res = await client.put(path, json={"name": "Ghost"})
    assert res.status_code == 404
    assert res.json() == {"error": "User not found"}
    res = await client.delete(path)
    assert res.status_code == 404
    assert res.json() == {"error": "User not found"}


async def test_same_value_update_refreshes_updated_at(client):
    user = await _create(client)
    res = await client.put(f"/api/v1/users/{user['id']}", json={"name": "Alice"})
    assert res.status_code == 200
    assert datetime.fromisoformat(res.json()["data"]["updated_at"]) > (
        datetime.fromisoformat(user["updated_at"])
    )
