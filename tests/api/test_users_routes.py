"""User Routes — HTTP contract for /api/users.

Invariants:
    - GET list 200, GET one 200/404, POST 201/400, PUT 200/400/404, DELETE 204/404
    - Response records use camelCase keys with ISO-8601 timestamps
    - Error bodies use the {"error": {...}} envelope with a stable code
"""

from datetime import datetime

import pytest


JOHN = {"name": "John Doe", "email": "john@example.com", "phone": "1234567890"}
JANE = {"name": "Jane Doe", "email": "jane@example.com", "phone": "0987654321"}


def _ts(value: str) -> datetime:
    return datetime.fromisoformat(value.replace("Z", "+00:00"))


async def _create(client, body):
    res = await client.post("/api/users", json=body)
    assert res.status_code == 201, res.text
    return res.json()


# ─── GET /api/users ──────────────────────────────────────────────

async def test_list_users_returns_array(client):
    await _create(client, JOHN)
    await _create(client, JANE)

    res = await client.get("/api/users")

    assert res.status_code == 200
    assert res.headers["content-type"].startswith("application/json")
    data = res.json()
    assert len(data) == 2
    assert data[0]["name"] == "John Doe"
    assert data[0]["email"] == "john@example.com"


async def test_list_users_empty(client):
    res = await client.get("/api/users")
    assert res.status_code == 200
    assert res.json() == []


# ─── GET /api/users/{id} ─────────────────────────────────────────

async def test_get_user_when_exists(client, seed_user):
    res = await client.get(f"/api/users/{seed_user.id}")
    assert res.status_code == 200
    data = res.json()
    assert data["name"] == "John Doe"
    assert data["email"] == "john@example.com"
    assert set(data) == {"id", "name", "email", "phone", "createdAt", "updatedAt"}


async def test_get_user_not_found(client):
    res = await client.get("/api/users/999")
    assert res.status_code == 404
    assert res.json()["error"]["code"] == "RESOURCE_NOT_FOUND"


async def test_get_user_non_integer_id_is_bad_request(client):
    res = await client.get("/api/users/abc")
    assert res.status_code == 400
    assert res.json()["error"]["code"] == "VALIDATION_ERROR"


# ─── POST /api/users ─────────────────────────────────────────────

async def test_create_user_returns_201_with_record(client):
    res = await client.post("/api/users", json=JANE)
    assert res.status_code == 201
    data = res.json()
    assert data["id"] == 1
    assert data["name"] == "Jane Doe"
    assert data["createdAt"] == data["updatedAt"]
    assert data["createdAt"].endswith("Z") or data["createdAt"].endswith("+00:00")


async def test_create_user_duplicate_email_is_bad_request(client):
    await _create(client, JOHN)
    res = await client.post(
        "/api/users", json={"name": "Jane", "email": "john@example.com", "phone": "000"},
    )
    assert res.status_code == 400
    error = res.json()["error"]
    assert error["code"] == "EMAIL_ALREADY_EXISTS"
    assert error["category"] == "conflict"
    assert len((await client.get("/api/users")).json()) == 1


@pytest.mark.parametrize("body, field, message", [
    ({**JOHN, "name": ""}, "name", "Name is required"),
    ({**JOHN, "email": "invalid-email"}, "email", "Email should be valid"),
    ({**JOHN, "phone": "12345678901234567890"}, "phone",
     "Phone number cannot exceed 15 characters"),
])
async def test_create_user_invalid_field_is_bad_request(client, body, field, message):
    res = await client.post("/api/users", json=body)
    assert res.status_code == 400
    error = res.json()["error"]
    assert error["code"] == "VALIDATION_ERROR"
    assert {"field": field, "message": message, "type": "value_error"} in error["details"]


async def test_create_user_missing_field_is_bad_request(client):
    res = await client.post("/api/users", json={"name": "John Doe"})
    assert res.status_code == 400
    details = res.json()["error"]["details"]
    assert any(d["field"].endswith("email") for d in details)


async def test_create_user_without_phone(client):
    res = await client.post(
        "/api/users", json={"name": "John Doe", "email": "john@example.com"},
    )
    assert res.status_code == 201
    assert res.json()["phone"] is None


# ─── PUT /api/users/{id} ─────────────────────────────────────────

async def test_update_user_with_valid_data(client):
    created = await _create(client, JOHN)
    res = await client.put(
        f"/api/users/{created['id']}",
        json={"name": "John Updated", "email": "john@example.com", "phone": "9999999999"},
    )
    assert res.status_code == 200
    data = res.json()
    assert data["name"] == "John Updated"
    assert data["createdAt"] == created["createdAt"]
    assert _ts(data["updatedAt"]) > _ts(created["updatedAt"])


async def test_update_user_not_found(client):
    res = await client.put(
        "/api/users/999",
        json={"name": "John Updated", "email": "john@example.com", "phone": "9999999999"},
    )
    assert res.status_code == 404
    assert res.json()["error"]["code"] == "RESOURCE_NOT_FOUND"


async def test_update_user_to_taken_email_is_bad_request(client):
    await _create(client, JOHN)
    jane = await _create(client, JANE)

    res = await client.put(
        f"/api/users/{jane['id']}", json={**JANE, "email": "john@example.com"},
    )

    assert res.status_code == 400
    assert res.json()["error"]["code"] == "EMAIL_ALREADY_EXISTS"
    after = (await client.get(f"/api/users/{jane['id']}")).json()
    assert after == jane


# ─── DELETE /api/users/{id} ──────────────────────────────────────

async def test_delete_user_when_exists(client):
    created = await _create(client, JOHN)
    res = await client.delete(f"/api/users/{created['id']}")
    assert res.status_code == 204
    assert res.content == b""
    assert (await client.get(f"/api/users/{created['id']}")).status_code == 404


async def test_delete_user_not_found(client):
    await _create(client, JOHN)
    res = await client.delete("/api/users/999")
    assert res.status_code == 404
    assert len((await client.get("/api/users")).json()) == 1


# ─── ids outside the key range ───────────────────────────────────

OUT_OF_RANGE_ID = 99999999999999999999


async def test_get_user_out_of_range_id_not_found(client):
    res = await client.get(f"/api/users/{OUT_OF_RANGE_ID}")
    assert res.status_code == 404
    assert res.json()["error"]["code"] == "RESOURCE_NOT_FOUND"


async def test_update_user_out_of_range_id_not_found(client):
    res = await client.put(f"/api/users/{OUT_OF_RANGE_ID}", json=JOHN)
    assert res.status_code == 404
    assert res.json()["error"]["code"] == "RESOURCE_NOT_FOUND"


async def test_delete_user_out_of_range_id_not_found(client):
    await _create(client, JOHN)
    res = await client.delete(f"/api/users/{OUT_OF_RANGE_ID}")
    assert res.status_code == 404
    assert len((await client.get("/api/users")).json()) == 1
