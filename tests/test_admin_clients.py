"""Tests for the client management endpoints under /api/admin/clients."""
import pytest


BASE = "/api/admin/clients"


async def create(client, **overrides):
    payload = {"name": "Acme Mobile", "clientType": "EXTERNAL", "contactEmail": "dev@acme.com"}
    payload.update(overrides)
    return await client.post(BASE, json=payload)


async def test_create_generates_key(client):
    response = await create(client, description="Mobile app")

    assert response.status_code == 201
    body = response.json()
    assert body["name"] == "Acme Mobile"
    assert body["status"] == "ACTIVE"
    assert body["requestCount"] == 0
    assert body["lastUsedAt"] is None
    assert body["clientType"] == "EXTERNAL"
    assert len(body["apiKey"]) == 32
    assert body["apiKey"].isalnum()


async def test_create_ignores_client_supplied_key_and_counters(client):
    response = await create(client, apiKey="chosen-by-caller", requestCount=99, status="INACTIVE")

    body = response.json()
    assert body["apiKey"] != "chosen-by-caller"
    assert body["requestCount"] == 0
    assert body["status"] == "ACTIVE"


async def test_created_key_authenticates(client):
    key = (await create(client)).json()["apiKey"]

    response = await client.get("/api/films", headers={"X-API-Key": key})

    assert response.status_code == 200


async def test_duplicate_name_conflicts(client):
    await create(client)
    response = await create(client, contactEmail="other@acme.com")

    assert response.status_code == 409


async def test_invalid_email_is_rejected(client):
    response = await create(client, contactEmail="not-an-email")

    assert response.status_code == 422


async def test_list_active_and_by_type(client):
    internal = (await create(client, name="Reporting Job", clientType="INTERNAL")).json()
    external = (await create(client)).json()
    await client.put(f"{BASE}/{internal['id']}", json={"status": "INACTIVE"})

    all_clients = (await client.get(BASE)).json()
    active = (await client.get(f"{BASE}/active")).json()
    internal_only = (await client.get(f"{BASE}/type/INTERNAL")).json()

    assert {c["id"] for c in all_clients} == {internal["id"], external["id"]}
    assert [c["id"] for c in active] == [external["id"]]
    assert [c["id"] for c in internal_only] == [internal["id"]]


async def test_update_keeps_key_and_unset_fields(client):
    created = (await create(client, description="Mobile app")).json()

    response = await client.put(
        f"{BASE}/{created['id']}",
        json={"name": "Acme Web", "apiKey": "ignored"},
    )

    body = response.json()
    assert response.status_code == 200
    assert body["name"] == "Acme Web"
    assert body["apiKey"] == created["apiKey"]
    assert body["description"] == "Mobile app"
    assert body["contactEmail"] == "dev@acme.com"


async def test_get_missing_client(client):
    response = await client.get(f"{BASE}/404")

    assert response.status_code == 404
    assert response.json()["code"] == "RESOURCE_NOT_FOUND"


async def test_update_missing_client(client):
    response = await client.put(f"{BASE}/404", json={"description": "x"})

    assert response.status_code == 404


async def test_delete_client(client):
    created = (await create(client)).json()

    assert (await client.delete(f"{BASE}/{created['id']}")).status_code == 204
    assert (await client.get(f"{BASE}/{created['id']}")).status_code == 404
    assert (await client.delete(f"{BASE}/{created['id']}")).status_code == 404

    response = await client.get("/api/films", headers={"X-API-Key": created["apiKey"]})
    assert response.status_code == 401


async def test_rotate_key(client):
    created = (await create(client)).json()

    response = await client.post(f"{BASE}/{created['id']}/rotate-key")

    assert response.status_code == 200
    new_key = response.json()["apiKey"]
    assert new_key != created["apiKey"]
    assert (await client.get("/api/films", headers={"X-API-Key": created["apiKey"]})).status_code == 401
    assert (await client.get("/api/films", headers={"X-API-Key": new_key})).status_code == 200


async def test_rotate_missing_client(client):
    response = await client.post(f"{BASE}/999/rotate-key")

    assert response.status_code == 404


@pytest.mark.parametrize("name", ["partner_app", "Acme (EU)"])
async def test_names_with_punctuation_are_accepted(client, name):
    response = await create(client, name=name)

    assert response.status_code == 201
    assert response.json()["name"] == name


async def test_blank_name_is_rejected(client):
    response = await create(client, name="   ")

    assert response.status_code == 422
