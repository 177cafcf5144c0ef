"""Tests for the X-API-Key middleware."""
from fastapi import Depends, FastAPI, Request
from httpx import ASGITransport, AsyncClient

from app.adapters.inbound.api.deps import get_current_api_client
from app.shared.middleware import API_CLIENT_STATE_KEY, AsyncApiKeyMiddleware
from app.shared.middleware.api_key_middleware import path_matches

MISSING_BODY = {"error": "Missing API key", "message": "Please provide X-API-Key header"}
INVALID_BODY = {"error": "Invalid API key", "message": "The provided API key is invalid or inactive"}


class TestPathMatches:

    def test_prefix_matches_by_segment(self):
        assert path_matches("/api", ["/api"])
        assert path_matches("/api/films/1", ["/api"])
        assert not path_matches("/apiary", ["/api"])

    def test_trailing_slash_in_prefix(self):
        assert path_matches("/api/admin/clients", ["/api/admin/"])


async def test_missing_key(client):
    response = await client.get("/api/films")

    assert response.status_code == 401
    assert response.headers["content-type"] == "application/json"
    assert response.json() == MISSING_BODY


async def test_empty_key_counts_as_missing(client):
    response = await client.get("/api/films", headers={"X-API-Key": ""})

    assert response.status_code == 401
    assert response.json() == MISSING_BODY


async def test_invalid_key(client, registered_client):
    response = await client.get("/api/films", headers={"X-API-Key": "wrong"})

    assert response.status_code == 401
    assert response.json() == INVALID_BODY


async def test_inactive_client_gets_invalid_body(client, registered_client, auth_headers):
    update = await client.put(f"/api/admin/clients/{registered_client.id}", json={"status": "INACTIVE"})
    assert update.status_code == 200

    response = await client.get("/api/films", headers=auth_headers)

    assert response.status_code == 401
    assert response.json() == INVALID_BODY


async def test_valid_key_reaches_handler(client, auth_headers):
    response = await client.get("/api/films", headers=auth_headers)

    assert response.status_code == 200
    assert response.json() == []


async def test_valid_key_increments_request_count(client, registered_client, auth_headers):
    for _ in range(3):
        await client.get("/api/actors", headers={**auth_headers, "X-Client-ID": "Acme Mobile"})

    response = await client.get(f"/api/admin/clients/{registered_client.id}")

    assert response.json()["requestCount"] == 3
    assert response.json()["lastUsedAt"] is not None


async def test_admin_paths_are_exempt(client):
    response = await client.get("/api/admin/clients")

    assert response.status_code == 200


async def test_health_is_exempt(client):
    response = await client.get("/health")

    assert response.status_code == 200
    assert response.json() == {"status": "healthy"}


async def test_unprotected_paths_pass_through(client):
    response = await client.get("/", follow_redirects=False)

    assert response.status_code in (302, 307)
    assert response.headers["location"] == "/docs"


async def test_authenticated_client_is_attached_to_request(registered_client):
    probe = FastAPI()
    probe.add_middleware(AsyncApiKeyMiddleware, protected_prefixes=["/probe"], exempt_prefixes=[])

    @probe.get("/probe/whoami")
    async def whoami(request: Request, api_client=Depends(get_current_api_client)):
        state_client = getattr(request.state, API_CLIENT_STATE_KEY)
        return {"name": api_client.name, "same": state_client is api_client}

    async with AsyncClient(transport=ASGITransport(app=probe), base_url="http://test") as ac:
        response = await ac.get("/probe/whoami", headers={"X-API-Key": registered_client.api_key})

    assert response.status_code == 200
    assert response.json() == {"name": "Acme Mobile", "same": True}


async def test_protected_routes_document_the_401_body(client):
    schema = (await client.get("/openapi.json")).json()

    for path in ("/api/films", "/api/actors", "/api/logs/search"):
        unauthorized = schema["paths"][path]["get"]["responses"]["401"]
        assert unauthorized["content"]["application/json"]["schema"]["$ref"].endswith("/ApiKeyErrorResponse")
    assert "401" not in schema["paths"]["/api/admin/clients"]["get"]["responses"]


async def test_empty_protected_prefixes_protect_nothing():
    open_app = FastAPI()
    open_app.add_middleware(AsyncApiKeyMiddleware, protected_prefixes=[], exempt_prefixes=[])

    @open_app.get("/api/ping")
    async def ping():
        return {"pong": True}

    async with AsyncClient(transport=ASGITransport(app=open_app), base_url="http://test") as ac:
        response = await ac.get("/api/ping")

    assert response.status_code == 200
