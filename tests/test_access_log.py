"""Tests for the request audit trail written by the access log middleware."""
from unittest.mock import AsyncMock, patch

import pytest
from fastapi import FastAPI
from httpx import ASGITransport, AsyncClient
from sqlalchemy import func, select

from app.adapters.outbound.persistence.models import LogEntry
from app.application.use_cases.audit_use_cases import AsyncAuditService
from app.domain.exceptions import AuditPersistenceFailure
from app.shared.middleware import AsyncAccessLogMiddleware, AsyncApiKeyMiddleware, AsyncExceptionMiddleware


async def stored_entries(db_session):
    result = await db_session.execute(select(LogEntry).order_by(LogEntry.id))
    return result.scalars().all()


async def test_one_entry_per_authenticated_request(client, db_session, registered_client, auth_headers):
    response = await client.get(
        "/api/films?title=x",
        headers={**auth_headers, "User-Agent": "pytest-agent", "X-Forwarded-For": "203.0.113.7"},
    )
    assert response.status_code == 200

    entries = await stored_entries(db_session)
    assert len(entries) == 1

    entry = entries[0]
    assert entry.method == "GET"
    assert entry.uri == "/api/films?title=x"
    assert entry.response_status == 200
    assert entry.execution_time_ms >= 0
    assert entry.client_ip == "203.0.113.7"
    assert entry.user_agent == "pytest-agent"
    assert entry.response_body == ""
    assert entry.request_summary == f"Client: Acme Mobile | API Key: {registered_client.api_key[:8]}..."
    assert registered_client.api_key not in entry.request_summary


async def test_rejected_request_is_logged_as_unknown(client, db_session):
    response = await client.get("/api/actors", headers={"X-API-Key": "bogus-key-value"})
    assert response.status_code == 401

    entries = await stored_entries(db_session)
    assert len(entries) == 1
    assert entries[0].response_status == 401
    assert entries[0].request_summary == "Client: UNKNOWN | API Key: bogus-k..."


async def test_missing_key_request_is_logged(client, db_session):
    await client.get("/api/films")

    entries = await stored_entries(db_session)
    assert [e.request_summary for e in entries] == ["Client: UNKNOWN"]
    assert entries[0].client_ip == "127.0.0.1"


async def test_not_found_status_is_recorded(client, db_session, auth_headers):
    response = await client.get("/api/films/12345", headers=auth_headers)
    assert response.status_code == 404

    entries = await stored_entries(db_session)
    assert entries[-1].response_status == 404


async def test_documentation_and_health_are_not_logged(client, db_session):
    await client.get("/health")
    await client.get("/openapi.json")

    count = await db_session.scalar(select(func.count()).select_from(LogEntry))
    assert count == 0


async def test_persistence_failure_does_not_affect_response(client, db_session, auth_headers):
    failing = AsyncMock(side_effect=AuditPersistenceFailure(RuntimeError("disk full")))
    with patch.object(AsyncAuditService, "record", failing):
        response = await client.get("/api/films", headers=auth_headers)

    assert response.status_code == 200
    assert response.json() == []
    failing.assert_awaited_once()
    assert await stored_entries(db_session) == []


@pytest.fixture
def failing_app():
    """Minimal app wired like the real one, with a handler that raises."""
    broken = FastAPI()
    broken.add_middleware(AsyncApiKeyMiddleware)
    broken.add_middleware(AsyncExceptionMiddleware)
    broken.add_middleware(AsyncAccessLogMiddleware)

    @broken.get("/api/explode")
    async def explode():
        raise RuntimeError("boom")

    return broken


async def test_handler_exception_is_logged_as_500(failing_app, db_session, auth_headers):
    async with AsyncClient(transport=ASGITransport(app=failing_app), base_url="http://test") as ac:
        response = await ac.get("/api/explode", headers=auth_headers)

    assert response.status_code == 500
    assert response.json()["code"] == "INTERNAL_SERVER_ERROR"

    entries = await stored_entries(db_session)
    assert len(entries) == 1
    assert entries[0].response_status == 500
    assert entries[0].request_summary.startswith("Client: Acme Mobile")
