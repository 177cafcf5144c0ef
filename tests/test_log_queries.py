"""Tests for the /api/logs query endpoints."""
from datetime import datetime, timedelta

import pytest

from app.adapters.outbound.persistence.repositories.log_entry_repository import log_entry_repository
from app.domain.models.audit_domain_model import AuditEntry

LOGS = "/api/logs"
BASE_TIME = datetime(2024, 3, 1, 12, 0, 0)


def entry(minutes, method, uri, status, elapsed, summary="Client: Acme Mobile"):
    return AuditEntry(
        timestamp=BASE_TIME + timedelta(minutes=minutes),
        method=method,
        uri=uri,
        request_summary=summary,
        response_status=status,
        execution_time_ms=elapsed,
        client_ip="10.0.0.1",
        user_agent="pytest",
    )


@pytest.fixture
async def history(db_session):
    entries = [
        entry(0, "GET", "/api/films", 200, 12),
        entry(5, "POST", "/api/films", 201, 1000),
        entry(10, "GET", "/api/films/99", 404, 8),
        entry(15, "DELETE", "/api/actors/3", 204, 2500, summary="Client: Reporting Job"),
    ]
    for item in entries:
        await log_entry_repository.add(db_session, item)
    return entries


def uris(response):
    return [e["uri"] for e in response.json()]


async def test_search_matches_uri_or_summary(client, auth_headers, history):
    by_uri = await client.get(f"{LOGS}/search", params={"keyword": "actors"}, headers=auth_headers)
    by_summary = await client.get(f"{LOGS}/search", params={"keyword": "Reporting"}, headers=auth_headers)

    assert uris(by_uri) == ["/api/actors/3"]
    assert uris(by_summary) == ["/api/actors/3"]


async def test_search_treats_wildcards_literally(client, auth_headers, history):
    response = await client.get(f"{LOGS}/search", params={"keyword": "%"}, headers=auth_headers)

    assert response.json() == []


async def test_date_range_is_inclusive(client, auth_headers, history):
    response = await client.get(
        f"{LOGS}/date-range",
        params={"startDate": "2024-03-01T12:05:00", "endDate": "2024-03-01T12:10:00"},
        headers=auth_headers,
    )

    assert uris(response) == ["/api/films", "/api/films/99"]
    assert [e["method"] for e in response.json()] == ["POST", "GET"]


async def test_date_range_accepts_offsets(client, auth_headers, history):
    response = await client.get(
        f"{LOGS}/date-range",
        params={"startDate": "2024-03-01T09:14:00-03:00", "endDate": "2024-03-01T09:16:00-03:00"},
        headers=auth_headers,
    )

    assert uris(response) == ["/api/actors/3"]


async def test_date_range_rejects_inverted_bounds(client, auth_headers):
    response = await client.get(
        f"{LOGS}/date-range",
        params={"startDate": "2024-03-02T00:00:00", "endDate": "2024-03-01T00:00:00"},
        headers=auth_headers,
    )

    assert response.status_code == 400


async def test_slow_requests_threshold_is_inclusive(client, auth_headers, history):
    default = await client.get(f"{LOGS}/slow-requests", headers=auth_headers)
    custom = await client.get(f"{LOGS}/slow-requests", params={"thresholdMs": 2000}, headers=auth_headers)

    assert [e["executionTimeMs"] for e in default.json()] == [1000, 2500]
    assert [e["executionTimeMs"] for e in custom.json()] == [2500]


async def test_method_lookup_is_normalised(client, auth_headers, history):
    response = await client.get(f"{LOGS}/method/get", headers=auth_headers)

    assert uris(response) == ["/api/films", "/api/films/99"]


async def test_status_lookup(client, auth_headers, history):
    response = await client.get(f"{LOGS}/status/404", headers=auth_headers)

    body = response.json()
    assert [e["uri"] for e in body] == ["/api/films/99"]
    assert body[0]["requestSummary"] == "Client: Acme Mobile"
    assert body[0]["clientIp"] == "10.0.0.1"


async def test_logs_require_api_key(client):
    response = await client.get(f"{LOGS}/status/200")

    assert response.status_code == 401
