"""Pytest configuration and fixtures for the film catalog API tests."""
import os
import tempfile
from typing import AsyncGenerator

# Set test environment before importing the application
_db_dir = tempfile.mkdtemp(prefix="film-catalog-tests-")
os.environ["DATABASE_URL"] = f"sqlite+aiosqlite:///{os.path.join(_db_dir, 'test.db')}"
os.environ["ENVIRONMENT"] = "testing"
os.environ["LOG_LEVEL"] = "WARNING"

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession

from app.adapters.outbound.persistence.database import AsyncSessionLocal, engine
from app.adapters.outbound.persistence.models import ApiClient, Base
from app.adapters.outbound.persistence.repositories.api_client_repository import api_client_repository
from app.main import app as fastapi_app


@pytest.fixture(autouse=True)
async def database() -> AsyncGenerator[None, None]:
    """Fresh schema for every test."""
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await engine.dispose()


@pytest.fixture
async def db_session() -> AsyncGenerator[AsyncSession, None]:
    async with AsyncSessionLocal() as session:
        yield session


@pytest.fixture
def app():
    return fastapi_app


@pytest.fixture
async def client(app) -> AsyncGenerator[AsyncClient, None]:
    """Async test client without credentials."""
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac


@pytest.fixture
async def registered_client(db_session) -> ApiClient:
    """An ACTIVE client with a freshly issued key."""
    return await api_client_repository.create_with_api_key(
        db_session,
        {"name": "Acme Mobile", "client_type": "EXTERNAL", "contact_email": "dev@acme.com"},
    )


@pytest.fixture
def auth_headers(registered_client) -> dict:
    return {"X-API-Key": registered_client.api_key}
