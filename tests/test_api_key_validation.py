"""Tests for AsyncApiClientService key validation and rotation."""
import pytest

from app.adapters.outbound.persistence.repositories.api_client_repository import api_client_repository
from app.adapters.outbound.security import api_key_generator
from app.application.dtos.api_client_dto import ApiClientUpdate
from app.application.use_cases.api_client_use_cases import AsyncApiClientService
from app.domain.exceptions import (
    ClientNotFoundException,
    DatabaseOperationException,
    InvalidApiKeyException,
    MissingApiKeyException,
)


async def test_missing_key_is_rejected(db_session):
    service = AsyncApiClientService(db_session)
    for key in (None, ""):
        with pytest.raises(MissingApiKeyException):
            await service.validate(key)


async def test_unknown_key_is_rejected(db_session, registered_client):
    with pytest.raises(InvalidApiKeyException):
        await AsyncApiClientService(db_session).validate("not-a-real-key")


async def test_inactive_client_is_rejected_like_unknown_key(db_session, registered_client):
    service = AsyncApiClientService(db_session)
    await service.update(registered_client.id, ApiClientUpdate(status="INACTIVE"))

    with pytest.raises(InvalidApiKeyException) as exc_info:
        await service.validate(registered_client.api_key)

    assert exc_info.value.to_body() == {
        "error": "Invalid API key",
        "message": "The provided API key is invalid or inactive",
    }


async def test_successful_validation_records_usage(db_session, registered_client):
    assert registered_client.request_count == 0
    assert registered_client.last_used_at is None

    service = AsyncApiClientService(db_session)
    first = await service.validate(registered_client.api_key)
    first_used_at = first.last_used_at
    assert first.request_count == 1
    assert first_used_at is not None

    second = await service.validate(registered_client.api_key)
    assert second.request_count == 2
    assert second.last_used_at >= first_used_at

    await db_session.close()
    stored = await api_client_repository.get(db_session, registered_client.id)
    assert stored.request_count == 2


async def test_rotation_invalidates_old_key(db_session, registered_client):
    service = AsyncApiClientService(db_session)
    old_key = registered_client.api_key

    rotated = await service.rotate(registered_client.id)

    assert rotated.api_key != old_key
    assert len(rotated.api_key) == 32
    with pytest.raises(InvalidApiKeyException):
        await service.validate(old_key)
    assert (await service.validate(rotated.api_key)).id == registered_client.id


async def test_rotation_of_unknown_client(db_session):
    with pytest.raises(ClientNotFoundException):
        await AsyncApiClientService(db_session).rotate(9999)


async def test_issue_key_regenerates_on_collision(db_session, registered_client, monkeypatch):
    candidates = iter([registered_client.api_key, "F" * 32])
    monkeypatch.setattr(api_key_generator.ApiKeyGenerator, "generate", classmethod(lambda cls, length=None: next(candidates)))

    assert await AsyncApiClientService(db_session).issue_key() == "F" * 32


async def test_issue_key_gives_up_after_repeated_collisions(db_session, registered_client, monkeypatch):
    monkeypatch.setattr(
        api_key_generator.ApiKeyGenerator, "generate",
        classmethod(lambda cls, length=None: registered_client.api_key),
    )

    with pytest.raises(DatabaseOperationException):
        await AsyncApiClientService(db_session).issue_key()
