# app/application/use_cases/api_client_use_cases.py (async version)

"""
Service for API-key client management.

This module implements key validation (used by the API key middleware)
and the administrative operations on clients: registration, update,
removal and key rotation.
"""

import logging
from typing import List, Optional

from sqlalchemy.ext.asyncio import AsyncSession

from app.adapters.outbound.persistence.models import ApiClient
from app.adapters.outbound.persistence.repositories.api_client_repository import api_client_repository
from app.application.dtos.api_client_dto import ApiClientCreate, ApiClientUpdate
from app.application.ports.inbound import IApiClientUseCase
from app.application.use_cases.base_use_cases import BaseService
from app.domain.exceptions import (
    ClientNotFoundException,
    InvalidApiKeyException,
    MissingApiKeyException,
)
from app.domain.models.client_domain_model import ClientStatus
from app.domain.services.api_key_service import ApiKeyService

logger = logging.getLogger(__name__)


class AsyncApiClientService(BaseService[ApiClient], IApiClientUseCase):
    """
    Service for API client management.

    This class implements the business logic related to
    API clients, including key validation and rotation.
    """

    not_found_exception = ClientNotFoundException

    def __init__(self, db_session: AsyncSession):
        super().__init__(db_session, api_client_repository)

    async def validate(self, presented_key: Optional[str]) -> ApiClient:
        """
        Validate a presented key.

        Unknown keys and keys of inactive clients are rejected the same way,
        so callers cannot tell them apart. On success the client's
        last_used_at and request_count are updated and committed before
        returning.

        Args:
            presented_key: Value of the X-API-Key header

        Returns:
            The authenticated client

        Raises:
            MissingApiKeyException: If the key is empty or absent (no lookup is done)
            InvalidApiKeyException: If the key is unknown or the client is inactive
        """
        if not presented_key:
            raise MissingApiKeyException()

        client = await api_client_repository.get_by_api_key(self.db_session, presented_key)
        if not client:
            logger.warning(f"Invalid API key attempted: {ApiKeyService.redact(presented_key)}")
            raise InvalidApiKeyException()

        if client.status != ClientStatus.ACTIVE.value:
            logger.warning(f"Inactive client attempted to access: {client.name}")
            raise InvalidApiKeyException()

        return await api_client_repository.record_usage(self.db_session, client)

    async def issue_key(self) -> str:
        """Produce a key not currently present in the credential store."""
        return await api_client_repository.issue_unique_key(self.db_session)

    async def rotate(self, client_id: int) -> ApiClient:
        """
        Replace the key of a client. The old key is rejected from now on.

        Raises:
            ClientNotFoundException: If the client doesn't exist
        """
        client = await api_client_repository.rotate_api_key(self.db_session, client_id)
        if not client:
            logger.warning(f"Key rotation requested for unknown client: ID {client_id}")
            raise ClientNotFoundException(client_id)
        return client

    async def register(self, data: ApiClientCreate) -> ApiClient:
        """
        Register a new client. The key is always generated here.

        Raises:
            ResourceAlreadyExistsException: If the name is already taken
        """
        return await api_client_repository.create_with_api_key(
            self.db_session, data.model_dump(mode="json")
        )

    async def update(self, client_id: int, data: ApiClientUpdate) -> ApiClient:
        """
        Update name, description, status, contact email and type.

        Only the fields present in the request are changed.

        Raises:
            ClientNotFoundException: If the client doesn't exist
            ResourceAlreadyExistsException: If the new name is already taken
        """
        update_data = data.model_dump(mode="json", exclude_unset=True)
        # Explicit nulls are not allowed for the mandatory columns
        for field in ("name", "status"):
            if update_data.get(field, "") is None:
                update_data.pop(field)
        return await super().update(client_id, update_data)

    async def list_active(self) -> List[ApiClient]:
        return await api_client_repository.list_by_status(self.db_session, ClientStatus.ACTIVE)

    async def list_by_type(self, client_type: str) -> List[ApiClient]:
        return await api_client_repository.list_by_type(self.db_session, client_type)
