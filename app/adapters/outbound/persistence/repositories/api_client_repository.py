# app/adapters/outbound/persistence/repositories/api_client_repository.py (async version)

"""
Repository for API client operations.

This module implements the credential store: lookup by key,
registration with a server-generated key, usage accounting and key rotation.
"""

from typing import Optional, List, Dict, Any
from sqlalchemy import update
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.future import select
from sqlalchemy.exc import SQLAlchemyError, IntegrityError

from app.adapters.outbound.persistence.repositories.base_repository import AsyncCRUDBase
from app.adapters.outbound.persistence.models import ApiClient
from app.adapters.outbound.security.api_key_generator import ApiKeyGenerator
from app.application.dtos.api_client_dto import ApiClientCreate, ApiClientUpdate
from app.application.ports.outbound import IApiClientRepository
from app.domain.models.client_domain_model import (
    ApiClient as DomainApiClient,
    ClientStatus,
    ClientType,
)
from app.domain.exceptions import DatabaseOperationException
from app.shared.utils.clock import utcnow

# Attempts at drawing a key not already present in the store
MAX_KEY_ATTEMPTS = 5


class AsyncApiClientCRUD(AsyncCRUDBase[ApiClient, ApiClientCreate, ApiClientUpdate], IApiClientRepository):
    """
    Async implementation of CRUD repository for the ApiClient entity.

    Extends AsyncCRUDBase with key-specific operations.
    """

    async def get_by_api_key(self, db: AsyncSession, api_key: str) -> Optional[ApiClient]:
        """
        Find a client by exact key match.

        Args:
            db: Async database session
            api_key: Key as presented by the caller

        Returns:
            Client found or None if it doesn't exist

        Raises:
            DatabaseOperationException: In case of database error
        """
        return await self.get_by_field(db, "api_key", api_key)

    async def list_by_status(self, db: AsyncSession, status: ClientStatus) -> List[ApiClient]:
        return await self.get_multi(db, status=ClientStatus(status).value)

    async def list_by_type(self, db: AsyncSession, client_type: str) -> List[ApiClient]:
        query = select(ApiClient).where(ApiClient.client_type == client_type).order_by(ApiClient.id)
        return await self.fetch_all(db, query)

    async def issue_unique_key(self, db: AsyncSession) -> str:
        """
        Draw a fresh key, redrawing while it collides with a stored one.

        The UNIQUE constraint on api_key remains the final guard.

        Raises:
            DatabaseOperationException: If no free key was found
        """
        for _ in range(MAX_KEY_ATTEMPTS):
            candidate = ApiKeyGenerator.generate()
            if not await self.exists(db, api_key=candidate):
                return candidate
            self.logger.warning("Generated API key collided with an existing one, regenerating")

        raise DatabaseOperationException(detail="Could not generate a unique API key")

    async def create_with_api_key(self, db: AsyncSession, client_data: Dict[str, Any]) -> ApiClient:
        """
        Register a new client with a server-generated key.

        Any key, status, counter or timestamp in client_data is ignored.

        Args:
            db: Async database session
            client_data: name, description, contact_email, client_type

        Returns:
            The created client, including its key

        Raises:
            ResourceAlreadyExistsException: If the name is already taken
            DatabaseOperationException: In case of database error
        """
        data = {
            key: client_data.get(key)
            for key in ("name", "description", "contact_email", "client_type")
        }
        data.update(
            api_key=await self.issue_unique_key(db),
            status=ClientStatus.ACTIVE.value,
            request_count=0,
            created_at=utcnow(),
            last_used_at=None,
        )
        client = await self.create(db, obj_in=data)
        self.logger.info(f"API client registered: {client.name} (id: {client.id})")
        return client

    async def record_usage(self, db: AsyncSession, client: ApiClient) -> ApiClient:
        """
        Stamp last_used_at and increment request_count for a validated client.

        The increment is computed by the database in a single UPDATE so
        concurrent validations of the same key do not lose counts.

        Raises:
            DatabaseOperationException: In case of database error
        """
        try:
            stmt = (
                update(ApiClient)
                .where(ApiClient.id == client.id)
                .values(
                    request_count=ApiClient.request_count + 1,
                    last_used_at=utcnow(),
                )
            )
            await db.execute(stmt)
            await db.commit()
            await db.refresh(client)
            return client

        except SQLAlchemyError as e:
            await db.rollback()
            self.logger.error(f"Error recording usage for client {client.id}: {str(e)}")
            raise DatabaseOperationException(
                detail="Error recording API client usage",
                original_error=e
            )

    async def rotate_api_key(self, db: AsyncSession, id: Any) -> Optional[ApiClient]:
        """
        Replace the key of an existing client.

        The old key stops validating as soon as this commit lands;
        there is no grace period.

        Returns:
            The updated client, or None if it doesn't exist
        """
        client = await self.get(db, id)
        if not client:
            return None

        try:
            client.api_key = await self.issue_unique_key(db)
            db.add(client)
            await db.commit()
            await db.refresh(client)

            self.logger.info(f"API key rotated for client: {client.name}")
            return client

        except IntegrityError as e:
            await db.rollback()
            raise self._integrity_error("rotate key of", e)

        except SQLAlchemyError as e:
            await db.rollback()
            self.logger.error(f"Error rotating API key: {str(e)}")
            raise DatabaseOperationException(
                detail="Error rotating API key",
                original_error=e
            )

    def to_domain(self, db_model: ApiClient) -> DomainApiClient:
        """
        Convert database model to domain model.
        """
        return DomainApiClient(
            id=db_model.id,
            name=db_model.name,
            api_key=db_model.api_key,
            status=ClientStatus(db_model.status),
            created_at=db_model.created_at,
            request_count=db_model.request_count,
            last_used_at=db_model.last_used_at,
            description=db_model.description,
            contact_email=db_model.contact_email,
            client_type=ClientType(db_model.client_type) if db_model.client_type else None,
        )


# Public instance to be used by use cases
api_client_repository = AsyncApiClientCRUD(ApiClient)
