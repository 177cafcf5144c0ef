# app/application/ports/inbound.py

from abc import ABC, abstractmethod
from datetime import datetime
from decimal import Decimal
from typing import Any, List, Optional

from app.application.dtos.api_client_dto import ApiClientCreate, ApiClientUpdate
from app.application.dtos.catalog_dto import FilmInput, ActorInput
from app.domain.models.audit_domain_model import AuditEntry


class IApiClientUseCase(ABC):
    """Interface for API-key client use cases."""

    @abstractmethod
    async def validate(self, presented_key: Optional[str]) -> Any:
        """Validate a presented key and account for its use."""
        pass

    @abstractmethod
    async def issue_key(self) -> str:
        """Produce a key not present in the credential store."""
        pass

    @abstractmethod
    async def rotate(self, client_id: int) -> Any:
        """Replace a client's key."""
        pass

    @abstractmethod
    async def register(self, data: ApiClientCreate) -> Any:
        """Register a client with a server-generated key."""
        pass

    @abstractmethod
    async def update(self, client_id: int, data: ApiClientUpdate) -> Any:
        """Update client metadata (never the key)."""
        pass

    @abstractmethod
    async def delete(self, client_id: int) -> None:
        """Hard-delete a client."""
        pass


class IAuditUseCase(ABC):
    """Interface for the audit trail use cases."""

    @abstractmethod
    async def record(self, entry: AuditEntry) -> AuditEntry:
        pass

    @abstractmethod
    async def search(self, keyword: str) -> List[AuditEntry]:
        pass

    @abstractmethod
    async def find_by_date_range(self, start: datetime, end: datetime) -> List[AuditEntry]:
        pass

    @abstractmethod
    async def find_slow_requests(self, threshold_ms: int) -> List[AuditEntry]:
        pass

    @abstractmethod
    async def find_by_method(self, method: str) -> List[AuditEntry]:
        pass

    @abstractmethod
    async def find_by_status(self, status: int) -> List[AuditEntry]:
        pass


class IFilmUseCase(ABC):
    """Interface for film use cases."""

    @abstractmethod
    async def create(self, data: FilmInput) -> Any:
        pass

    @abstractmethod
    async def update(self, film_id: int, data: FilmInput) -> Any:
        pass

    @abstractmethod
    async def find_by_rental_rate_range(self, min_rate: Decimal, max_rate: Decimal) -> List[Any]:
        pass


class IActorUseCase(ABC):
    """Interface for actor use cases."""

    @abstractmethod
    async def create(self, data: ActorInput) -> Any:
        pass

    @abstractmethod
    async def update(self, actor_id: int, data: ActorInput) -> Any:
        pass
