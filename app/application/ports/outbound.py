# app/application/ports/outbound.py

from abc import ABC, abstractmethod
from datetime import datetime
from decimal import Decimal
from typing import List, Optional, Dict, Any, Generic, TypeVar

from app.domain.models.audit_domain_model import AuditEntry

T = TypeVar('T')


class IRepository(Generic[T], ABC):
    """Generic async repository interface. Every call receives the session."""

    @abstractmethod
    async def get(self, db, id: Any) -> Optional[T]:
        """Get entity by ID."""
        pass

    @abstractmethod
    async def get_multi(self, db, *, skip: int = 0, limit: Optional[int] = None, **filters) -> List[T]:
        """List entities with optional filters."""
        pass

    @abstractmethod
    async def create(self, db, *, obj_in: Any) -> T:
        """Create a new entity."""
        pass

    @abstractmethod
    async def update(self, db, *, db_obj: T, obj_in: Any) -> T:
        """Update an existing entity."""
        pass

    @abstractmethod
    async def remove(self, db, *, id: Any) -> T:
        """Delete an entity by ID."""
        pass


class IApiClientRepository(IRepository[T], ABC):
    """Credential store interface."""

    @abstractmethod
    async def get_by_api_key(self, db, api_key: str) -> Optional[T]:
        """Get client by exact key match."""
        pass

    @abstractmethod
    async def create_with_api_key(self, db, client_data: Dict[str, Any]) -> T:
        """Register a client with a server-generated key."""
        pass

    @abstractmethod
    async def record_usage(self, db, client: T) -> T:
        """Increment request_count and stamp last_used_at."""
        pass

    @abstractmethod
    async def rotate_api_key(self, db, id: Any) -> Optional[T]:
        """Replace the client's key. None if the client does not exist."""
        pass


class ILogEntryRepository(ABC):
    """Append-only audit store interface."""

    @abstractmethod
    async def add(self, db, entry: AuditEntry) -> AuditEntry:
        """Persist one audit entry."""
        pass

    @abstractmethod
    async def search(self, db, keyword: str) -> List[AuditEntry]:
        pass

    @abstractmethod
    async def find_by_date_range(self, db, start: datetime, end: datetime) -> List[AuditEntry]:
        pass

    @abstractmethod
    async def find_slow_requests(self, db, threshold_ms: int) -> List[AuditEntry]:
        pass

    @abstractmethod
    async def find_by_method(self, db, method: str) -> List[AuditEntry]:
        pass

    @abstractmethod
    async def find_by_status(self, db, status: int) -> List[AuditEntry]:
        pass


class IFilmRepository(IRepository[T], ABC):
    """Film repository interface."""

    @abstractmethod
    async def search_by_title(self, db, title: str) -> List[T]:
        pass

    @abstractmethod
    async def find_by_rating(self, db, rating: str) -> List[T]:
        pass

    @abstractmethod
    async def find_by_release_year(self, db, year: int) -> List[T]:
        pass

    @abstractmethod
    async def find_by_rental_rate_range(self, db, min_rate: Decimal, max_rate: Decimal) -> List[T]:
        pass

    @abstractmethod
    async def find_by_min_length(self, db, min_length: int) -> List[T]:
        pass
