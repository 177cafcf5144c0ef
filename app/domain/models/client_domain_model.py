# app/domain/models/client_domain_model.py

from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Optional


class ClientStatus(str, Enum):
    ACTIVE = "ACTIVE"
    INACTIVE = "INACTIVE"


class ClientType(str, Enum):
    INTERNAL = "INTERNAL"
    EXTERNAL = "EXTERNAL"


# Name recorded in the audit trail when no client was resolved
UNKNOWN_CLIENT = "UNKNOWN"


@dataclass
class ApiClient:
    """Domain model for an API-key client."""
    id: int
    name: str
    api_key: str
    status: ClientStatus
    created_at: datetime
    request_count: int = 0
    last_used_at: Optional[datetime] = None
    description: Optional[str] = None
    contact_email: Optional[str] = None
    client_type: Optional[ClientType] = None

    @property
    def is_active(self) -> bool:
        return self.status == ClientStatus.ACTIVE
