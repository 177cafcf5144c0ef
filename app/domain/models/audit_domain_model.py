# app/domain/models/audit_domain_model.py

from dataclasses import dataclass
from datetime import datetime
from typing import Optional


@dataclass(frozen=True)
class AuditEntry:
    """Immutable record of one handled request."""
    timestamp: datetime
    method: str
    uri: str
    request_summary: str
    response_status: int
    execution_time_ms: int
    client_ip: Optional[str] = None
    user_agent: Optional[str] = None
    id: Optional[int] = None
