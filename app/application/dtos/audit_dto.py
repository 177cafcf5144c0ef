# app/application/dtos/audit_dto.py

from datetime import datetime
from typing import Optional

from app.application.dtos.base_dto import CustomBaseModel


class LogEntryOutput(CustomBaseModel):
    """Entrada de auditoria como exposta pela API de logs."""
    id: int
    timestamp: datetime
    method: str
    uri: str
    request_summary: Optional[str] = None
    response_status: int
    execution_time_ms: int
    client_ip: Optional[str] = None
    user_agent: Optional[str] = None
