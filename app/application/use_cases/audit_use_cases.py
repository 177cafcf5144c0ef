# app/application/use_cases/audit_use_cases.py (async version)

"""
Service for the audit trail.

Writes one entry per logged request and exposes the read-only
queries used by operational tooling.
"""

import logging
from datetime import datetime
from typing import List

from sqlalchemy.ext.asyncio import AsyncSession

from app.adapters.outbound.persistence.repositories.log_entry_repository import log_entry_repository
from app.application.ports.inbound import IAuditUseCase
from app.domain.exceptions import InvalidInputException
from app.domain.models.audit_domain_model import AuditEntry
from app.shared.utils.clock import as_naive_utc

logger = logging.getLogger(__name__)


class AsyncAuditService(IAuditUseCase):
    """Service over the append-only audit store."""

    def __init__(self, db_session: AsyncSession):
        self.db_session = db_session

    async def record(self, entry: AuditEntry) -> AuditEntry:
        """
        Persist an audit entry.

        Raises:
            AuditPersistenceFailure: If the write fails; callers on the
                request path must catch it.
        """
        return await log_entry_repository.add(self.db_session, entry)

    async def search(self, keyword: str) -> List[AuditEntry]:
        return await log_entry_repository.search(self.db_session, keyword)

    async def find_by_date_range(self, start: datetime, end: datetime) -> List[AuditEntry]:
        start, end = as_naive_utc(start), as_naive_utc(end)
        if start > end:
            raise InvalidInputException(detail="startDate must not be after endDate")
        return await log_entry_repository.find_by_date_range(
            self.db_session, start, end
        )

    async def find_slow_requests(self, threshold_ms: int) -> List[AuditEntry]:
        return await log_entry_repository.find_slow_requests(self.db_session, threshold_ms)

    async def find_by_method(self, method: str) -> List[AuditEntry]:
        return await log_entry_repository.find_by_method(self.db_session, method)

    async def find_by_status(self, status: int) -> List[AuditEntry]:
        return await log_entry_repository.find_by_status(self.db_session, status)
