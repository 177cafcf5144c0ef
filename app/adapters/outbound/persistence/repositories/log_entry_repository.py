# app/adapters/outbound/persistence/repositories/log_entry_repository.py (async version)

"""
Repository for the audit trail.

Append-only: entries are inserted by the access log middleware and
only ever read afterwards. There is no update or delete path.
"""

import logging
from datetime import datetime
from typing import List

from sqlalchemy import or_
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.future import select
from sqlalchemy.exc import SQLAlchemyError

from app.adapters.outbound.persistence.models import LogEntry
from app.application.ports.outbound import ILogEntryRepository
from app.domain.exceptions import AuditPersistenceFailure, DatabaseOperationException
from app.domain.models.audit_domain_model import AuditEntry


class AsyncLogEntryRepository(ILogEntryRepository):
    """Repository for audit entries."""

    def __init__(self):
        self.logger = logging.getLogger(f"{__name__}.LogEntry")

    async def add(self, db: AsyncSession, entry: AuditEntry) -> AuditEntry:
        """
        Persist one audit entry.

        Args:
            db: Async database session
            entry: Entry built by the access log middleware

        Returns:
            The stored entry with its server-assigned ID

        Raises:
            AuditPersistenceFailure: If the write fails
        """
        try:
            row = LogEntry(
                timestamp=entry.timestamp,
                method=entry.method,
                uri=entry.uri,
                request_summary=entry.request_summary,
                response_status=entry.response_status,
                response_body="",
                execution_time_ms=entry.execution_time_ms,
                client_ip=entry.client_ip,
                user_agent=entry.user_agent,
            )
            db.add(row)
            await db.commit()
            await db.refresh(row)

            self.logger.debug(f"Log saved to database: {entry.method} {entry.uri}")
            return self.to_domain(row)

        except SQLAlchemyError as e:
            await db.rollback()
            raise AuditPersistenceFailure(original_error=e)

    async def search(self, db: AsyncSession, keyword: str) -> List[AuditEntry]:
        """Substring match over the URI or the request summary."""
        return await self._find(
            db,
            or_(
                LogEntry.uri.contains(keyword, autoescape=True),
                LogEntry.request_summary.contains(keyword, autoescape=True),
            ),
        )

    async def find_by_date_range(self, db: AsyncSession, start: datetime, end: datetime) -> List[AuditEntry]:
        """Entries whose timestamp lies in [start, end]."""
        return await self._find(db, LogEntry.timestamp.between(start, end))

    async def find_slow_requests(self, db: AsyncSession, threshold_ms: int) -> List[AuditEntry]:
        return await self._find(db, LogEntry.execution_time_ms >= threshold_ms)

    async def find_by_method(self, db: AsyncSession, method: str) -> List[AuditEntry]:
        return await self._find(db, LogEntry.method == method.upper())

    async def find_by_status(self, db: AsyncSession, status: int) -> List[AuditEntry]:
        return await self._find(db, LogEntry.response_status == status)

    async def _find(self, db: AsyncSession, criterion) -> List[AuditEntry]:
        try:
            query = select(LogEntry).where(criterion).order_by(LogEntry.timestamp, LogEntry.id)
            result = await db.execute(query)
            return [self.to_domain(row) for row in result.scalars().all()]
        except SQLAlchemyError as e:
            self.logger.error(f"Error querying audit entries: {str(e)}")
            raise DatabaseOperationException(
                detail="Error querying audit entries",
                original_error=e
            )

    @staticmethod
    def to_domain(row: LogEntry) -> AuditEntry:
        return AuditEntry(
            id=row.id,
            timestamp=row.timestamp,
            method=row.method,
            uri=row.uri,
            request_summary=row.request_summary,
            response_status=row.response_status,
            execution_time_ms=row.execution_time_ms,
            client_ip=row.client_ip,
            user_agent=row.user_agent,
        )


# Public instance to be used by use cases
log_entry_repository = AsyncLogEntryRepository()
