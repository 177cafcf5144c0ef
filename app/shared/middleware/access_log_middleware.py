# app/shared/middleware/access_log_middleware.py (async version)

"""
Middleware for the request audit trail.

This module implements a middleware that measures each logged request
and records exactly one audit entry for it, whatever the outcome:
handled, failed, or rejected by the API key middleware.
"""

import time
import logging
from typing import Optional, Sequence

from fastapi import Request
from starlette.middleware.base import BaseHTTPMiddleware

from app.adapters.configuration.config import settings
from app.adapters.outbound.persistence.database import get_db_context
from app.application.use_cases.audit_use_cases import AsyncAuditService
from app.domain.exceptions import AuditPersistenceFailure
from app.domain.models.audit_domain_model import AuditEntry
from app.domain.models.client_domain_model import UNKNOWN_CLIENT
from app.domain.services.api_key_service import ApiKeyService
from app.shared.middleware.api_key_middleware import API_CLIENT_STATE_KEY, path_matches
from app.shared.utils.clock import utcnow

# Configure logger
logger = logging.getLogger(__name__)


class AsyncAccessLogMiddleware(BaseHTTPMiddleware):
    """
    Middleware for request auditing.
    Times each request and persists one audit entry when it completes.
    """

    def __init__(
            self,
            app,
            logged_prefixes: Optional[Sequence[str]] = None,
            exempt_prefixes: Optional[Sequence[str]] = None,
    ):
        super().__init__(app)
        self.logged_prefixes = logged_prefixes if logged_prefixes is not None else settings.ACCESS_LOG_PREFIXES
        self.exempt_prefixes = exempt_prefixes if exempt_prefixes is not None else settings.ACCESS_LOG_EXEMPT_PREFIXES

    def is_logged(self, path: str) -> bool:
        return path_matches(path, self.logged_prefixes) and not path_matches(path, self.exempt_prefixes)

    async def dispatch(self, request: Request, call_next):
        if not self.is_logged(request.url.path):
            return await call_next(request)

        start_time = time.perf_counter()
        # Stays 500 if the downstream app raises instead of answering
        status_code = 500
        try:
            response = await call_next(request)
            status_code = response.status_code
            return response
        finally:
            elapsed_ms = max(0, int((time.perf_counter() - start_time) * 1000))
            await self.record(request, status_code, elapsed_ms)

    async def record(self, request: Request, status_code: int, elapsed_ms: int) -> None:
        """
        Build and persist the audit entry for a finished request.

        Never raises: failures are reported on the operational log only.
        """
        try:
            client = getattr(request.state, API_CLIENT_STATE_KEY, None)
            client_name = client.name if client else UNKNOWN_CLIENT

            uri = request.url.path
            if request.url.query:
                uri += f"?{request.url.query}"

            remote_addr = request.client.host if request.client else None
            user_agent = request.headers.get("User-Agent")
            client_ip = ApiKeyService.resolve_client_ip(request.headers, remote_addr)

            entry = AuditEntry(
                timestamp=utcnow(),
                method=request.method,
                uri=uri[:500],
                request_summary=ApiKeyService.build_request_summary(
                    client.name if client else None,
                    request.headers.get(settings.API_KEY_HEADER),
                ),
                response_status=status_code,
                execution_time_ms=elapsed_ms,
                client_ip=client_ip[:50] if client_ip else None,
                user_agent=user_agent[:500] if user_agent else None,
            )

            if settings.ENVIRONMENT == "production":
                logger.info(
                    f"API Request - Client: {client_name}, Method: {request.method}, "
                    f"Status: {status_code}, Execution Time: {elapsed_ms}ms"
                )
            else:
                logger.info(
                    f"API Request - Client: {client_name}, Method: {request.method}, URI: {uri}, "
                    f"Status: {status_code}, Execution Time: {elapsed_ms}ms | IP: {client_ip or 'N/A'}"
                )

            async with get_db_context() as db:
                await AsyncAuditService(db).record(entry)

        except AuditPersistenceFailure as exc:
            logger.exception(f"Error saving audit entry to database: {exc.original_error}")

        except Exception:
            logger.exception("Error in access log middleware")
