# app/shared/middleware/exception_middleware.py (async version)

"""
Middleware for centralized exception handling.

This module defines middleware that intercepts exceptions escaping the
handlers and formats appropriate error responses for the client.
"""

import re
import logging
from typing import Optional, Callable

from fastapi import Request, status
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError, IntegrityError
from starlette.middleware.base import BaseHTTPMiddleware

from app.domain.exceptions import DomainException, ApiKeyRejectedException
from app.adapters.configuration.config import settings

# Configure logger
logger = logging.getLogger(__name__)

# Mapping from the domain 'internal_code' to the HTTP status
DOMAIN_STATUS_CODES = {
    "AUDIT_PERSISTENCE_ERROR": status.HTTP_500_INTERNAL_SERVER_ERROR,
}

# Common patterns for different databases
CONSTRAINT_PATTERNS = [
    r'constraint "(.*?)"',
    r'CONSTRAINT `(.*?)`',
    r'UNIQUE constraint failed: (.*)',
    r'duplicate key value violates unique constraint "(.*?)"',
]


class AsyncExceptionMiddleware(BaseHTTPMiddleware):
    """
    Middleware for centralized exception handling.
    Captures specific exceptions and formats the response accordingly.
    """

    async def dispatch(self, request: Request, call_next: Callable):
        client_host = request.client.host if request.client else 'N/A'
        try:
            return await call_next(request)

        except ApiKeyRejectedException as exc:
            # Same body as the API key middleware produces
            return JSONResponse(status_code=status.HTTP_401_UNAUTHORIZED, content=exc.to_body())

        except DomainException as exc:
            logger.warning(
                f"Domain exception: {str(exc)} | Code: {exc.internal_code} | "
                f"Path: {request.url.path}"
            )
            return JSONResponse(
                status_code=DOMAIN_STATUS_CODES.get(exc.internal_code, status.HTTP_400_BAD_REQUEST),
                content={
                    "detail": str(exc),
                    "code": exc.internal_code,
                    "errors": exc.details,
                }
            )

        except IntegrityError as exc:
            # Database integrity error
            constraint_name = self._extract_constraint_name(str(exc))
            error_message = "Database integrity error" if settings.ENVIRONMENT == "production" else str(exc)
            logger.error(
                f"Integrity error: Type={type(exc).__name__} | "
                f"Constraint={constraint_name or 'N/A'} | "
                f"Path: {request.url.path} | Client: {client_host}"
            )
            return JSONResponse(
                status_code=status.HTTP_409_CONFLICT,
                content={
                    "detail": error_message,
                    "code": f"INTEGRITY_ERROR{f'_{constraint_name}' if constraint_name else ''}"
                }
            )

        except SQLAlchemyError as exc:
            error_message = "Internal database error" if settings.ENVIRONMENT == "production" else str(exc)
            logger.error(
                f"Database error: {str(exc)} | "
                f"Path: {request.url.path} | Client: {client_host}"
            )
            return JSONResponse(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                content={
                    "detail": error_message,
                    "code": "DATABASE_ERROR"
                }
            )

        except Exception as exc:
            # Unhandled exceptions
            error_message = "Internal server error" if settings.ENVIRONMENT == "production" else str(exc)
            logger.exception(
                f"Unhandled exception: Type={type(exc).__name__} | "
                f"Path: {request.url.path} | Client: {client_host}"
            )
            return JSONResponse(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                content={
                    "detail": error_message,
                    "code": "INTERNAL_SERVER_ERROR"
                }
            )

    def _extract_constraint_name(self, error_message: str) -> Optional[str]:
        """
        Attempts to extract the constraint name from an integrity error message.

        Args:
            error_message: The complete error message

        Returns:
            The constraint name or None if not found
        """
        for pattern in CONSTRAINT_PATTERNS:
            match = re.search(pattern, error_message)
            if match:
                return match.group(1)
        return None
