# app/shared/middleware/api_key_middleware.py (async version)

"""
Middleware for API key authentication.

Every request under a protected prefix must carry a valid key in the
X-API-Key header. Rejected requests get a 401 with a JSON body and never
reach the handler; accepted ones carry the resolved client in
request.state for the handlers and the access log middleware.
"""

import logging
from typing import Iterable, Optional, Sequence

from fastapi import Request, status
from fastapi.responses import JSONResponse
from starlette.middleware.base import BaseHTTPMiddleware

from app.adapters.configuration.config import settings
from app.adapters.outbound.persistence.database import get_db_context
from app.adapters.outbound.persistence.repositories.api_client_repository import api_client_repository
from app.application.use_cases.api_client_use_cases import AsyncApiClientService
from app.domain.exceptions import ApiKeyRejectedException, MissingApiKeyException

# Configure logger
logger = logging.getLogger(__name__)

# request.state attribute holding the authenticated client (domain model)
API_CLIENT_STATE_KEY = "api_client"


def path_matches(path: str, prefixes: Iterable[str]) -> bool:
    """
    Check whether a path falls under any of the prefixes.

    Matching is by path segment: "/api" covers "/api" and "/api/films"
    but not "/apiary".
    """
    for prefix in prefixes:
        base = prefix.rstrip("/")
        if path == base or path.startswith(base + "/"):
            return True
    return False


class AsyncApiKeyMiddleware(BaseHTTPMiddleware):
    """
    Middleware that validates the X-API-Key header on protected paths.
    """

    def __init__(
            self,
            app,
            protected_prefixes: Optional[Sequence[str]] = None,
            exempt_prefixes: Optional[Sequence[str]] = None,
    ):
        super().__init__(app)
        self.protected_prefixes = protected_prefixes if protected_prefixes is not None else settings.API_KEY_PROTECTED_PREFIXES
        self.exempt_prefixes = exempt_prefixes if exempt_prefixes is not None else settings.API_KEY_EXEMPT_PREFIXES

    def requires_key(self, path: str) -> bool:
        return path_matches(path, self.protected_prefixes) and not path_matches(path, self.exempt_prefixes)

    async def dispatch(self, request: Request, call_next):
        path = request.url.path
        if not self.requires_key(path):
            return await call_next(request)

        api_key = request.headers.get(settings.API_KEY_HEADER)
        client_hint = request.headers.get(settings.CLIENT_ID_HEADER)

        try:
            if not api_key:
                raise MissingApiKeyException()

            async with get_db_context() as db:
                client = await AsyncApiClientService(db).validate(api_key)

        except ApiKeyRejectedException as exc:
            logger.warning(
                f"{exc.error} for request: {request.method} {path}"
                f"{f' | Client hint: {client_hint}' if client_hint else ''}"
            )
            return JSONResponse(status_code=status.HTTP_401_UNAUTHORIZED, content=exc.to_body())

        identity = api_client_repository.to_domain(client)
        if client_hint and client_hint != identity.name:
            logger.debug(f"X-Client-ID '{client_hint}' does not match authenticated client '{identity.name}'")

        logger.info(
            f"Authenticated client: {identity.name} (Type: {identity.client_type.value if identity.client_type else None}) "
            f"for {request.method} {path}"
        )
        setattr(request.state, API_CLIENT_STATE_KEY, identity)

        return await call_next(request)


def get_request_client(request: Request):
    """
    Dependency returning the client authenticated for this request, or None
    on paths the API key middleware does not cover.
    """
    return getattr(request.state, API_CLIENT_STATE_KEY, None)
