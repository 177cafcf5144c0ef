# app/shared/middleware/__init__.py (async version)

from app.shared.middleware.exception_middleware import AsyncExceptionMiddleware
from app.shared.middleware.api_key_middleware import (
    AsyncApiKeyMiddleware,
    API_CLIENT_STATE_KEY,
    get_request_client,
)
from app.shared.middleware.access_log_middleware import AsyncAccessLogMiddleware

# Export all for easy imports
__all__ = [
    "AsyncExceptionMiddleware",
    "AsyncApiKeyMiddleware",
    "AsyncAccessLogMiddleware",
    "API_CLIENT_STATE_KEY",
    "get_request_client",
]
