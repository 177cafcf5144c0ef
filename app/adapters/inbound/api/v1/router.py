# app/adapters/inbound/api/v1/router.py

from fastapi import APIRouter
from app.adapters.inbound.api.v1.endpoints import (
    actor_endpoint,
    admin_client_endpoint,
    film_endpoint,
    log_endpoint,
)
from app.application.dtos.api_client_dto import ApiKeyErrorResponse

# Resposta 401 do gate de X-API-Key, documentada nas rotas protegidas
API_KEY_RESPONSES = {
    401: {
        "model": ApiKeyErrorResponse,
        "description": "Missing, unknown or inactive API key",
    }
}

api_router = APIRouter()

# Catálogo (protegido por X-API-Key)
api_router.include_router(
    film_endpoint.router, prefix="/films", tags=["Film Management"], responses=API_KEY_RESPONSES
)
api_router.include_router(
    actor_endpoint.router, prefix="/actors", tags=["Actor Management"], responses=API_KEY_RESPONSES
)

# Auditoria (protegido por X-API-Key)
api_router.include_router(
    log_endpoint.router, prefix="/logs", tags=["Request Logs"], responses=API_KEY_RESPONSES
)

# Gerenciamento de clients (isento de X-API-Key)
api_router.include_router(admin_client_endpoint.router, prefix="/admin/clients", tags=["Client Management (Admin)"])
