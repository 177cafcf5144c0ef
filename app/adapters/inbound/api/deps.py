# app/adapters/inbound/api/deps.py (async version)

"""
Dependencies for injection into API endpoints.

This module defines functions that provide dependencies via
FastAPI Depends() for database access and the per-request client identity.
"""

import logging

from fastapi import Depends, HTTPException, Request, status
from sqlalchemy.ext.asyncio import AsyncSession

from app.adapters.outbound.persistence.database import get_db
from app.application.use_cases.api_client_use_cases import AsyncApiClientService
from app.application.use_cases.audit_use_cases import AsyncAuditService
from app.application.use_cases.catalog_use_cases import AsyncFilmService, AsyncActorService
from app.domain.models.client_domain_model import ApiClient
from app.shared.middleware.api_key_middleware import get_request_client

# Configure logger
logger = logging.getLogger(__name__)

########################################################################
# Database Session Management
########################################################################

# Alias for get_db
get_db_session = get_db


########################################################################
# Services
########################################################################

def get_api_client_service(db: AsyncSession = Depends(get_db_session)) -> AsyncApiClientService:
    return AsyncApiClientService(db)


def get_audit_service(db: AsyncSession = Depends(get_db_session)) -> AsyncAuditService:
    return AsyncAuditService(db)


def get_film_service(db: AsyncSession = Depends(get_db_session)) -> AsyncFilmService:
    return AsyncFilmService(db)


def get_actor_service(db: AsyncSession = Depends(get_db_session)) -> AsyncActorService:
    return AsyncActorService(db)


########################################################################
# API Key Client Identity
########################################################################

def get_current_api_client(request: Request) -> ApiClient:
    """
    Client authenticated by the API key middleware.

    Raises:
        HTTPException: If the route was reached without an authenticated client,
            which means it is not covered by the middleware
    """
    client = get_request_client(request)
    if client is None:
        logger.warning(f"No authenticated client on request to {request.url.path}")
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Client authentication required.",
        )
    return client
