# app/application/use_cases/__init__.py (async version)

"""
Application service module.

This package contains the application services that implement the business logic
of the application, organized according to functional domains.
"""

# Export service classes for easier imports
from app.application.use_cases.base_use_cases import BaseService
from app.application.use_cases.api_client_use_cases import AsyncApiClientService
from app.application.use_cases.audit_use_cases import AsyncAuditService
from app.application.use_cases.catalog_use_cases import AsyncFilmService, AsyncActorService

# Export all services
__all__ = [
    "BaseService",
    "AsyncApiClientService",
    "AsyncAuditService",
    "AsyncFilmService",
    "AsyncActorService",
]
