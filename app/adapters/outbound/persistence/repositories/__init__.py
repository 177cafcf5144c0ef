# app/adapters/outbound/persistence/repositories/__init__.py (async version)

"""
CRUD (Create, Read, Update, Delete) module.

This module exports classes and instances of the repositories
for the different system entities, implementing the Repository pattern.
"""

# Import CRUD classes
from app.adapters.outbound.persistence.repositories.base_repository import AsyncCRUDBase
from app.adapters.outbound.persistence.repositories.api_client_repository import AsyncApiClientCRUD
from app.adapters.outbound.persistence.repositories.log_entry_repository import AsyncLogEntryRepository
from app.adapters.outbound.persistence.repositories.catalog_repository import AsyncFilmCRUD, AsyncActorCRUD

# Import singleton instances
from app.adapters.outbound.persistence.repositories.api_client_repository import api_client_repository
from app.adapters.outbound.persistence.repositories.log_entry_repository import log_entry_repository
from app.adapters.outbound.persistence.repositories.catalog_repository import film_repository, actor_repository

# Export all classes and instances
__all__ = [
    # Classes
    "AsyncCRUDBase",
    "AsyncApiClientCRUD",
    "AsyncLogEntryRepository",
    "AsyncFilmCRUD",
    "AsyncActorCRUD",

    # Instances
    "api_client_repository",
    "log_entry_repository",
    "film_repository",
    "actor_repository",
]
