# app/adapters/outbound/persistence/models/__init__.py

"""
Módulo de modelos de dados.

Este módulo exporta todos os modelos SQLAlchemy do sistema,
facilitando a importação e uso em outros módulos.
"""

# Importar Base
from app.adapters.outbound.persistence.models.base_model import Base

# Modelos de autenticação e auditoria
from app.adapters.outbound.persistence.models.api_client_model import ApiClient
from app.adapters.outbound.persistence.models.log_entry_model import LogEntry

# Modelos do catálogo
from app.adapters.outbound.persistence.models.film_model import Film
from app.adapters.outbound.persistence.models.actor_model import Actor

# Exportar todos os modelos
__all__ = [
    # Base
    "Base",

    # Autenticação e auditoria
    "ApiClient",
    "LogEntry",

    # Catálogo
    "Film",
    "Actor",
]
