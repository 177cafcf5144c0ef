# app/domain/__init__.py

"""
Módulo principal para componentes do domínio da aplicação.

Este módulo exporta as exceções do domínio.
"""

# Exportar todas as exceções para facilitar a importação
from app.domain.exceptions import (
    DomainException,               # Exceção base pura do domínio
    ResourceNotFoundException,
    ClientNotFoundException,
    ResourceAlreadyExistsException,
    DatabaseOperationException,
    InvalidInputException,
    ApiKeyRejectedException,
    MissingApiKeyException,
    InvalidApiKeyException,
    AuditPersistenceFailure,
)
