# app/domain/exceptions.py

"""
Exceções personalizadas para o aplicativo.

Este módulo define exceções específicas da aplicação que fornecem
mensagens de erro significativas e códigos de status HTTP apropriados.
"""

from fastapi import HTTPException, status
from typing import Any, Dict, Optional


class DomainException(Exception):
    """
    Exceção pura do domínio, sem dependência de HTTP.

    O middleware de exceções traduz o 'internal_code' para o código HTTP.
    """

    def __init__(self, message: str, internal_code: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.internal_code = internal_code
        self.details = details or {}


class ALPException(HTTPException):
    """
    Exceção base para as exceções HTTP da aplicação.
    Estende HTTPException do FastAPI para fornecer contexto adicional.
    """

    def __init__(
            self,
            status_code: int,
            detail: Any = None,
            headers: Optional[Dict[str, Any]] = None,
            internal_code: Optional[str] = None,
    ):
        super().__init__(status_code=status_code, detail=detail, headers=headers)
        self.internal_code = internal_code


class ResourceNotFoundException(ALPException):
    """Recurso não encontrado."""

    def __init__(self, detail: str = "Resource not found", resource_id: Any = None):
        resource_info = f" (ID: {resource_id})" if resource_id is not None else ""
        super().__init__(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"{detail}{resource_info}",
            internal_code="RESOURCE_NOT_FOUND"
        )


class ClientNotFoundException(ResourceNotFoundException):
    """Client de API inexistente em uma operação de gerenciamento."""

    def __init__(self, client_id: Any = None):
        super().__init__(detail="API client not found", resource_id=client_id)


class ResourceAlreadyExistsException(ALPException):
    """Recurso já existe."""

    def __init__(self, detail: str = "Resource already exists", resource_id: Any = None):
        resource_info = f" (ID: {resource_id})" if resource_id is not None else ""
        super().__init__(
            status_code=status.HTTP_409_CONFLICT,
            detail=f"{detail}{resource_info}",
            internal_code="RESOURCE_ALREADY_EXISTS"
        )


class DatabaseOperationException(ALPException):
    """Erro na operação de banco de dados."""

    def __init__(self, detail: str = "Error executing database operation",
                 original_error: Optional[Exception] = None):
        error_info = f": {str(original_error)}" if original_error else ""
        super().__init__(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"{detail}{error_info}",
            internal_code="DATABASE_OPERATION_ERROR"
        )


class InvalidInputException(ALPException):
    """Dados de entrada inválidos."""

    def __init__(self, detail: str = "Invalid input data", fields: Optional[Dict[str, str]] = None):
        field_errors = ""
        if fields:
            field_errors = ": " + ", ".join([f"{field}: {error}" for field, error in fields.items()])

        super().__init__(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"{detail}{field_errors}",
            internal_code="INVALID_INPUT"
        )


########################################################################
# API key authentication
########################################################################

class ApiKeyRejectedException(DomainException):
    """
    Base para rejeições do gate de API key.

    Carrega o corpo JSON exato devolvido ao chamador com status 401.
    """

    error: str = ""
    message: str = ""

    def __init__(self):
        super().__init__(self.error, internal_code="INVALID_CREDENTIALS")

    def to_body(self) -> Dict[str, str]:
        return {"error": self.error, "message": self.message}


class MissingApiKeyException(ApiKeyRejectedException):
    """Cabeçalho X-API-Key ausente ou vazio."""

    error = "Missing API key"
    message = "Please provide X-API-Key header"


class InvalidApiKeyException(ApiKeyRejectedException):
    """Chave desconhecida ou pertencente a um client inativo (indistinguíveis)."""

    error = "Invalid API key"
    message = "The provided API key is invalid or inactive"


class AuditPersistenceFailure(DomainException):
    """Falha ao gravar uma entrada de auditoria. Nunca chega ao chamador."""

    def __init__(self, original_error: Optional[Exception] = None):
        super().__init__(
            f"Error persisting audit entry: {original_error}",
            internal_code="AUDIT_PERSISTENCE_ERROR"
        )
        self.original_error = original_error
