# app/application/dtos/api_client_dto.py

"""
Schemas para dados de clients de API.

Este módulo define os dtos Pydantic para validação e serialização
dos clients que acessam a API por meio de X-API-Key.
"""

from datetime import datetime
from typing import Optional

from pydantic import EmailStr, Field, field_validator

from app.application.dtos.base_dto import CustomBaseModel
from app.domain.models.client_domain_model import ClientStatus, ClientType
from app.shared.utils.input_validation import InputValidator


class ApiClientBase(CustomBaseModel):
    """
    Schema base para dados de client.

    Nunca contém a chave: ela é sempre gerada pelo servidor.
    """
    description: Optional[str] = Field(None, max_length=255, description="Descrição do client")
    contact_email: Optional[EmailStr] = Field(None, description="Email de contato")
    client_type: Optional[ClientType] = Field(None, description="INTERNAL ou EXTERNAL")


class ApiClientCreate(ApiClientBase):
    """
    Schema para registro de um novo client.

    Campos como apiKey, status ou requestCount enviados pelo chamador são ignorados.
    """
    name: str = Field(..., min_length=1, max_length=100, description="Nome único do client")

    @field_validator("name")
    def validate_name(cls, v):
        is_valid, error_msg = InputValidator.validate_name(v)
        if not is_valid:
            raise ValueError(error_msg)
        return v.strip()


class ApiClientUpdate(ApiClientBase):
    """
    Schema para atualização de client.

    Apenas os campos enviados são alterados; a chave nunca é alterada aqui.
    """
    name: Optional[str] = Field(None, min_length=1, max_length=100, description="Nome único do client")
    status: Optional[ClientStatus] = Field(None, description="ACTIVE ou INACTIVE")

    @field_validator("name")
    def validate_name(cls, v):
        if v is None:
            return v
        is_valid, error_msg = InputValidator.validate_name(v)
        if not is_valid:
            raise ValueError(error_msg)
        return v.strip()


class ApiClientOutput(ApiClientBase):
    """
    Schema de retorno do client, incluindo a chave e os contadores de uso.
    """
    id: int
    name: str
    api_key: str = Field(..., description="Chave de acesso gerada pelo servidor")
    status: ClientStatus
    created_at: datetime
    last_used_at: Optional[datetime] = None
    request_count: int = Field(0, description="Validações bem-sucedidas da chave")
    contact_email: Optional[str] = None


class ApiKeyErrorResponse(CustomBaseModel):
    """Corpo das respostas 401 do gate de API key."""
    error: str
    message: str
