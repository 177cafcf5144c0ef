# app/adapters/inbound/api/v1/endpoints/admin_client_endpoint.py (async version)

"""
Endpoints para gerenciamento de clients de API.

Estas rotas ficam sob /api/admin e são isentas da validação de X-API-Key.
A chave é sempre gerada pelo servidor e devolvida no corpo da resposta.
"""

import logging
from typing import List

from fastapi import APIRouter, Depends, Path, status

from app.adapters.inbound.api.deps import get_api_client_service
from app.application.dtos.api_client_dto import ApiClientCreate, ApiClientOutput, ApiClientUpdate
from app.application.use_cases.api_client_use_cases import AsyncApiClientService
from app.domain.models.client_domain_model import ClientType

logger = logging.getLogger(__name__)

router = APIRouter()

CLIENT_NOT_FOUND_RESPONSE = {
    404: {
        "description": "Client not found",
        "content": {
            "application/json": {
                "example": {"detail": "API client not found (ID: 42)", "code": "RESOURCE_NOT_FOUND"}
            }
        }
    }
}


@router.get(
    "",
    response_model=List[ApiClientOutput],
    summary="Get all clients",
    description="Retrieve list of all registered API clients.",
)
async def get_all_clients(service: AsyncApiClientService = Depends(get_api_client_service)):
    return await service.list_all()


@router.get(
    "/active",
    response_model=List[ApiClientOutput],
    summary="Get active clients",
    description="Retrieve only active clients.",
)
async def get_active_clients(service: AsyncApiClientService = Depends(get_api_client_service)):
    return await service.list_active()


@router.get(
    "/type/{client_type}",
    response_model=List[ApiClientOutput],
    summary="Get clients by type",
    description="Filter clients by type (INTERNAL or EXTERNAL).",
)
async def get_clients_by_type(
        client_type: ClientType = Path(..., description="Client type", examples=["INTERNAL"]),
        service: AsyncApiClientService = Depends(get_api_client_service),
):
    return await service.list_by_type(client_type.value)


@router.get(
    "/{client_id}",
    response_model=ApiClientOutput,
    summary="Get client by ID",
    responses=CLIENT_NOT_FOUND_RESPONSE,
)
async def get_client_by_id(
        client_id: int = Path(..., description="Client ID"),
        service: AsyncApiClientService = Depends(get_api_client_service),
):
    return await service.get_by_id(client_id)


@router.post(
    "",
    response_model=ApiClientOutput,
    status_code=status.HTTP_201_CREATED,
    summary="Create new client",
    description="Register a new API client and generate its API key.",
    responses={409: {"description": "A client with this name already exists"}},
)
async def create_client(
        client_in: ApiClientCreate,
        service: AsyncApiClientService = Depends(get_api_client_service),
):
    client = await service.register(client_in)
    logger.info(f"Client registered via admin API: {client.name}")
    return client


@router.put(
    "/{client_id}",
    response_model=ApiClientOutput,
    summary="Update client",
    description="Update client information. The API key is never changed here.",
    responses=CLIENT_NOT_FOUND_RESPONSE,
)
async def update_client(
        client_in: ApiClientUpdate,
        client_id: int = Path(..., description="Client ID"),
        service: AsyncApiClientService = Depends(get_api_client_service),
):
    return await service.update(client_id, client_in)


@router.delete(
    "/{client_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete client",
    responses=CLIENT_NOT_FOUND_RESPONSE,
)
async def delete_client(
        client_id: int = Path(..., description="Client ID"),
        service: AsyncApiClientService = Depends(get_api_client_service),
):
    await service.delete(client_id)


@router.post(
    "/{client_id}/rotate-key",
    response_model=ApiClientOutput,
    summary="Rotate API key",
    description="Generate a new API key for an existing client. The old key stops working immediately.",
    responses=CLIENT_NOT_FOUND_RESPONSE,
)
async def rotate_api_key(
        client_id: int = Path(..., description="Client ID"),
        service: AsyncApiClientService = Depends(get_api_client_service),
):
    return await service.rotate(client_id)
