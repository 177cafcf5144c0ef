# app/adapters/inbound/api/v1/endpoints/actor_endpoint.py (async version)

from typing import List

from fastapi import APIRouter, Depends, Path, status

from app.adapters.inbound.api.deps import get_actor_service
from app.application.dtos.catalog_dto import ActorInput, ActorOutput
from app.application.use_cases.catalog_use_cases import AsyncActorService

router = APIRouter()


@router.get("", response_model=List[ActorOutput], summary="Get all actors")
async def get_all_actors(service: AsyncActorService = Depends(get_actor_service)):
    return await service.list_all()


@router.get("/{actor_id}", response_model=ActorOutput, summary="Get actor by ID")
async def get_actor_by_id(
        actor_id: int = Path(...),
        service: AsyncActorService = Depends(get_actor_service),
):
    return await service.get_by_id(actor_id)


@router.post("", response_model=ActorOutput, status_code=status.HTTP_201_CREATED, summary="Create new actor")
async def create_actor(actor_in: ActorInput, service: AsyncActorService = Depends(get_actor_service)):
    return await service.create(actor_in)


@router.put("/{actor_id}", response_model=ActorOutput, summary="Update actor")
async def update_actor(
        actor_in: ActorInput,
        actor_id: int = Path(...),
        service: AsyncActorService = Depends(get_actor_service),
):
    return await service.update(actor_id, actor_in)


@router.delete("/{actor_id}", status_code=status.HTTP_204_NO_CONTENT, summary="Delete actor")
async def delete_actor(
        actor_id: int = Path(...),
        service: AsyncActorService = Depends(get_actor_service),
):
    await service.delete(actor_id)
