# app/adapters/inbound/api/v1/endpoints/film_endpoint.py (async version)

from decimal import Decimal
from typing import List

from fastapi import APIRouter, Depends, Path, Query, status

from app.adapters.inbound.api.deps import get_film_service
from app.application.dtos.catalog_dto import FilmInput, FilmOutput
from app.application.use_cases.catalog_use_cases import AsyncFilmService

router = APIRouter()

FILM_NOT_FOUND_RESPONSE = {404: {"description": "Film not found"}}


@router.get("", response_model=List[FilmOutput], summary="Get all films")
async def get_all_films(service: AsyncFilmService = Depends(get_film_service)):
    return await service.list_all()


@router.get(
    "/search",
    response_model=List[FilmOutput],
    summary="Search films by title",
    description="Search films containing the specified title (case-insensitive).",
)
async def search_films_by_title(
        title: str = Query(..., description="Title to search for", examples=["matrix"]),
        service: AsyncFilmService = Depends(get_film_service),
):
    return await service.search_by_title(title)


@router.get("/rating/{rating}", response_model=List[FilmOutput], summary="Get films by rating")
async def get_films_by_rating(
        rating: str = Path(..., description="Film rating", examples=["PG-13"]),
        service: AsyncFilmService = Depends(get_film_service),
):
    return await service.find_by_rating(rating)


@router.get("/year/{year}", response_model=List[FilmOutput], summary="Get films by release year")
async def get_films_by_release_year(
        year: int = Path(..., description="Release year", examples=[2005]),
        service: AsyncFilmService = Depends(get_film_service),
):
    return await service.find_by_release_year(year)


@router.get(
    "/rental-range",
    response_model=List[FilmOutput],
    summary="Get films by rental rate range",
    description="Retrieve films whose rental rate lies within [minRate, maxRate].",
)
async def get_films_by_rental_rate_range(
        min_rate: Decimal = Query(..., alias="minRate", examples=["2.00"]),
        max_rate: Decimal = Query(..., alias="maxRate", examples=["5.00"]),
        service: AsyncFilmService = Depends(get_film_service),
):
    return await service.find_by_rental_rate_range(min_rate, max_rate)


@router.get(
    "/long-films",
    response_model=List[FilmOutput],
    summary="Get long films",
    description="Retrieve films longer than or equal to the specified length.",
)
async def get_long_films(
        min_length: int = Query(..., alias="minLength", description="Minimum length in minutes"),
        service: AsyncFilmService = Depends(get_film_service),
):
    return await service.find_long_films(min_length)


@router.get("/{film_id}", response_model=FilmOutput, summary="Get film by ID", responses=FILM_NOT_FOUND_RESPONSE)
async def get_film_by_id(
        film_id: int = Path(..., description="Film ID"),
        service: AsyncFilmService = Depends(get_film_service),
):
    return await service.get_by_id(film_id)


@router.post("", response_model=FilmOutput, status_code=status.HTTP_201_CREATED, summary="Create new film")
async def create_film(film_in: FilmInput, service: AsyncFilmService = Depends(get_film_service)):
    return await service.create(film_in)


@router.put("/{film_id}", response_model=FilmOutput, summary="Update film", responses=FILM_NOT_FOUND_RESPONSE)
async def update_film(
        film_in: FilmInput,
        film_id: int = Path(..., description="Film ID"),
        service: AsyncFilmService = Depends(get_film_service),
):
    return await service.update(film_id, film_in)


@router.delete(
    "/{film_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete film",
    responses=FILM_NOT_FOUND_RESPONSE,
)
async def delete_film(
        film_id: int = Path(..., description="Film ID"),
        service: AsyncFilmService = Depends(get_film_service),
):
    await service.delete(film_id)
