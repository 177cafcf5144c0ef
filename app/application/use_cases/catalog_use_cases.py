# app/application/use_cases/catalog_use_cases.py (async version)

"""
Services for the catalog (films and actors).

Each operation forwards to the repository; updates copy the
incoming fields onto the stored record.
"""

from decimal import Decimal
from typing import List

from sqlalchemy.ext.asyncio import AsyncSession

from app.adapters.outbound.persistence.models import Film, Actor
from app.adapters.outbound.persistence.repositories.catalog_repository import film_repository, actor_repository
from app.application.dtos.catalog_dto import FilmInput, ActorInput
from app.application.ports.inbound import IFilmUseCase, IActorUseCase
from app.application.use_cases.base_use_cases import BaseService
from app.domain.exceptions import InvalidInputException


class AsyncFilmService(BaseService[Film], IFilmUseCase):
    """Film management."""

    def __init__(self, db_session: AsyncSession):
        super().__init__(db_session, film_repository)

    async def create(self, data: FilmInput) -> Film:
        return await super().create(data.model_dump())

    async def update(self, film_id: int, data: FilmInput) -> Film:
        # Full replacement: every field is copied, including unset ones
        return await super().update(film_id, data.model_dump())

    async def search_by_title(self, title: str) -> List[Film]:
        return await film_repository.search_by_title(self.db_session, title)

    async def find_by_rating(self, rating: str) -> List[Film]:
        return await film_repository.find_by_rating(self.db_session, rating)

    async def find_by_release_year(self, year: int) -> List[Film]:
        return await film_repository.find_by_release_year(self.db_session, year)

    async def find_by_rental_rate_range(self, min_rate: Decimal, max_rate: Decimal) -> List[Film]:
        if min_rate > max_rate:
            raise InvalidInputException(detail="minRate must not be greater than maxRate")
        return await film_repository.find_by_rental_rate_range(self.db_session, min_rate, max_rate)

    async def find_long_films(self, min_length: int) -> List[Film]:
        return await film_repository.find_by_min_length(self.db_session, min_length)


class AsyncActorService(BaseService[Actor], IActorUseCase):
    """Actor management."""

    def __init__(self, db_session: AsyncSession):
        super().__init__(db_session, actor_repository)

    async def create(self, data: ActorInput) -> Actor:
        return await super().create(data.model_dump())

    async def update(self, actor_id: int, data: ActorInput) -> Actor:
        return await super().update(actor_id, data.model_dump())
