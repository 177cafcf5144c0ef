# app/adapters/outbound/persistence/repositories/catalog_repository.py (async version)

"""
Repositories for the catalog entities (films and actors).

Plain field-for-field storage; the only extra operations are the
film lookups exposed by the films API.
"""

from decimal import Decimal
from typing import List

from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.future import select

from app.adapters.outbound.persistence.repositories.base_repository import AsyncCRUDBase
from app.adapters.outbound.persistence.models import Film, Actor
from app.application.dtos.catalog_dto import FilmInput, ActorInput
from app.application.ports.outbound import IFilmRepository


class AsyncFilmCRUD(AsyncCRUDBase[Film, FilmInput, FilmInput], IFilmRepository):
    """Film repository."""

    async def search_by_title(self, db: AsyncSession, title: str) -> List[Film]:
        """Case-insensitive substring search on the title."""
        query = select(Film).where(Film.title.ilike(f"%{title}%")).order_by(Film.id)
        return await self.fetch_all(db, query)

    async def find_by_rating(self, db: AsyncSession, rating: str) -> List[Film]:
        return await self.get_multi(db, rating=rating)

    async def find_by_release_year(self, db: AsyncSession, year: int) -> List[Film]:
        return await self.get_multi(db, release_year=year)

    async def find_by_rental_rate_range(
            self, db: AsyncSession, min_rate: Decimal, max_rate: Decimal
    ) -> List[Film]:
        query = select(Film).where(Film.rental_rate.between(min_rate, max_rate)).order_by(Film.id)
        return await self.fetch_all(db, query)

    async def find_by_min_length(self, db: AsyncSession, min_length: int) -> List[Film]:
        query = select(Film).where(Film.length >= min_length).order_by(Film.id)
        return await self.fetch_all(db, query)


class AsyncActorCRUD(AsyncCRUDBase[Actor, ActorInput, ActorInput]):
    """Actor repository. Generic CRUD is all the actors API needs."""


# Public instances to be used by use cases
film_repository = AsyncFilmCRUD(Film)
actor_repository = AsyncActorCRUD(Actor)
