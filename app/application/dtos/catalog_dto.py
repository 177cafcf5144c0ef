# app/application/dtos/catalog_dto.py

"""
Schemas para o catálogo (filmes e atores).
"""

from datetime import datetime
from decimal import Decimal
from typing import Literal, Optional

from pydantic import Field, field_validator

from app.application.dtos.base_dto import CustomBaseModel, Money

FilmRating = Literal["G", "PG", "PG-13", "R", "NC-17"]


class FilmInput(CustomBaseModel):
    """
    Schema de criação e atualização completa de filme.

    Na atualização todos os campos são copiados para o registro existente.
    """
    title: str = Field(..., max_length=255, description="Título do filme")
    description: Optional[str] = None
    release_year: Optional[int] = Field(None, ge=1901, le=2155, description="Ano de lançamento")
    language_id: int = Field(..., ge=1, description="ID do idioma")
    original_language_id: Optional[int] = Field(None, ge=1)
    rental_duration: int = Field(3, ge=1, le=255, description="Duração do aluguel em dias")
    rental_rate: Decimal = Field(Decimal("4.99"), gt=0, max_digits=4, decimal_places=2)
    length: Optional[int] = Field(None, ge=1, description="Duração em minutos")
    replacement_cost: Decimal = Field(Decimal("19.99"), gt=0, max_digits=5, decimal_places=2)
    rating: Optional[FilmRating] = "G"
    special_features: Optional[str] = Field(None, max_length=255)

    @field_validator("title")
    def title_not_blank(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("Title is mandatory")
        return v


class FilmOutput(CustomBaseModel):
    film_id: int
    title: str
    description: Optional[str] = None
    release_year: Optional[int] = None
    language_id: int
    original_language_id: Optional[int] = None
    rental_duration: int
    rental_rate: Money
    length: Optional[int] = None
    replacement_cost: Money
    rating: Optional[str] = None
    special_features: Optional[str] = None
    last_update: Optional[datetime] = None


class ActorInput(CustomBaseModel):
    first_name: str = Field(..., min_length=1, max_length=45)
    last_name: str = Field(..., min_length=1, max_length=45)


class ActorOutput(CustomBaseModel):
    actor_id: int
    first_name: str
    last_name: str
    last_update: Optional[datetime] = None
