# app/application/dtos/base_dto.py

"""
Classe base para dtos personalizados.

Este módulo define a classe base CustomBaseModel que estende
o BaseModel do Pydantic com a configuração comum a todos os dtos
da aplicação.
"""

from decimal import Decimal
from typing import Annotated

from pydantic import BaseModel, ConfigDict, PlainSerializer
from pydantic.alias_generators import to_camel


class CustomBaseModel(BaseModel):
    """
    Modelo base personalizado para todos os dtos da aplicação.

    - Campos expostos em camelCase no JSON (releaseYear, apiKey, ...)
    - Entrada aceita camelCase ou snake_case
    - Construção direta a partir dos modelos ORM
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


# Valores monetários saem como número no JSON, não como string
Money = Annotated[Decimal, PlainSerializer(float, return_type=float, when_used="json")]
