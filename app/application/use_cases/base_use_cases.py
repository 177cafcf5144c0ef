# app/application/use_cases/base_use_cases.py

"""
Classe base para todos os serviços da aplicação.

Este módulo define a estrutura básica que todos os serviços devem seguir,
promovendo consistência e reutilização de código.
"""

from typing import Any, Dict, Generic, List, Type, TypeVar, Union
import logging

from pydantic import BaseModel
from sqlalchemy.ext.asyncio import AsyncSession

from app.adapters.outbound.persistence.repositories.base_repository import AsyncCRUDBase
from app.domain.exceptions import ResourceNotFoundException

# Configurar logger
logger = logging.getLogger(__name__)

# Define tipos genéricos para uso nas classes derivadas
ModelType = TypeVar("ModelType")


class BaseService(Generic[ModelType]):
    """
    Classe base para serviços, fornecendo operações CRUD comuns.

    Os serviços recebem a sessão assíncrona da requisição e delegam
    ao repositório; o tratamento de erros de banco fica no repositório.
    """

    not_found_exception: Type[ResourceNotFoundException] = ResourceNotFoundException

    def __init__(self, db_session: AsyncSession, repository: AsyncCRUDBase):
        """
        Inicializa o serviço com uma sessão de banco de dados e o repositório.

        Args:
            db_session: Sessão SQLAlchemy assíncrona ativa
            repository: Repositório da entidade
        """
        self.db_session = db_session
        self.repository = repository
        self.model_name = repository.model.__name__

    async def get_by_id(self, entity_id: Any) -> ModelType:
        """
        Busca uma entidade pelo ID.

        Raises:
            ResourceNotFoundException: Se a entidade não for encontrada
        """
        entity = await self.repository.get(self.db_session, entity_id)
        if not entity:
            logger.warning(f"{self.model_name} with ID {entity_id} not found")
            raise self._not_found(entity_id)
        return entity

    async def list_all(self, **filters) -> List[ModelType]:
        """Lista entidades com filtros de igualdade opcionais."""
        return await self.repository.get_multi(self.db_session, **filters)

    async def create(self, data: Union[BaseModel, Dict[str, Any]]) -> ModelType:
        """Cria uma nova entidade."""
        return await self.repository.create(self.db_session, obj_in=data)

    async def update(self, entity_id: Any, data: Union[BaseModel, Dict[str, Any]]) -> ModelType:
        """
        Atualiza uma entidade existente copiando os campos recebidos.

        Raises:
            ResourceNotFoundException: Se a entidade não for encontrada
        """
        entity = await self.get_by_id(entity_id)
        return await self.repository.update(self.db_session, db_obj=entity, obj_in=data)

    async def delete(self, entity_id: Any) -> None:
        """
        Remove uma entidade do banco de dados.

        Raises:
            ResourceNotFoundException: Se a entidade não for encontrada
        """
        await self.get_by_id(entity_id)
        await self.repository.remove(self.db_session, id=entity_id)
        logger.info(f"{self.model_name} {entity_id} deleted")

    def _not_found(self, entity_id: Any) -> ResourceNotFoundException:
        if self.not_found_exception is ResourceNotFoundException:
            return ResourceNotFoundException(detail=f"{self.model_name} not found", resource_id=entity_id)
        return self.not_found_exception(entity_id)
