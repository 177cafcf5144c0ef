# app/adapters/outbound/persistence/models/api_client_model.py

"""
Modelo de client para autenticação por API key.

Este módulo define o modelo ApiClient que representa aplicações
ou sistemas externos autorizados a acessar a API com uma chave estática.
"""

from sqlalchemy import Column, BigInteger, Integer, String, DateTime

from app.adapters.outbound.persistence.models.base_model import Base
from app.shared.utils.clock import utcnow


class ApiClient(Base):
    """
    Modelo que representa um client (aplicação/parceiro) que acessa a API.

    Attributes:
        id: Identificador único do client
        name: Nome único do client
        api_key: Chave de acesso gerada pelo servidor (única)
        description: Descrição livre
        status: ACTIVE ou INACTIVE
        created_at: Data e hora de criação (imutável)
        last_used_at: Última validação bem-sucedida da chave
        request_count: Número de validações bem-sucedidas
        contact_email: Email de contato
        client_type: INTERNAL, EXTERNAL ou vazio
    """
    __tablename__ = "api_client"

    id = Column(BigInteger().with_variant(Integer, "sqlite"), primary_key=True, autoincrement=True)
    name = Column("client_name", String(100), unique=True, nullable=False)
    api_key = Column(String(64), unique=True, nullable=False, index=True)
    description = Column(String(255))
    status = Column(String(20), nullable=False, default="ACTIVE", index=True)
    created_at = Column(DateTime, nullable=False, default=utcnow)
    last_used_at = Column(DateTime)
    request_count = Column(BigInteger, nullable=False, default=0)
    contact_email = Column(String(100))
    client_type = Column(String(50), index=True)

    def __repr__(self) -> str:
        """Representação em string do objeto ApiClient."""
        return f"<ApiClient(name={self.name}, status={self.status})>"
