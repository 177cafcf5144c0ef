# app/adapters/outbound/persistence/models/log_entry_model.py

"""
Modelo de registro de auditoria de requisições.

Cada requisição registrada pelo middleware de acesso gera exatamente
uma linha nesta tabela. Os registros são apenas inseridos, nunca alterados.
"""

from sqlalchemy import Column, BigInteger, Integer, String, Text, DateTime

from app.adapters.outbound.persistence.models.base_model import Base


class LogEntry(Base):
    """
    Modelo que representa uma entrada de auditoria.

    Attributes:
        id: Identificador único da entrada
        timestamp: Momento de conclusão da requisição
        method: Método HTTP
        uri: Caminho completo incluindo query string
        request_body: Resumo redigido da requisição (nunca a chave completa)
        response_status: Código HTTP da resposta
        response_body: Sempre vazio, mantido por compatibilidade de formato
        execution_time_ms: Tempo de execução em milissegundos
        client_ip: IP resolvido do cliente
        user_agent: Cabeçalho User-Agent
    """
    __tablename__ = "api_log"

    id = Column(BigInteger().with_variant(Integer, "sqlite"), primary_key=True, autoincrement=True)
    timestamp = Column(DateTime, nullable=False, index=True)
    method = Column(String(10), index=True)
    uri = Column(String(500))
    request_summary = Column("request_body", Text)
    response_status = Column(Integer, index=True)
    response_body = Column(Text, default="")
    execution_time_ms = Column(BigInteger)
    client_ip = Column(String(50))
    user_agent = Column(String(500))

    def __repr__(self) -> str:
        return f"<LogEntry(method={self.method}, uri={self.uri}, status={self.response_status})>"
