# app/adapters/outbound/persistence/models/actor_model.py

from sqlalchemy import Column, Integer, String, DateTime
from sqlalchemy.orm import synonym

from app.adapters.outbound.persistence.models.base_model import Base
from app.shared.utils.clock import utcnow


class Actor(Base):
    """Ator do catálogo."""
    __tablename__ = "actor"

    id = Column("actor_id", Integer, primary_key=True, autoincrement=True)
    actor_id = synonym("id")
    first_name = Column(String(45), nullable=False)
    last_name = Column(String(45), nullable=False, index=True)
    last_update = Column(DateTime, nullable=False, default=utcnow, onupdate=utcnow)

    def __repr__(self) -> str:
        return f"<Actor(id={self.id}, name={self.first_name} {self.last_name})>"
