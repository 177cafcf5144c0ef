# app/adapters/outbound/persistence/models/film_model.py

from decimal import Decimal

from sqlalchemy import Column, Integer, SmallInteger, String, Text, Numeric, DateTime
from sqlalchemy.orm import synonym

from app.adapters.outbound.persistence.models.base_model import Base
from app.shared.utils.clock import utcnow


class Film(Base):
    """
    Filme do catálogo.

    Armazenamento campo a campo, sem nenhum valor derivado.
    """
    __tablename__ = "film"

    id = Column("film_id", Integer, primary_key=True, autoincrement=True)
    film_id = synonym("id")
    title = Column(String(255), nullable=False, index=True)
    description = Column(Text)
    release_year = Column(SmallInteger)
    language_id = Column(SmallInteger, nullable=False)
    original_language_id = Column(SmallInteger)
    rental_duration = Column(SmallInteger, nullable=False, default=3)
    rental_rate = Column(Numeric(4, 2), nullable=False, default=Decimal("4.99"))
    length = Column(SmallInteger)
    replacement_cost = Column(Numeric(5, 2), nullable=False, default=Decimal("19.99"))
    rating = Column(String(5), default="G")
    special_features = Column(String(255))
    last_update = Column(DateTime, nullable=False, default=utcnow, onupdate=utcnow)

    def __repr__(self) -> str:
        return f"<Film(film_id={self.film_id}, title={self.title})>"
