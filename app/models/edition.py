"""Modelo Edition"""
from sqlalchemy import Column, Integer, String
from app.models.base import BaseModel


class Edition(BaseModel):
    """Edição (temporada) de um campeonato"""
    __tablename__ = "editions"

    name = Column(String(255), nullable=False)
    year = Column(Integer, nullable=False, index=True)

    def __repr__(self):
        return f"<Edition(id={self.id}, name='{self.name}', year={self.year})>"
