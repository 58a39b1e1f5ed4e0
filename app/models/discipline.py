"""Modelo Discipline (modalidade)"""
from sqlalchemy import Column, String
from app.models.base import BaseModel


class Discipline(BaseModel):
    """Modalidade esportiva (futsal, vôlei, basquete...) que delimita as estatísticas"""
    __tablename__ = "disciplines"

    name = Column(String(255), nullable=False, unique=True)

    def __repr__(self):
        return f"<Discipline(id={self.id}, name='{self.name}')>"
