"""Modelo Team"""
from sqlalchemy import Column, Integer, String, ForeignKey
from sqlalchemy.orm import relationship
from app.models.base import BaseModel


class Team(BaseModel):
    """Modelo de Time"""
    __tablename__ = "teams"

    name = Column(String(255), nullable=False)
    edition_id = Column(Integer, ForeignKey("editions.id"), nullable=True, index=True)

    # Relationships
    edition = relationship("Edition", backref="teams")

    def __repr__(self):
        return f"<Team(id={self.id}, name='{self.name}', edition_id={self.edition_id})>"
