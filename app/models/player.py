"""Modelo Player"""
from sqlalchemy import Column, Integer, String, ForeignKey
from sqlalchemy.orm import relationship
from app.models.base import BaseModel


class Player(BaseModel):
    """Modelo de Jogador"""
    __tablename__ = "players"

    name = Column(String(255), nullable=False)
    team_id = Column(Integer, ForeignKey("teams.id"), nullable=True, index=True)
    edition_id = Column(Integer, ForeignKey("editions.id"), nullable=True, index=True)

    # Relationships
    team = relationship("Team", backref="players")
    edition = relationship("Edition", backref="players")

    def __repr__(self):
        return f"<Player(id={self.id}, name='{self.name}', team_id={self.team_id})>"
