"""Modelo GameEvent"""
from sqlalchemy import Column, Integer, String, ForeignKey
from sqlalchemy.orm import relationship
from app.models.base import BaseModel


class GameEventKind:
    GOAL = "GOAL"
    ASSIST = "ASSIST"
    YELLOW_CARD = "YELLOW_CARD"
    RED_CARD = "RED_CARD"
    SUBSTITUTION = "SUBSTITUTION"


class GameEvent(BaseModel):
    """Evento de jogo (gol, assistência, cartões...)"""
    __tablename__ = "game_events"

    game_id = Column(Integer, ForeignKey("games.id"), nullable=False, index=True)
    player_id = Column(Integer, ForeignKey("players.id"), nullable=True, index=True)
    kind = Column(String(20), nullable=False)
    minute = Column(Integer, nullable=True)

    # Relationships
    game = relationship("Game", backref="events")
    player = relationship("Player")

    def __repr__(self):
        return f"<GameEvent(game_id={self.game_id}, player_id={self.player_id}, kind='{self.kind}')>"
