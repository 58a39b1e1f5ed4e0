"""Modelo Game"""
from sqlalchemy import Column, Integer, String, ForeignKey, DateTime
from sqlalchemy.orm import relationship
from app.models.base import BaseModel


class GameStatus:
    SCHEDULED = "SCHEDULED"
    IN_PROGRESS = "IN_PROGRESS"
    PAUSED = "PAUSED"
    FINISHED = "FINISHED"
    CANCELLED = "CANCELLED"


class GameKind:
    """Fase do jogo; só a fase de grupos soma pontos na classificação"""
    GROUP_STAGE = "GROUP_STAGE"
    SEMIFINAL = "SEMIFINAL"
    FINAL = "FINAL"


class Game(BaseModel):
    """Modelo de Jogo"""
    __tablename__ = "games"

    discipline_id = Column(Integer, ForeignKey("disciplines.id"), nullable=False, index=True)
    team1_id = Column(Integer, ForeignKey("teams.id"), nullable=False, index=True)
    team2_id = Column(Integer, ForeignKey("teams.id"), nullable=False, index=True)

    team1_goals = Column(Integer, default=0)
    team2_goals = Column(Integer, default=0)

    status = Column(String(20), nullable=False, default=GameStatus.SCHEDULED, index=True)
    kind = Column(String(20), nullable=False, default=GameKind.GROUP_STAGE)
    scheduled_at = Column(DateTime(timezone=True), nullable=True, index=True)

    # Relationships
    discipline = relationship("Discipline", backref="games")
    team1 = relationship("Team", foreign_keys=[team1_id])
    team2 = relationship("Team", foreign_keys=[team2_id])

    def __repr__(self):
        return (
            f"<Game(id={self.id}, team1_id={self.team1_id} {self.team1_goals} x "
            f"{self.team2_goals} team2_id={self.team2_id}, status='{self.status}')>"
        )
