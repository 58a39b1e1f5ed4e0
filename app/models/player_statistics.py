"""Modelo PlayerStatistics"""
from sqlalchemy import Column, Integer, ForeignKey, UniqueConstraint
from sqlalchemy.orm import relationship
from app.models.base import BaseModel


class PlayerStatistics(BaseModel):
    """Estatísticas acumuladas de um jogador em uma modalidade"""
    __tablename__ = "player_statistics"

    player_id = Column(Integer, ForeignKey("players.id"), nullable=False, index=True)
    discipline_id = Column(Integer, ForeignKey("disciplines.id"), nullable=False, index=True)

    goals = Column(Integer, default=0, nullable=False)
    assists = Column(Integer, default=0, nullable=False)
    yellow_cards = Column(Integer, default=0, nullable=False)
    red_cards = Column(Integer, default=0, nullable=False)
    games_played = Column(Integer, default=0, nullable=False)

    # Relationships
    player = relationship("Player", backref="statistics")
    discipline = relationship("Discipline", backref="player_statistics")

    __table_args__ = (
        UniqueConstraint('player_id', 'discipline_id', name='uq_player_discipline_stats'),
    )

    def __repr__(self):
        return (
            f"<PlayerStatistics(player_id={self.player_id}, discipline_id={self.discipline_id}, "
            f"goals={self.goals})>"
        )
