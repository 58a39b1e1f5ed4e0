"""Modelo TeamStatistics"""
from sqlalchemy import Column, Integer, ForeignKey, UniqueConstraint
from sqlalchemy.orm import relationship
from app.models.base import BaseModel


class TeamStatistics(BaseModel):
    """Estatísticas acumuladas de um time em uma modalidade"""
    __tablename__ = "team_statistics"

    team_id = Column(Integer, ForeignKey("teams.id"), nullable=False, index=True)
    discipline_id = Column(Integer, ForeignKey("disciplines.id"), nullable=False, index=True)

    wins = Column(Integer, default=0, nullable=False)
    draws = Column(Integer, default=0, nullable=False)
    losses = Column(Integer, default=0, nullable=False)
    goals_for = Column(Integer, default=0, nullable=False)
    goals_against = Column(Integer, default=0, nullable=False)
    points = Column(Integer, default=0, nullable=False)

    # Relationships
    team = relationship("Team", backref="statistics")
    discipline = relationship("Discipline", backref="team_statistics")

    __table_args__ = (
        UniqueConstraint('team_id', 'discipline_id', name='uq_team_discipline_stats'),
    )

    def __repr__(self):
        return (
            f"<TeamStatistics(team_id={self.team_id}, discipline_id={self.discipline_id}, "
            f"points={self.points})>"
        )
