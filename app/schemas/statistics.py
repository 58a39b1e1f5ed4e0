"""Schemas de Estatísticas"""
from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel
from typing import Dict, List, Optional


class CamelModel(BaseModel):
    """Base dos schemas de resposta: JSON em camelCase"""
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


class EntityRef(CamelModel):
    """Referência resumida (id + nome)"""
    id: int
    name: str


class StandingsRow(CamelModel):
    """Linha da tabela de classificação"""
    position: int
    team: EntityRef
    discipline_id: int
    discipline: str
    games_played: int
    wins: int
    draws: int
    losses: int
    goals_for: int
    goals_against: int
    goal_difference: int
    points: int


class ScorerRow(CamelModel):
    """Linha da artilharia"""
    id: int
    name: str
    discipline_id: int
    discipline: str
    goals: int
    assists: int
    yellow_cards: int
    red_cards: int
    games: int


class TeamStatisticsResponse(CamelModel):
    """Estatísticas de um time em uma modalidade"""
    id: int
    team_id: int
    team: Optional[EntityRef] = None
    discipline_id: int
    discipline: Optional[EntityRef] = None
    wins: int
    draws: int
    losses: int
    goals_for: int
    goals_against: int
    points: int


class PlayerStatisticsResponse(CamelModel):
    """Estatísticas de um jogador em uma modalidade"""
    id: int
    player_id: int
    player: Optional[EntityRef] = None
    discipline_id: int
    discipline: Optional[EntityRef] = None
    goals: int
    assists: int
    yellow_cards: int
    red_cards: int
    games_played: int


class TeamStatisticsDelta(BaseModel):
    """Incrementos aplicados às estatísticas de um time (campos omitidos valem 0)"""
    wins: Optional[int] = Field(default=None, ge=0)
    draws: Optional[int] = Field(default=None, ge=0)
    losses: Optional[int] = Field(default=None, ge=0)
    goals_for: Optional[int] = Field(default=None, ge=0)
    goals_against: Optional[int] = Field(default=None, ge=0)
    points: Optional[int] = Field(default=None, ge=0)


class PlayerStatisticsDelta(BaseModel):
    """Incrementos aplicados às estatísticas de um jogador"""
    goals: int = Field(default=0, ge=0)
    assists: int = Field(default=0, ge=0)
    yellow_cards: int = Field(default=0, ge=0)
    red_cards: int = Field(default=0, ge=0)
    games_played: int = Field(default=0, ge=0)


class DashboardTopTeam(CamelModel):
    team: EntityRef
    discipline: EntityRef
    points: int
    wins: int
    draws: int
    losses: int
    goals_for: int
    goals_against: int


class DashboardTopScorer(CamelModel):
    player: EntityRef
    discipline: EntityRef
    goals: int
    assists: int
    games: int


class DashboardSummary(CamelModel):
    total_games: int
    games_by_status: Dict[str, int]
    top_teams: List[DashboardTopTeam]


class DashboardTopScorers(CamelModel):
    top_scorers: List[DashboardTopScorer]


class ChartPoint(BaseModel):
    period: str
    value: int


class ChartData(BaseModel):
    metric: str
    period: str
    data: List[ChartPoint]


class DashboardChartData(CamelModel):
    chart_data: ChartData


class RecalculationSummary(CamelModel):
    games_processed: int
    teams: int
    players: int
