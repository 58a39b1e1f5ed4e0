"""Service do Dashboard (Async)"""
import random
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.exc import SQLAlchemyError
from app.core.config import settings
from app.core.exceptions import StoreError
from app.repositories.reference_repository import ReferenceRepository
from app.repositories.statistics_repository import StatisticsRepository
from app.schemas.statistics import (
    ChartData,
    ChartPoint,
    DashboardChartData,
    DashboardSummary,
    DashboardTopScorer,
    DashboardTopScorers,
    DashboardTopTeam,
    EntityRef,
)
from app.services.ranking import UNKNOWN_DISCIPLINE, UNKNOWN_PLAYER, UNKNOWN_TEAM
import logging

logger = logging.getLogger(__name__)

# period -> (quantidade de pontos, rótulo)
CHART_PERIODS = {
    "day": (24, lambda i: f"Hora {i}"),
    "week": (7, lambda i: f"Dia {i + 1}"),
    "month": (30, lambda i: f"Dia {i + 1}"),
}
CHART_DEFAULT_PERIOD = (12, lambda i: f"Mês {i + 1}")


def _ref(entity, entity_id: int, fallback: str) -> EntityRef:
    return EntityRef(id=entity_id, name=entity.name if entity else fallback)


def build_chart_data(metric: str, period: str) -> ChartData:
    """
    Stub: valores aleatórios em [0, 100). Não há série temporal real por trás,
    então o ETag desta resposta muda a cada requisição.
    """
    points, label = CHART_PERIODS.get(period, CHART_DEFAULT_PERIOD)
    data = [ChartPoint(period=label(i), value=random.randrange(100)) for i in range(points)]
    return ChartData(metric=metric, period=period, data=data)


class DashboardService:
    """Resumos agregados para o dashboard"""

    def __init__(self, db: AsyncSession):
        self.db = db
        self.repository = StatisticsRepository(db)
        self.references = ReferenceRepository(db)

    async def get_summary(self) -> DashboardSummary:
        try:
            total_games = await self.references.count_games()
            games_by_status = await self.references.count_games_by_status()
            top_teams = await self.repository.get_top_teams(settings.DASHBOARD_TOP_TEAMS)
        except SQLAlchemyError as e:
            logger.error(f"Erro ao buscar resumo do dashboard: {e}")
            raise StoreError("Erro ao buscar estatísticas do dashboard") from e

        return DashboardSummary(
            total_games=total_games,
            games_by_status=games_by_status,
            top_teams=[
                DashboardTopTeam(
                    team=_ref(stats.team, stats.team_id, UNKNOWN_TEAM),
                    discipline=_ref(stats.discipline, stats.discipline_id, UNKNOWN_DISCIPLINE),
                    points=stats.points,
                    wins=stats.wins,
                    draws=stats.draws,
                    losses=stats.losses,
                    goals_for=stats.goals_for,
                    goals_against=stats.goals_against,
                )
                for stats in top_teams
            ],
        )

    async def get_top_scorers(self, limit: int = settings.TOP_SCORERS_DEFAULT_LIMIT) -> DashboardTopScorers:
        if limit <= 0:
            return DashboardTopScorers(top_scorers=[])
        limit = min(limit, settings.MAX_RESULT_LIMIT)

        try:
            scorers = await self.repository.get_top_scorers(limit)
        except SQLAlchemyError as e:
            logger.error(f"Erro ao buscar artilheiros do dashboard: {e}")
            raise StoreError("Erro ao buscar artilheiros do dashboard") from e

        return DashboardTopScorers(
            top_scorers=[
                DashboardTopScorer(
                    player=_ref(stats.player, stats.player_id, UNKNOWN_PLAYER),
                    discipline=_ref(stats.discipline, stats.discipline_id, UNKNOWN_DISCIPLINE),
                    goals=stats.goals,
                    assists=stats.assists,
                    games=stats.games_played,
                )
                for stats in scorers
            ]
        )

    async def get_chart_data(self, metric: str = "goals", period: str = "month") -> DashboardChartData:
        return DashboardChartData(chart_data=build_chart_data(metric, period))
