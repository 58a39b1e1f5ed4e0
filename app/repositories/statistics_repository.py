"""Repository de Estatísticas (Async)"""
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select, update, delete, func
from sqlalchemy.dialects import postgresql, sqlite
from sqlalchemy.orm import selectinload
from typing import List, Optional, Tuple
from app.models.discipline import Discipline
from app.models.game import GameKind
from app.models.player import Player
from app.models.player_statistics import PlayerStatistics
from app.models.team import Team
from app.models.team_statistics import TeamStatistics
from app.schemas.statistics import PlayerStatisticsDelta, TeamStatisticsDelta

TEAM_COUNTERS = ("wins", "draws", "losses", "goals_for", "goals_against")
PLAYER_COUNTERS = ("goals", "assists", "yellow_cards", "red_cards", "games_played")


def group_stage_points(delta: TeamStatisticsDelta) -> int:
    """Pontos de um incremento de fase de grupos: explícitos ou 3*V + 1*E"""
    if delta.points is not None:
        return delta.points
    return (delta.wins or 0) * 3 + (delta.draws or 0)


class StatisticsRepository:
    """Repository async para estatísticas de times e jogadores"""

    def __init__(self, db: AsyncSession):
        self.db = db

    def _insert(self, model):
        """INSERT do dialeto ativo (ambos suportam ON CONFLICT DO UPDATE)"""
        dialect = self.db.get_bind().dialect.name
        if dialect == "postgresql":
            return postgresql.insert(model)
        if dialect == "sqlite":
            return sqlite.insert(model)
        raise NotImplementedError(f"Upsert não suportado para o dialeto {dialect}")

    # ------------------------------------------------------------------
    # Leituras de times
    # ------------------------------------------------------------------

    async def get_standings_rows(
        self, discipline_id: int, edition_id: Optional[int] = None
    ) -> List[Tuple[TeamStatistics, Optional[str], Optional[str]]]:
        """Estatísticas da modalidade com nome do time e da modalidade"""
        query = (
            select(TeamStatistics, Team.name, Discipline.name)
            .join(Team, TeamStatistics.team_id == Team.id, isouter=True)
            .join(Discipline, TeamStatistics.discipline_id == Discipline.id, isouter=True)
            .filter(TeamStatistics.discipline_id == discipline_id)
        )
        if edition_id:
            query = query.filter(Team.edition_id == edition_id)

        result = await self.db.execute(query)
        return [tuple(row) for row in result.all()]

    async def get_team_statistic(self, team_id: int, discipline_id: int) -> Optional[TeamStatistics]:
        result = await self.db.execute(
            select(TeamStatistics)
            .options(selectinload(TeamStatistics.team), selectinload(TeamStatistics.discipline))
            .filter(
                TeamStatistics.team_id == team_id,
                TeamStatistics.discipline_id == discipline_id,
            )
        )
        return result.scalar_one_or_none()

    async def list_team_statistics(self, team_id: int) -> List[TeamStatistics]:
        result = await self.db.execute(
            select(TeamStatistics)
            .options(selectinload(TeamStatistics.team), selectinload(TeamStatistics.discipline))
            .filter(TeamStatistics.team_id == team_id)
            .order_by(TeamStatistics.discipline_id.asc())
        )
        return list(result.scalars().all())

    async def get_top_teams(self, limit: int) -> List[TeamStatistics]:
        """Melhores campanhas de todas as modalidades"""
        result = await self.db.execute(
            select(TeamStatistics)
            .options(selectinload(TeamStatistics.team), selectinload(TeamStatistics.discipline))
            .order_by(
                TeamStatistics.points.desc(),
                TeamStatistics.goals_for.desc(),
                TeamStatistics.goals_against.asc(),
                TeamStatistics.id.asc(),
            )
            .limit(limit)
        )
        return list(result.scalars().all())

    # ------------------------------------------------------------------
    # Leituras de jogadores
    # ------------------------------------------------------------------

    async def get_scorer_rows(
        self, discipline_id: int, edition_id: Optional[int] = None
    ) -> List[Tuple[PlayerStatistics, Optional[str], Optional[str]]]:
        """Jogadores com pelo menos um gol na modalidade"""
        query = (
            select(PlayerStatistics, Player.name, Discipline.name)
            .join(Player, PlayerStatistics.player_id == Player.id, isouter=True)
            .join(Discipline, PlayerStatistics.discipline_id == Discipline.id, isouter=True)
            .filter(
                PlayerStatistics.discipline_id == discipline_id,
                PlayerStatistics.goals > 0,
            )
        )
        if edition_id:
            query = query.filter(Player.edition_id == edition_id)

        result = await self.db.execute(query)
        return [tuple(row) for row in result.all()]

    async def get_player_statistic(self, player_id: int, discipline_id: int) -> Optional[PlayerStatistics]:
        result = await self.db.execute(
            select(PlayerStatistics)
            .options(selectinload(PlayerStatistics.player), selectinload(PlayerStatistics.discipline))
            .filter(
                PlayerStatistics.player_id == player_id,
                PlayerStatistics.discipline_id == discipline_id,
            )
        )
        return result.scalar_one_or_none()

    async def list_player_statistics(self, player_id: int) -> List[PlayerStatistics]:
        result = await self.db.execute(
            select(PlayerStatistics)
            .options(selectinload(PlayerStatistics.player), selectinload(PlayerStatistics.discipline))
            .filter(PlayerStatistics.player_id == player_id)
            .order_by(PlayerStatistics.discipline_id.asc())
        )
        return list(result.scalars().all())

    async def get_top_scorers(self, limit: int) -> List[PlayerStatistics]:
        result = await self.db.execute(
            select(PlayerStatistics)
            .options(selectinload(PlayerStatistics.player), selectinload(PlayerStatistics.discipline))
            .filter(PlayerStatistics.goals > 0)
            .order_by(PlayerStatistics.goals.desc(), PlayerStatistics.id.asc())
            .limit(limit)
        )
        return list(result.scalars().all())

    # ------------------------------------------------------------------
    # Escritas
    # ------------------------------------------------------------------

    async def apply_team_increment(
        self,
        team_id: int,
        discipline_id: int,
        delta: TeamStatisticsDelta,
        game_kind: str = GameKind.GROUP_STAGE,
    ) -> TeamStatistics:
        """
        Upsert atômico: cria o registro com os valores do delta ou soma o delta
        ao registro existente, numa única instrução no banco.

        Só jogos de fase de grupos alteram pontos; o primeiro registro criado
        por um jogo eliminatório nasce com 0 pontos.
        """
        values = {name: getattr(delta, name) or 0 for name in TEAM_COUNTERS}
        counts_points = game_kind == GameKind.GROUP_STAGE
        values["points"] = group_stage_points(delta) if counts_points else 0

        stmt = self._insert(TeamStatistics).values(
            team_id=team_id, discipline_id=discipline_id, **values
        )
        columns = TEAM_COUNTERS + (("points",) if counts_points else ())
        set_ = {name: getattr(TeamStatistics, name) + stmt.excluded[name] for name in columns}
        set_["updated_at"] = func.now()

        stmt = stmt.on_conflict_do_update(
            index_elements=["team_id", "discipline_id"],
            set_=set_,
        ).returning(TeamStatistics)

        result = await self.db.scalars(stmt, execution_options={"populate_existing": True})
        return result.one()

    async def apply_player_increment(
        self,
        player_id: int,
        discipline_id: int,
        delta: PlayerStatisticsDelta,
    ) -> PlayerStatistics:
        """Upsert atômico das estatísticas de um jogador"""
        values = {name: getattr(delta, name) for name in PLAYER_COUNTERS}
        stmt = self._insert(PlayerStatistics).values(
            player_id=player_id, discipline_id=discipline_id, **values
        )
        set_ = {name: getattr(PlayerStatistics, name) + stmt.excluded[name] for name in PLAYER_COUNTERS}
        set_["updated_at"] = func.now()

        stmt = stmt.on_conflict_do_update(
            index_elements=["player_id", "discipline_id"],
            set_=set_,
        ).returning(PlayerStatistics)

        result = await self.db.scalars(stmt, execution_options={"populate_existing": True})
        return result.one()

    async def reset_team_statistics(self, discipline_id: int) -> int:
        """Zera as estatísticas dos times da modalidade; retorna linhas afetadas"""
        result = await self.db.execute(
            update(TeamStatistics)
            .where(TeamStatistics.discipline_id == discipline_id)
            .values(
                wins=0,
                draws=0,
                losses=0,
                goals_for=0,
                goals_against=0,
                points=0,
            )
            .execution_options(synchronize_session=False)
        )
        return result.rowcount or 0

    async def delete_all(self) -> None:
        """Remove todas as estatísticas de times e jogadores"""
        await self.db.execute(delete(TeamStatistics))
        await self.db.execute(delete(PlayerStatistics))

    async def count_team_statistics(self) -> int:
        result = await self.db.execute(select(func.count(TeamStatistics.id)))
        return result.scalar() or 0

    async def count_player_statistics(self) -> int:
        result = await self.db.execute(select(func.count(PlayerStatistics.id)))
        return result.scalar() or 0
