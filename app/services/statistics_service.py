"""Service de Estatísticas (Async)"""
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.exc import SQLAlchemyError
from typing import List, Optional, Union
from app.core.config import settings
from app.core.exceptions import NotFoundError, StoreError, ValidationError
from app.models.discipline import Discipline
from app.models.game import GameKind
from app.models.team_statistics import TeamStatistics
from app.repositories.reference_repository import ReferenceRepository
from app.repositories.statistics_repository import StatisticsRepository
from app.schemas.statistics import (
    PlayerStatisticsResponse,
    ScorerRow,
    StandingsRow,
    TeamStatisticsDelta,
    TeamStatisticsResponse,
)
from app.services.ranking import build_standings, build_top_scorers
import logging

logger = logging.getLogger(__name__)


def require_positive_id(value: int, field: str) -> int:
    """IDs precisam ser inteiros positivos"""
    if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
        raise ValidationError(f"Parâmetro inválido: {field}")
    return value


class StatisticsService:
    """Service async para classificação, artilharia e estatísticas individuais"""

    def __init__(self, db: AsyncSession):
        self.db = db
        self.repository = StatisticsRepository(db)
        self.references = ReferenceRepository(db)

    async def ensure_discipline(self, discipline_id: int) -> Discipline:
        """Obtém a modalidade ou levanta NotFoundError"""
        require_positive_id(discipline_id, "disciplineId")
        discipline = await self.references.get_discipline(discipline_id)
        if not discipline:
            raise NotFoundError("Modalidade não encontrada")
        return discipline

    async def get_standings(self, discipline_id: int, edition_id: Optional[int] = None) -> List[StandingsRow]:
        """Tabela de classificação da modalidade (opcionalmente filtrada por edição)"""
        try:
            rows = await self.repository.get_standings_rows(discipline_id, edition_id)
        except SQLAlchemyError as e:
            logger.error(f"Erro ao buscar classificação da modalidade {discipline_id}: {e}")
            raise StoreError("Erro ao buscar classificação") from e
        return build_standings(rows)

    async def get_top_scorers(
        self,
        discipline_id: int,
        edition_id: Optional[int] = None,
        limit: int = settings.TOP_SCORERS_DEFAULT_LIMIT,
    ) -> List[ScorerRow]:
        """Artilharia da modalidade"""
        if limit <= 0:
            return []
        limit = min(limit, settings.MAX_RESULT_LIMIT)

        try:
            rows = await self.repository.get_scorer_rows(discipline_id, edition_id)
        except SQLAlchemyError as e:
            logger.error(f"Erro ao buscar artilheiros da modalidade {discipline_id}: {e}")
            raise StoreError("Erro ao buscar artilheiros") from e
        return build_top_scorers(rows, limit)

    async def get_player_statistics(
        self, player_id: int, discipline_id: Optional[int] = None
    ) -> Union[PlayerStatisticsResponse, List[PlayerStatisticsResponse]]:
        """
        Com modalidade: o registro único do jogador naquela modalidade.
        Sem modalidade: todos os registros do jogador.
        Nenhum registro -> NotFoundError.
        """
        require_positive_id(player_id, "playerId")
        if discipline_id is not None:
            await self.ensure_discipline(discipline_id)
        if not await self.references.get_player(player_id):
            raise NotFoundError("Jogador não encontrado")

        try:
            if discipline_id is not None:
                stats = await self.repository.get_player_statistic(player_id, discipline_id)
                found = [stats] if stats else []
            else:
                found = await self.repository.list_player_statistics(player_id)
        except SQLAlchemyError as e:
            logger.error(f"Erro ao buscar estatísticas do jogador {player_id}: {e}")
            raise StoreError("Erro ao buscar estatísticas do jogador") from e

        if not found:
            raise NotFoundError("Estatísticas não encontradas")

        result = [PlayerStatisticsResponse.model_validate(s) for s in found]
        return result[0] if discipline_id is not None else result

    async def get_team_statistics(
        self, team_id: int, discipline_id: Optional[int] = None
    ) -> Union[TeamStatisticsResponse, List[TeamStatisticsResponse]]:
        """
        Com modalidade: o registro único do time naquela modalidade.
        Sem modalidade: lista de registros, ou o próprio registro se houver só um.
        """
        require_positive_id(team_id, "teamId")
        if discipline_id is not None:
            await self.ensure_discipline(discipline_id)
        if not await self.references.get_team(team_id):
            raise NotFoundError("Time não encontrado")

        try:
            if discipline_id is not None:
                stats = await self.repository.get_team_statistic(team_id, discipline_id)
                found = [stats] if stats else []
            else:
                found = await self.repository.list_team_statistics(team_id)
        except SQLAlchemyError as e:
            logger.error(f"Erro ao buscar estatísticas do time {team_id}: {e}")
            raise StoreError("Erro ao buscar estatísticas do time") from e

        if not found:
            raise NotFoundError("Estatísticas não encontradas")

        result = [TeamStatisticsResponse.model_validate(s) for s in found]
        return result[0] if len(result) == 1 else result

    async def apply_incremental_update(
        self,
        team_id: int,
        discipline_id: int,
        delta: TeamStatisticsDelta,
        game_kind: str = GameKind.GROUP_STAGE,
    ) -> TeamStatistics:
        """Soma o delta às estatísticas do time (cria o registro se necessário)"""
        require_positive_id(team_id, "teamId")
        require_positive_id(discipline_id, "disciplineId")
        try:
            return await self.repository.apply_team_increment(team_id, discipline_id, delta, game_kind)
        except SQLAlchemyError as e:
            logger.error(f"Erro ao atualizar estatísticas do time {team_id}: {e}")
            raise StoreError("Erro ao atualizar estatísticas") from e

    async def reset_statistics(self, discipline_id: int) -> int:
        """Zera as estatísticas de times da modalidade; retorna a quantidade de registros"""
        await self.ensure_discipline(discipline_id)
        try:
            count = await self.repository.reset_team_statistics(discipline_id)
            await self.db.commit()
        except SQLAlchemyError as e:
            await self.db.rollback()
            logger.error(f"Erro ao resetar estatísticas da modalidade {discipline_id}: {e}")
            raise StoreError("Erro ao resetar estatísticas") from e

        logger.info(f"Estatísticas da modalidade {discipline_id} resetadas ({count} registros)")
        return count
