"""Service de recálculo de estatísticas a partir dos jogos finalizados"""
from collections import defaultdict
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.exc import SQLAlchemyError
from typing import Dict
from app.core.exceptions import StoreError
from app.models.game import Game, GameStatus
from app.models.game_event import GameEvent, GameEventKind
from app.repositories.reference_repository import ReferenceRepository
from app.repositories.statistics_repository import StatisticsRepository
from app.schemas.statistics import PlayerStatisticsDelta, RecalculationSummary, TeamStatisticsDelta
from app.services.statistics_service import StatisticsService
import logging

logger = logging.getLogger(__name__)

EVENT_COUNTERS = {
    GameEventKind.GOAL: "goals",
    GameEventKind.ASSIST: "assists",
    GameEventKind.YELLOW_CARD: "yellow_cards",
    GameEventKind.RED_CARD: "red_cards",
}


def team_deltas(game: Game) -> tuple[TeamStatisticsDelta, TeamStatisticsDelta]:
    """Incrementos dos dois times a partir do placar do jogo"""
    goals1 = game.team1_goals or 0
    goals2 = game.team2_goals or 0

    team1 = TeamStatisticsDelta(goals_for=goals1, goals_against=goals2, wins=0, draws=0, losses=0)
    team2 = TeamStatisticsDelta(goals_for=goals2, goals_against=goals1, wins=0, draws=0, losses=0)

    if goals1 > goals2:
        team1.wins = 1
        team2.losses = 1
    elif goals2 > goals1:
        team2.wins = 1
        team1.losses = 1
    else:
        team1.draws = 1
        team2.draws = 1

    return team1, team2


def player_deltas(events: list[GameEvent], roster_ids: list[int]) -> Dict[int, PlayerStatisticsDelta]:
    """
    Cada jogador com evento ou inscrito em um dos times soma um jogo;
    eventos de gol/assistência/cartão somam no contador correspondente.
    """
    counters: Dict[int, dict] = defaultdict(lambda: {"games_played": 1})

    for event in events:
        if not event.player_id:
            continue
        stats = counters[event.player_id]
        field = EVENT_COUNTERS.get(event.kind)
        if field:
            stats[field] = stats.get(field, 0) + 1

    for player_id in roster_ids:
        counters.setdefault(player_id, {"games_played": 1})

    return {player_id: PlayerStatisticsDelta(**values) for player_id, values in counters.items()}


class RecalculationService:
    """Aplica resultados de jogos às estatísticas e reconstrói tudo sob demanda"""

    def __init__(self, db: AsyncSession):
        self.db = db
        self.repository = StatisticsRepository(db)
        self.references = ReferenceRepository(db)
        self.statistics = StatisticsService(db)

    async def apply_game_result(self, game: Game) -> bool:
        """Atualiza estatísticas de times e jogadores de um jogo finalizado"""
        if game.status != GameStatus.FINISHED:
            logger.info(f"Jogo {game.id} não está finalizado (status: {game.status}), pulando")
            return False

        delta1, delta2 = team_deltas(game)
        await self.statistics.apply_incremental_update(game.team1_id, game.discipline_id, delta1, game.kind)
        await self.statistics.apply_incremental_update(game.team2_id, game.discipline_id, delta2, game.kind)

        events = await self.references.list_game_events(game.id)
        roster_ids = await self.references.list_player_ids_for_teams([game.team1_id, game.team2_id])
        for player_id, delta in player_deltas(events, roster_ids).items():
            await self.repository.apply_player_increment(player_id, game.discipline_id, delta)

        logger.debug(
            f"Jogo {game.id}: {game.team1_id} {game.team1_goals} x {game.team2_goals} {game.team2_id} aplicado"
        )
        return True

    async def recalculate_all(self) -> RecalculationSummary:
        """Apaga todas as estatísticas e reaplica os jogos finalizados em ordem cronológica"""
        try:
            await self.repository.delete_all()
            games = await self.references.list_finished_games()

            processed = 0
            for game in games:
                if await self.apply_game_result(game):
                    processed += 1

            summary = RecalculationSummary(
                games_processed=processed,
                teams=await self.repository.count_team_statistics(),
                players=await self.repository.count_player_statistics(),
            )
            await self.db.commit()
        except SQLAlchemyError as e:
            await self.db.rollback()
            logger.error(f"Erro ao recalcular estatísticas: {e}")
            raise StoreError("Erro ao recalcular estatísticas") from e
        except StoreError:
            await self.db.rollback()
            raise

        logger.info(
            f"Estatísticas recalculadas: {summary.games_processed} jogos, "
            f"{summary.teams} times, {summary.players} jogadores"
        )
        return summary
