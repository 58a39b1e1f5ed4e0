"""Repository de entidades de referência (modalidades, times, jogadores, jogos)"""
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select, func
from typing import Dict, List, Optional
from app.models.discipline import Discipline
from app.models.team import Team
from app.models.player import Player
from app.models.game import Game, GameStatus
from app.models.game_event import GameEvent


class ReferenceRepository:
    """Consultas de existência e leitura de entidades de referência"""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def get_discipline(self, discipline_id: int) -> Optional[Discipline]:
        return await self.db.get(Discipline, discipline_id)

    async def get_team(self, team_id: int) -> Optional[Team]:
        return await self.db.get(Team, team_id)

    async def get_player(self, player_id: int) -> Optional[Player]:
        return await self.db.get(Player, player_id)

    async def count_games(self) -> int:
        result = await self.db.execute(select(func.count(Game.id)))
        return result.scalar() or 0

    async def count_games_by_status(self) -> Dict[str, int]:
        """Quantidade de jogos por status, em ordem alfabética de status"""
        result = await self.db.execute(
            select(Game.status, func.count(Game.id))
            .group_by(Game.status)
            .order_by(Game.status.asc())
        )
        return {status: count for status, count in result.all()}

    async def list_finished_games(self) -> List[Game]:
        """Jogos finalizados em ordem cronológica"""
        result = await self.db.execute(
            select(Game)
            .filter(Game.status == GameStatus.FINISHED)
            .order_by(Game.scheduled_at.asc(), Game.id.asc())
        )
        return list(result.scalars().all())

    async def list_game_events(self, game_id: int) -> List[GameEvent]:
        result = await self.db.execute(
            select(GameEvent)
            .filter(GameEvent.game_id == game_id)
            .order_by(GameEvent.id.asc())
        )
        return list(result.scalars().all())

    async def list_player_ids_for_teams(self, team_ids: List[int]) -> List[int]:
        """IDs dos jogadores inscritos nos times informados"""
        result = await self.db.execute(
            select(Player.id)
            .filter(Player.team_id.in_(team_ids))
            .order_by(Player.id.asc())
        )
        return list(result.scalars().all())
