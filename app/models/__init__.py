"""Models - modelos SQLAlchemy"""
from app.models.discipline import Discipline
from app.models.edition import Edition
from app.models.team import Team
from app.models.player import Player
from app.models.game import Game, GameKind, GameStatus
from app.models.game_event import GameEvent, GameEventKind
from app.models.team_statistics import TeamStatistics
from app.models.player_statistics import PlayerStatistics

__all__ = [
    "Discipline",
    "Edition",
    "Team",
    "Player",
    "Game",
    "GameKind",
    "GameStatus",
    "GameEvent",
    "GameEventKind",
    "TeamStatistics",
    "PlayerStatistics",
]
