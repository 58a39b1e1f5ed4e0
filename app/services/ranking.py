"""
Ordenação e derivação das linhas de classificação e artilharia.

Funções puras: recebem registros já carregados do banco e devolvem os schemas
de resposta. A ordenação é feita aqui (e não via ORDER BY) para não depender
da collation do banco: nomes são comparados por code point.
"""
from typing import Iterable, List, Optional, Tuple
from app.models.player_statistics import PlayerStatistics
from app.models.team_statistics import TeamStatistics
from app.schemas.statistics import EntityRef, ScorerRow, StandingsRow

UNKNOWN_TEAM = "Time desconhecido"
UNKNOWN_PLAYER = "Jogador desconhecido"
UNKNOWN_DISCIPLINE = "Modalidade desconhecida"

TeamRow = Tuple[TeamStatistics, Optional[str], Optional[str]]
PlayerRow = Tuple[PlayerStatistics, Optional[str], Optional[str]]


def standings_sort_key(stats: TeamStatistics, team_name: Optional[str]):
    """Pontos desc, gols pró desc, gols contra asc, nome do time asc"""
    return (
        -(stats.points or 0),
        -(stats.goals_for or 0),
        stats.goals_against or 0,
        team_name or UNKNOWN_TEAM,
    )


def scorers_sort_key(stats: PlayerStatistics, player_name: Optional[str]):
    """Gols desc, nome do jogador asc"""
    return (-(stats.goals or 0), player_name or UNKNOWN_PLAYER)


def build_standings(rows: Iterable[TeamRow]) -> List[StandingsRow]:
    """Ordena e numera a classificação (posições sequenciais, sem empates)"""
    ordered = sorted(rows, key=lambda row: standings_sort_key(row[0], row[1]))

    standings = []
    for position, (stats, team_name, discipline_name) in enumerate(ordered, start=1):
        wins = stats.wins or 0
        draws = stats.draws or 0
        losses = stats.losses or 0
        goals_for = stats.goals_for or 0
        goals_against = stats.goals_against or 0
        standings.append(StandingsRow(
            position=position,
            team=EntityRef(id=stats.team_id, name=team_name or UNKNOWN_TEAM),
            discipline_id=stats.discipline_id,
            discipline=discipline_name or UNKNOWN_DISCIPLINE,
            games_played=wins + draws + losses,
            wins=wins,
            draws=draws,
            losses=losses,
            goals_for=goals_for,
            goals_against=goals_against,
            goal_difference=goals_for - goals_against,
            points=stats.points or 0,
        ))
    return standings


def build_top_scorers(rows: Iterable[PlayerRow], limit: int) -> List[ScorerRow]:
    """Ordena a artilharia e corta em `limit` (limit <= 0 não retorna ninguém)"""
    if limit <= 0:
        return []

    scorers = [row for row in rows if (row[0].goals or 0) > 0]
    scorers.sort(key=lambda row: scorers_sort_key(row[0], row[1]))

    return [
        ScorerRow(
            id=stats.player_id,
            name=player_name or UNKNOWN_PLAYER,
            discipline_id=stats.discipline_id,
            discipline=discipline_name or UNKNOWN_DISCIPLINE,
            goals=stats.goals or 0,
            assists=stats.assists or 0,
            yellow_cards=stats.yellow_cards or 0,
            red_cards=stats.red_cards or 0,
            games=stats.games_played or 0,
        )
        for stats, player_name, discipline_name in scorers[:limit]
    ]
