"""Ordenação e derivação da classificação e da artilharia"""
from app.models import PlayerStatistics, TeamStatistics
from app.services.ranking import build_standings, build_top_scorers


def team_row(team_id, name, points=0, goals_for=0, goals_against=0, wins=0, draws=0, losses=0):
    stats = TeamStatistics(
        team_id=team_id,
        discipline_id=1,
        points=points,
        goals_for=goals_for,
        goals_against=goals_against,
        wins=wins,
        draws=draws,
        losses=losses,
    )
    return stats, name, "Futsal"


def scorer_row(player_id, name, goals, assists=0):
    stats = PlayerStatistics(player_id=player_id, discipline_id=1, goals=goals, assists=assists, games_played=3)
    return stats, name, "Futsal"


class TestStandings:

    def test_points_then_goals_for(self):
        rows = [
            team_row(2, "B", points=9, goals_for=8, goals_against=2),
            team_row(1, "A", points=9, goals_for=10, goals_against=3),
            team_row(3, "C", points=12, goals_for=1, goals_against=9),
        ]
        standings = build_standings(rows)
        assert [row.team.name for row in standings] == ["C", "A", "B"]
        assert [row.position for row in standings] == [1, 2, 3]

    def test_lower_goals_against_wins_tie(self):
        rows = [
            team_row(1, "A", points=6, goals_for=5, goals_against=4),
            team_row(2, "B", points=6, goals_for=5, goals_against=1),
        ]
        assert [row.team.name for row in build_standings(rows)] == ["B", "A"]

    def test_name_breaks_full_tie_case_sensitive(self):
        rows = [
            team_row(1, "beta", points=3),
            team_row(2, "Alpha", points=3),
            team_row(3, "Beta", points=3),
        ]
        # Ordem por code point: maiúsculas antes de minúsculas
        assert [row.team.name for row in build_standings(rows)] == ["Alpha", "Beta", "beta"]

    def test_positions_are_not_shared(self):
        rows = [team_row(i, f"Time {i}", points=3) for i in range(1, 4)]
        assert [row.position for row in build_standings(rows)] == [1, 2, 3]

    def test_derived_fields(self):
        row = build_standings([team_row(1, "A", points=7, goals_for=9, goals_against=4, wins=2, draws=1, losses=1)])[0]
        assert row.games_played == 4
        assert row.goal_difference == 5
        assert row.discipline == "Futsal"

    def test_missing_counters_and_names_default(self):
        stats = TeamStatistics(team_id=5, discipline_id=1)
        row = build_standings([(stats, None, None)])[0]
        assert row.points == 0
        assert row.games_played == 0
        assert row.goal_difference == 0
        assert row.team.name == "Time desconhecido"
        assert row.discipline == "Modalidade desconhecida"

    def test_empty(self):
        assert build_standings([]) == []

    def test_camel_case_serialization(self):
        row = build_standings([team_row(1, "A", points=3, goals_for=2, wins=1)])[0]
        dumped = row.model_dump(by_alias=True)
        assert dumped["goalsFor"] == 2
        assert dumped["goalDifference"] == 2
        assert dumped["disciplineId"] == 1
        assert dumped["team"] == {"id": 1, "name": "A"}


class TestTopScorers:

    def test_goals_then_name(self):
        rows = [
            scorer_row(1, "Carlos", 3),
            scorer_row(2, "Ana", 5),
            scorer_row(3, "Bruno", 3),
        ]
        assert [row.name for row in build_top_scorers(rows, 10)] == ["Ana", "Bruno", "Carlos"]

    def test_players_without_goals_are_dropped(self):
        rows = [scorer_row(1, "Ana", 0), scorer_row(2, "Bia", 1)]
        assert [row.id for row in build_top_scorers(rows, 10)] == [2]

    def test_limit(self):
        rows = [scorer_row(i, f"Jogador {i}", goals=10 - i) for i in range(1, 6)]
        assert len(build_top_scorers(rows, 2)) == 2

    def test_non_positive_limit_returns_nothing(self):
        rows = [scorer_row(1, "Ana", 5)]
        assert build_top_scorers(rows, 0) == []
        assert build_top_scorers(rows, -3) == []

    def test_fields(self):
        row = build_top_scorers([scorer_row(7, "Ana", 4, assists=2)], 10)[0]
        assert row.model_dump(by_alias=True) == {
            "id": 7,
            "name": "Ana",
            "disciplineId": 1,
            "discipline": "Futsal",
            "goals": 4,
            "assists": 2,
            "yellowCards": 0,
            "redCards": 0,
            "games": 3,
        }
