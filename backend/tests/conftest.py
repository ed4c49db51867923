"""
Shared fixtures: a small two-conference league.
"""

from datetime import date, datetime, timezone
from typing import Dict, List, Tuple

import pytest

from playoff_race.simulator.models import Game, League, StandingsRecord, Team


# (id, name, division, conference, wins, losses, ot_losses)
TEAMS: List[Tuple[str, str, str, str, int, int, int]] = [
    ("BOS", "Bruins", "A", "E", 40, 15, 5),
    ("TOR", "Maple Leafs", "A", "E", 36, 18, 6),
    ("MTL", "Canadiens", "A", "E", 30, 24, 6),
    ("OTT", "Senators", "A", "E", 25, 30, 5),
    ("NYR", "Rangers", "M", "E", 38, 17, 5),
    ("PIT", "Penguins", "M", "E", 33, 21, 6),
    ("PHI", "Flyers", "M", "E", 31, 23, 6),
    ("WSH", "Capitals", "M", "E", 29, 25, 6),
    ("COL", "Avalanche", "C", "W", 39, 16, 5),
    ("DAL", "Stars", "C", "W", 37, 18, 5),
    ("WPG", "Jets", "C", "W", 35, 20, 5),
    ("STL", "Blues", "C", "W", 28, 27, 5),
    ("EDM", "Oilers", "P", "W", 36, 19, 5),
    ("VAN", "Canucks", "P", "W", 34, 20, 6),
    ("CGY", "Flames", "P", "W", 27, 28, 5),
    ("SEA", "Kraken", "P", "W", 26, 29, 5),
]


def make_record(team_id: str, wins: int, losses: int, ot_losses: int, **kwargs) -> StandingsRecord:
    """Build a consistent standings record."""
    return StandingsRecord(
        team_id=team_id,
        wins=wins,
        losses=losses,
        ot_losses=ot_losses,
        games_played=wins + losses + ot_losses,
        points=2 * wins + ot_losses,
        row=wins,
        **kwargs
    )


def build_standings(teams: Dict[str, Team], rows) -> Dict[str, StandingsRecord]:
    """Build records with conference ranks ordered by points."""
    records = {row[0]: make_record(row[0], *row[4:]) for row in rows}
    for conference_id in {t.conference_id for t in teams.values()}:
        conference = [r for r in records.values() if teams[r.team_id].conference_id == conference_id]
        conference.sort(key=lambda r: (r.points, r.wins), reverse=True)
        for rank, record in enumerate(conference, 1):
            record.conference_rank = rank
    return records


def make_game(game_id, home, away, home_score=0, away_score=0, period=0, state="FUT") -> Game:
    return Game(
        id=game_id,
        home_team_id=home,
        away_team_id=away,
        home_score=home_score,
        away_score=away_score,
        period=period,
        start_time=datetime(2025, 1, 15, 0, 0, tzinfo=timezone.utc),
        state=state
    )


@pytest.fixture
def teams() -> Dict[str, Team]:
    return {
        row[0]: Team(
            id=row[0],
            name=row[1],
            division_id=row[2],
            conference_id=row[3],
            division_name=f"Division {row[2]}",
            conference_name=f"Conference {row[3]}"
        )
        for row in TEAMS
    }


@pytest.fixture
def league(teams) -> League:
    """League on a game night, analysed for the East conference."""
    results = [
        make_game(1, "MTL", "TOR", 3, 2, 3, "OFF"),
        make_game(2, "NYR", "BOS", 2, 3, 4, "OFF"),
        make_game(3, "PHI", "COL", 1, 4, 3, "OFF"),
        make_game(4, "DAL", "EDM", 5, 1, 3, "OFF"),
    ]
    games = [
        make_game(5, "OTT", "MTL"),
        make_game(6, "PIT", "WSH"),
        make_game(7, "PHI", "CGY"),
        make_game(8, "EDM", "DAL"),
    ]
    schedule = [make_game(9 + i, "MTL" if i % 2 else "BOS", "BOS" if i % 2 else "MTL") for i in range(12)]

    return League(
        teams=teams,
        standings=build_standings(teams, TEAMS),
        past_standings=build_standings(teams, TEAMS),
        results=results,
        games=games,
        schedule=schedule,
        day=date(2025, 1, 15)
    )
