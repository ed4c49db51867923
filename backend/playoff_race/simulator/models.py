"""
Data models for the playoff race simulator.
"""

from dataclasses import dataclass, field
from datetime import datetime, date, tzinfo
from enum import Enum
from typing import Dict, List, Tuple, Optional

from .errors import TeamNotFoundError


# Game states of a completed game
FINAL_STATES = {"OFF", "FINAL"}


class Event(str, Enum):
    """Outcome of a single game from one team's point of view."""
    WIN = "win"
    LOSS = "loss"
    OT = "ot"

    @property
    def points(self) -> int:
        if self is Event.WIN:
            return 2
        if self is Event.OT:
            return 1
        return 0


@dataclass
class Team:
    """An NHL team and the groups it belongs to."""

    id: str
    name: str
    division_id: str
    conference_id: str
    division_name: str = ""
    conference_name: str = ""

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "name": self.name,
            "division_id": self.division_id,
            "division_name": self.division_name,
            "conference_id": self.conference_id,
            "conference_name": self.conference_name
        }


@dataclass
class StandingsRecord:
    """A team's actual record at a point in time."""

    team_id: str
    wins: int = 0
    losses: int = 0
    ot_losses: int = 0
    games_played: int = 0
    points: int = 0
    row: int = 0
    goals_for: int = 0
    goals_against: int = 0
    conference_rank: int = 0
    division_rank: int = 0
    league_rank: int = 0
    wildcard_rank: int = 0
    last10: Optional[Tuple[int, int, int]] = None

    @property
    def record_str(self) -> str:
        return f"{self.wins}-{self.losses}-{self.ot_losses}"

    @property
    def last10_str(self) -> str:
        if self.last10 is None:
            return ""
        return "-".join(str(n) for n in self.last10)

    @property
    def point_pct(self) -> float:
        if self.games_played == 0:
            return 0.0
        return self.points / (self.games_played * 2)

    @property
    def points_82(self) -> float:
        """Points pace over a full season."""
        if self.games_played == 0:
            return 0.0
        return self.points / self.games_played * 82

    def to_dict(self) -> dict:
        """Convert to dictionary for JSON serialization."""
        return {
            "team_id": self.team_id,
            "wins": self.wins,
            "losses": self.losses,
            "ot_losses": self.ot_losses,
            "games_played": self.games_played,
            "points": self.points,
            "row": self.row,
            "goals_for": self.goals_for,
            "goals_against": self.goals_against,
            "conference_rank": self.conference_rank,
            "division_rank": self.division_rank,
            "league_rank": self.league_rank,
            "wildcard_rank": self.wildcard_rank,
            "record": self.record_str,
            "last10": self.last10_str,
            "point_pct": self.point_pct,
            "points_82": self.points_82
        }


@dataclass
class SimEntry:
    """Mutable projection of one team's record during a simulation trial."""

    team_id: str
    division_id: str
    wins: int = 0
    losses: int = 0
    ot_losses: int = 0
    games_played: int = 0
    points: int = 0

    @classmethod
    def from_record(cls, record: StandingsRecord, team: Team) -> 'SimEntry':
        return cls(
            team_id=record.team_id,
            division_id=team.division_id,
            wins=record.wins,
            losses=record.losses,
            ot_losses=record.ot_losses,
            games_played=record.games_played,
            points=record.points
        )

    def apply(self, event: Event, count: int = 1) -> None:
        """Record `count` games ending with `event`."""
        if event is Event.WIN:
            self.wins += count
        elif event is Event.LOSS:
            self.losses += count
        else:
            self.ot_losses += count
        self.games_played += count
        self.points += event.points * count

    def copy(self) -> 'SimEntry':
        """Create a copy of this entry for a simulation trial."""
        return SimEntry(
            team_id=self.team_id,
            division_id=self.division_id,
            wins=self.wins,
            losses=self.losses,
            ot_losses=self.ot_losses,
            games_played=self.games_played,
            points=self.points
        )


@dataclass
class Game:
    """A scheduled or completed game between two teams."""

    id: int
    home_team_id: str
    away_team_id: str
    home_score: int = 0
    away_score: int = 0
    period: int = 0
    start_time: Optional[datetime] = None
    state: str = ""

    @property
    def overtime(self) -> bool:
        return self.period > 3

    @property
    def shootout(self) -> bool:
        return self.period > 4

    @property
    def is_final(self) -> bool:
        return self.state in FINAL_STATES

    @property
    def winner_id(self) -> str:
        if self.home_score > self.away_score:
            return self.home_team_id
        return self.away_team_id

    @property
    def loser_id(self) -> str:
        if self.home_score > self.away_score:
            return self.away_team_id
        return self.home_team_id

    def involves(self, team_id: str) -> bool:
        return team_id in (self.home_team_id, self.away_team_id)

    def opponent_of(self, team_id: str) -> Optional[str]:
        if team_id == self.home_team_id:
            return self.away_team_id
        if team_id == self.away_team_id:
            return self.home_team_id
        return None

    def local_date(self, tz: tzinfo) -> str:
        if self.start_time is None:
            return ""
        return self.start_time.astimezone(tz).strftime("%A, %B %d")

    def local_time(self, tz: tzinfo) -> str:
        if self.start_time is None:
            return ""
        return self.start_time.astimezone(tz).strftime("%H:%M")

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "home_team_id": self.home_team_id,
            "away_team_id": self.away_team_id,
            "home_score": self.home_score,
            "away_score": self.away_score,
            "period": self.period,
            "overtime": self.overtime,
            "start_time": self.start_time.isoformat() if self.start_time else None,
            "state": self.state
        }


@dataclass
class League:
    """
    Snapshot of everything needed to analyse one game night.

    Derived views (seeds, matchups, simulations) refer to teams by id.
    """

    teams: Dict[str, Team]
    standings: Dict[str, StandingsRecord]
    past_standings: Dict[str, StandingsRecord]
    results: List[Game] = field(default_factory=list)
    games: List[Game] = field(default_factory=list)
    schedule: List[Game] = field(default_factory=list)
    day: Optional[date] = None

    def get_team(self, team_id: str) -> Team:
        team = self.teams.get(team_id.upper())
        if team is None:
            raise TeamNotFoundError(team_id)
        return team

    def conference_team_ids(self, conference_id: str) -> List[str]:
        return [t.id for t in self.teams.values() if t.conference_id == conference_id]

    def conference_records(self, conference_id: str, past: bool = False) -> List[StandingsRecord]:
        """Records of a conference's teams, best conference rank first."""
        standings = self.past_standings if past else self.standings
        records = [
            standings[tid] for tid in self.conference_team_ids(conference_id)
            if tid in standings
        ]
        return sorted(records, key=lambda r: r.conference_rank)
