"""
Pydantic schemas for API request/response validation.
"""

from datetime import date, datetime
from typing import Optional, List
from pydantic import BaseModel, Field

from ..core.config import TARGET_TEAM, N_SIMULATIONS, SIM_WORKERS


# ============== Team Schemas ==============

class TeamResult(BaseModel):
    """Team identity and groups."""
    id: str
    name: str
    division_id: str
    division_name: str
    conference_id: str
    conference_name: str


class RecordResult(BaseModel):
    """A team's standings record."""
    team_id: str
    wins: int
    losses: int
    ot_losses: int
    games_played: int
    points: int
    row: int
    goals_for: int
    goals_against: int
    conference_rank: int
    division_rank: int
    league_rank: int
    wildcard_rank: int
    record: str
    last10: str
    point_pct: float
    points_82: float


class TeamStandingResult(BaseModel):
    """A team with its current record."""
    team: TeamResult
    record: RecordResult


# ============== Analysis Schemas ==============

class AnalysisRunRequest(BaseModel):
    """Start an analysis request."""
    team: str = Field(default=TARGET_TEAM, min_length=2, max_length=3)
    day: Optional[date] = None  # Defaults to today
    n_simulations: int = Field(default=N_SIMULATIONS, ge=1, le=200000)
    workers: int = Field(default=SIM_WORKERS, ge=1, le=32)
    seed: Optional[int] = None  # Fixed seed for reproducible odds


class AnalysisTaskResponse(BaseModel):
    """Analysis task status response."""
    task_id: str
    team: str
    status: str  # pending, running, completed, failed
    progress: int  # 0-100
    error: Optional[str] = None


class GameResult(BaseModel):
    """A scheduled or completed game."""
    id: int
    home_team_id: str
    away_team_id: str
    home_score: int
    away_score: int
    period: int
    overtime: bool
    start_time: Optional[datetime] = None
    state: str


class IdealLoserResult(BaseModel):
    """The team that should lose a game."""
    team_id: str
    method: str  # involved, conference, simulation
    odds_if_home_wins: Optional[float] = None
    odds_if_away_wins: Optional[float] = None


class MatchupResult(BaseModel):
    """A game annotated with the target team's ideal outcome."""
    game: GameResult
    is_result: bool
    is_target_involved: bool
    ideal_loser: IdealLoserResult
    cheer_for: str
    mood: Optional[str] = None  # Great, Good, Bad for completed games


class SeedResult(BaseModel):
    """A ranked standings position."""
    seed: int
    record: RecordResult


class PlayoffMatchupResult(BaseModel):
    """A first round pairing."""
    high_team: RecordResult
    low_team: RecordResult


class AnalysisResultsResponse(BaseModel):
    """Full analysis results response."""
    target: TeamResult
    day: Optional[date] = None
    n_simulations: int
    odds_today: float
    odds_yesterday: Optional[float] = None
    odds_change: Optional[float] = None
    my_result: Optional[MatchupResult] = None
    results: List[MatchupResult]
    my_game: Optional[MatchupResult] = None
    games: List[MatchupResult]
    own_division_seed: List[SeedResult]
    other_division_seed: List[SeedResult]
    wildcard_seed: List[SeedResult]
    playoffs: List[PlayoffMatchupResult]
    schedule: List[GameResult]

