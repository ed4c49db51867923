"""
NHL Playoff Race Simulator

Monte Carlo simulation of the rest of the season to calculate playoff odds
and the game outcomes that help a target team the most.
"""

from .models import Event, Team, StandingsRecord, SimEntry, Game, League
from .errors import (
    AnalysisError,
    TeamNotFoundError,
    InsufficientDataError,
    MalformedStandingsError,
    InvalidMatchupError
)
from .sampler import random_event, random_events
from .engine import (
    DEFAULT_SIMULATIONS,
    Simulation,
    rank_entries,
    determine_playoffs,
    qualifies,
    odds_for_team,
    odds_for_league
)
from .resolver import IdealLoser, is_relevant, pick_ideal_loser
from .analysis import Matchup, Seed, PlayoffMatchup, Analysis, Analyzer, analyze_many

__all__ = [
    # Models
    "Event",
    "Team",
    "StandingsRecord",
    "SimEntry",
    "Game",
    "League",
    # Errors
    "AnalysisError",
    "TeamNotFoundError",
    "InsufficientDataError",
    "MalformedStandingsError",
    "InvalidMatchupError",
    # Sampler
    "random_event",
    "random_events",
    # Engine
    "DEFAULT_SIMULATIONS",
    "Simulation",
    "rank_entries",
    "determine_playoffs",
    "qualifies",
    "odds_for_team",
    "odds_for_league",
    # Resolver
    "IdealLoser",
    "is_relevant",
    "pick_ideal_loser",
    # Analysis
    "Matchup",
    "Seed",
    "PlayoffMatchup",
    "Analysis",
    "Analyzer",
    "analyze_many",
]
