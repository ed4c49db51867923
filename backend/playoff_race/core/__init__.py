"""
Core configuration and season utilities.
"""

from .season import (
    SEASON_GAMES,
    DIVISION_SPOTS,
    WILDCARD_SPOTS,
    get_current_season,
    today,
    yesterday,
)

__all__ = [
    "SEASON_GAMES",
    "DIVISION_SPOTS",
    "WILDCARD_SPOTS",
    "get_current_season",
    "today",
    "yesterday",
]
