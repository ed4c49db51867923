"""
Season constants and date utilities for the NHL regular season.
"""

from datetime import date, datetime, timedelta
from typing import Optional


# Regular season length
SEASON_GAMES = 82

# Playoff format per conference: top 3 of each division plus 2 wildcards
DIVISION_SPOTS = 3
WILDCARD_SPOTS = 2


def get_current_season(now: Optional[datetime] = None) -> int:
    """
    Get the current NHL season id.

    The season spans two calendar years and is identified by both, e.g.
    20252026. September onwards belongs to the season starting that year.

    Args:
        now: Reference time (defaults to the current local time)

    Returns:
        The season id as an 8 digit integer
    """
    now = now or datetime.now()
    begin = now.year if now.month >= 9 else now.year - 1
    return begin * 10000 + begin + 1


def today() -> date:
    return date.today()


def yesterday(reference: Optional[date] = None) -> date:
    return (reference or today()) - timedelta(days=1)
