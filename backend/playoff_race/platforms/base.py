"""
Abstract base class for league data sources.

A data source provides standings and games; `load_league` assembles them
into the League snapshot analysed by the simulator.
"""

import logging
from abc import ABC, abstractmethod
from datetime import date
from typing import Dict, List, Optional, Tuple

from ..core.season import today, yesterday
from ..simulator.models import Game, League, StandingsRecord, Team


logger = logging.getLogger(__name__)


class DataSource(ABC):
    """Abstract base class for league data sources."""

    @property
    @abstractmethod
    def platform_name(self) -> str:
        """Return the data source name (e.g., 'nhl')."""
        pass

    @abstractmethod
    async def fetch_standings(
        self, day: date
    ) -> Tuple[Dict[str, Team], Dict[str, StandingsRecord]]:
        """
        Fetch the league standings as of a date.

        Args:
            day: The standings date

        Returns:
            Tuple of (teams dict by id, standings records dict by team id)

        Raises:
            DataNotFoundError: If there are no standings for that date
        """
        pass

    @abstractmethod
    async def fetch_games(self, day: date) -> List[Game]:
        """
        Fetch the regular season games played or scheduled on a date.

        Args:
            day: The game date

        Returns:
            List of games, empty on a day without games
        """
        pass

    @abstractmethod
    async def fetch_team_schedule(self, team_id: str, after: date) -> List[Game]:
        """
        Fetch a team's regular season games scheduled after a date.

        Args:
            team_id: The team identifier
            after: Only games later than this date are returned

        Returns:
            List of upcoming games in chronological order
        """
        pass

    async def load_league(
        self, day: Optional[date] = None, target_id: Optional[str] = None
    ) -> League:
        """
        Load everything needed to analyse the game night of `day`.

        Args:
            day: The analysis date (defaults to today)
            target_id: Team whose upcoming schedule should be loaded

        Returns:
            The League snapshot
        """
        day = day or today()
        previous_day = yesterday(day)

        teams, standings = await self.fetch_standings(day)
        try:
            _, past_standings = await self.fetch_standings(previous_day)
        except DataNotFoundError:
            logger.warning("No standings for %s, odds change won't be available", previous_day)
            past_standings = {}

        # Postponed or unfinished games have no winner
        results = [g for g in await self.fetch_games(previous_day) if g.is_final]
        games = await self.fetch_games(day)

        schedule: List[Game] = []
        if target_id:
            schedule = await self.fetch_team_schedule(target_id.upper(), day)

        logger.info(
            "Loaded %d teams, %d results and %d games for %s",
            len(teams), len(results), len(games), day
        )

        return League(
            teams=teams,
            standings=standings,
            past_standings=past_standings,
            results=results,
            games=games,
            schedule=schedule,
            day=day
        )


class DataNotFoundError(Exception):
    """Raised when the requested data doesn't exist."""
    pass


class DataSourceError(Exception):
    """Raised when there's an error communicating with the data source."""
    pass
