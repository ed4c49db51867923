"""
NHL data source.

Fetches standings, scores and schedules from the NHL's public web API.
The API is free and requires no authentication.
"""

import logging
from datetime import date, datetime
from typing import Any, Dict, List, Optional, Tuple

import httpx

from .base import DataSource, DataNotFoundError, DataSourceError
from ..core.config import NHL_API_BASE_URL, NHL_API_TIMEOUT
from ..simulator.models import Game, StandingsRecord, Team


logger = logging.getLogger(__name__)

REGULAR_SEASON = 2

UPCOMING_STATES = {"FUT", "PRE"}


def _localized(value: Any, default: str = "") -> str:
    """Read a {"default": "..."} localized string."""
    if isinstance(value, dict):
        return value.get("default", default)
    if value is None:
        return default
    return str(value)


def _parse_time(value: Optional[str]) -> Optional[datetime]:
    if not value:
        return None
    return datetime.fromisoformat(value.replace("Z", "+00:00"))


class NHLAdapter(DataSource):
    """NHL web API data source."""

    def __init__(self, base_url: str = NHL_API_BASE_URL, timeout: float = NHL_API_TIMEOUT):
        """
        Initialize the NHL adapter.

        Args:
            base_url: Root of the API (without trailing slash)
            timeout: HTTP request timeout in seconds
        """
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout

    @property
    def platform_name(self) -> str:
        return "nhl"

    async def _fetch_json(self, endpoint: str) -> Any:
        """
        Fetch JSON data from the NHL API.

        Args:
            endpoint: The API endpoint (e.g., "/standings/2025-01-15")

        Returns:
            JSON response data

        Raises:
            DataNotFoundError: If the resource doesn't exist
            DataSourceError: If there's an API error
        """
        url = f"{self.base_url}{endpoint}"

        async with httpx.AsyncClient(timeout=self.timeout, follow_redirects=True) as client:
            try:
                response = await client.get(url)

                if response.status_code == 404:
                    raise DataNotFoundError(f"Resource not found: {endpoint}")

                response.raise_for_status()
                return response.json()

            except httpx.HTTPStatusError as e:
                logger.error("NHL API error on %s: %s", endpoint, e)
                raise DataSourceError(f"NHL API error: {e}")
            except httpx.RequestError as e:
                logger.error("Network error on %s: %s", endpoint, e)
                raise DataSourceError(f"Network error: {e}")

    @staticmethod
    def _parse_standing(row: Dict[str, Any]) -> Tuple[Team, StandingsRecord]:
        """Parse one row of the standings endpoint."""
        team_id = _localized(row.get("teamAbbrev"))

        team = Team(
            id=team_id,
            name=_localized(row.get("teamName"), team_id),
            division_id=row.get("divisionAbbrev", ""),
            division_name=row.get("divisionName", ""),
            conference_id=row.get("conferenceAbbrev", ""),
            conference_name=row.get("conferenceName", "")
        )

        record = StandingsRecord(
            team_id=team_id,
            wins=row.get("wins", 0) or 0,
            losses=row.get("losses", 0) or 0,
            ot_losses=row.get("otLosses", 0) or 0,
            games_played=row.get("gamesPlayed", 0) or 0,
            points=row.get("points", 0) or 0,
            row=row.get("regulationPlusOtWins", 0) or 0,
            goals_for=row.get("goalFor", 0) or 0,
            goals_against=row.get("goalAgainst", 0) or 0,
            conference_rank=row.get("conferenceSequence", 0) or 0,
            division_rank=row.get("divisionSequence", 0) or 0,
            league_rank=row.get("leagueSequence", 0) or 0,
            wildcard_rank=row.get("wildcardSequence", 0) or 0,
            last10=(
                row.get("l10Wins", 0) or 0,
                row.get("l10Losses", 0) or 0,
                row.get("l10OtLosses", 0) or 0
            )
        )
        return team, record

    @staticmethod
    def _parse_game(raw: Dict[str, Any]) -> Game:
        """Parse a game from the score or schedule endpoints."""
        home = raw.get("homeTeam") or {}
        away = raw.get("awayTeam") or {}
        period = (raw.get("periodDescriptor") or {}).get("number") or raw.get("period", 0) or 0

        return Game(
            id=raw.get("id", 0),
            home_team_id=home.get("abbrev", ""),
            away_team_id=away.get("abbrev", ""),
            home_score=home.get("score", 0) or 0,
            away_score=away.get("score", 0) or 0,
            period=period,
            start_time=_parse_time(raw.get("startTimeUTC")),
            state=raw.get("gameState", "")
        )

    async def fetch_standings(
        self, day: date
    ) -> Tuple[Dict[str, Team], Dict[str, StandingsRecord]]:
        """
        Fetch the league standings as of a date.

        Returns:
            Tuple of (teams dict by id, standings records dict by team id)
        """
        data = await self._fetch_json(f"/standings/{day.isoformat()}")
        rows = (data or {}).get("standings") or []

        if not rows:
            raise DataNotFoundError(f"No standings for {day.isoformat()}")

        teams: Dict[str, Team] = {}
        standings: Dict[str, StandingsRecord] = {}
        for row in rows:
            team, record = self._parse_standing(row)
            teams[team.id] = team
            standings[team.id] = record

        return teams, standings

    async def fetch_games(self, day: date) -> List[Game]:
        """
        Fetch the regular season games of a date.

        A date without games (e.g. around Christmas) yields an empty list.
        """
        try:
            data = await self._fetch_json(f"/score/{day.isoformat()}")
        except DataNotFoundError:
            return []

        return [
            self._parse_game(raw)
            for raw in (data or {}).get("games") or []
            if raw.get("gameType") == REGULAR_SEASON
        ]

    async def fetch_team_schedule(self, team_id: str, after: date) -> List[Game]:
        """Fetch a team's regular season games scheduled after a date."""
        data = await self._fetch_json(f"/club-schedule-season/{team_id}/now")

        upcoming: List[Game] = []
        for raw in (data or {}).get("games") or []:
            if raw.get("gameType") != REGULAR_SEASON:
                continue
            if raw.get("gameState") not in UPCOMING_STATES:
                continue
            game_date = raw.get("gameDate")
            if game_date and date.fromisoformat(game_date) <= after:
                continue
            upcoming.append(self._parse_game(raw))

        return upcoming
