"""
Exceptions raised by the playoff race analysis.
"""


class AnalysisError(Exception):
    """Base class for errors that abort the analysis of one target team."""
    pass


class TeamNotFoundError(AnalysisError, LookupError):
    """Raised when a team identifier is not part of the league snapshot."""

    def __init__(self, team_id: str):
        super().__init__(f"Team not found: {team_id}")
        self.team_id = team_id


class InsufficientDataError(AnalysisError):
    """Raised when there isn't enough data to run a computation."""
    pass


class MalformedStandingsError(AnalysisError):
    """Raised when standings records can't describe a valid season."""
    pass


class InvalidMatchupError(AnalysisError):
    """Raised when a matchup refers to a team that didn't play in the game."""
    pass
