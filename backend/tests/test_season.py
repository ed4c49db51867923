"""
Tests for season constants and date helpers.
"""

from datetime import date, datetime

from playoff_race.core.season import (
    DIVISION_SPOTS,
    SEASON_GAMES,
    WILDCARD_SPOTS,
    get_current_season,
    yesterday
)


class TestSeason:
    """Tests for season helpers."""

    def test_playoff_format(self):
        """Test 16 teams make the playoffs out of two conferences."""
        assert SEASON_GAMES == 82
        assert 2 * (2 * DIVISION_SPOTS + WILDCARD_SPOTS) == 16

    def test_current_season_in_fall(self):
        assert get_current_season(datetime(2025, 10, 8)) == 20252026

    def test_current_season_in_spring(self):
        assert get_current_season(datetime(2026, 4, 2)) == 20252026

    def test_season_rolls_over_in_september(self):
        assert get_current_season(datetime(2026, 8, 31)) == 20252026
        assert get_current_season(datetime(2026, 9, 1)) == 20262027

    def test_yesterday(self):
        assert yesterday(date(2025, 3, 1)) == date(2025, 2, 28)
