"""
Tests for ideal loser resolution.
"""

import random
from unittest.mock import patch

import pytest

from playoff_race.simulator.errors import InvalidMatchupError
from playoff_race.simulator.resolver import (
    METHOD_CONFERENCE,
    METHOD_INVOLVED,
    METHOD_SIMULATION,
    IdealLoser,
    is_relevant,
    pick_ideal_loser
)

from conftest import make_game


ODDS_PATH = "playoff_race.simulator.resolver.odds_for_team"


class TestIsRelevant:
    """Tests for game relevance."""

    def test_target_plays(self, league):
        assert is_relevant(league, "MTL", make_game(1, "MTL", "EDM"))

    def test_conference_rival_plays(self, league):
        assert is_relevant(league, "MTL", make_game(1, "CGY", "PHI"))

    def test_other_conference_only(self, league):
        """Test a game between two teams of the other conference doesn't matter."""
        assert not is_relevant(league, "MTL", make_game(1, "EDM", "DAL"))


class TestPickIdealLoser:
    """Tests for pick_ideal_loser."""

    def test_target_home(self, league):
        """Test the opponent should lose when the target hosts the game."""
        with patch(ODDS_PATH) as mock_odds:
            result = pick_ideal_loser(league, "MTL", make_game(1, "MTL", "TOR"))
        assert result == IdealLoser(team_id="TOR", method=METHOD_INVOLVED)
        mock_odds.assert_not_called()

    def test_target_away(self, league):
        """Test the opponent should lose when the target is visiting."""
        with patch(ODDS_PATH) as mock_odds:
            result = pick_ideal_loser(league, "MTL", make_game(1, "EDM", "MTL"))
        assert result.team_id == "EDM"
        assert result.method == METHOD_INVOLVED
        mock_odds.assert_not_called()

    def test_home_in_conference(self, league):
        """Test the conference rival should lose against an outsider."""
        with patch(ODDS_PATH) as mock_odds:
            result = pick_ideal_loser(league, "MTL", make_game(1, "PHI", "COL"))
        assert result.team_id == "PHI"
        assert result.method == METHOD_CONFERENCE
        mock_odds.assert_not_called()

    def test_away_in_conference(self, league):
        with patch(ODDS_PATH) as mock_odds:
            result = pick_ideal_loser(league, "MTL", make_game(1, "VAN", "WSH"))
        assert result.team_id == "WSH"
        assert result.method == METHOD_CONFERENCE
        mock_odds.assert_not_called()

    def test_no_conference_team(self, league):
        """Test a game without any conference rival can't be resolved."""
        with pytest.raises(InvalidMatchupError):
            pick_ideal_loser(league, "MTL", make_game(1, "EDM", "DAL"))

    def test_simulation_away_should_lose(self, league):
        """Test the away team should lose when a home win helps more."""
        with patch(ODDS_PATH, side_effect=[0.7, 0.4]) as mock_odds:
            result = pick_ideal_loser(league, "MTL", make_game(1, "BOS", "TOR"), n_simulations=10)
        assert result.team_id == "TOR"
        assert result.method == METHOD_SIMULATION
        assert result.odds_if_home_wins == 0.7
        assert result.odds_if_away_wins == 0.4
        assert mock_odds.call_count == 2

    def test_simulation_home_should_lose(self, league):
        """Test the home team should lose when an away win helps more."""
        with patch(ODDS_PATH, side_effect=[0.3, 0.6]):
            result = pick_ideal_loser(league, "MTL", make_game(1, "BOS", "TOR"), n_simulations=10)
        assert result.team_id == "BOS"

    def test_simulation_equal_odds(self, league):
        """Test equal odds leave the home team as the ideal loser."""
        with patch(ODDS_PATH, side_effect=[0.5, 0.5]):
            result = pick_ideal_loser(league, "MTL", make_game(1, "BOS", "TOR"), n_simulations=10)
        assert result.team_id == "BOS"

    def test_simulation_forces_each_outcome(self, league):
        """Test each scenario starts from a different forced result."""
        with patch(ODDS_PATH, side_effect=[0.5, 0.4]) as mock_odds:
            pick_ideal_loser(league, "MTL", make_game(1, "BOS", "TOR"), n_simulations=10)

        home_wins = mock_odds.call_args_list[0].args[0]
        away_wins = mock_odds.call_args_list[1].args[0]
        assert home_wins.base_entry("BOS").wins == 41
        assert home_wins.base_entry("TOR").losses == 19
        assert away_wins.base_entry("TOR").wins == 37
        assert away_wins.base_entry("BOS").losses == 16
        assert league.standings["BOS"].wins == 40

    def test_simulation_end_to_end(self, league):
        """Test a real simulation in a conference where everybody qualifies."""
        result = pick_ideal_loser(
            league, "MTL", make_game(1, "PIT", "WSH"), n_simulations=20, rng=random.Random(3)
        )
        assert result.odds_if_home_wins == 1.0
        assert result.odds_if_away_wins == 1.0
        assert result.team_id == "PIT"

    def test_lowercase_target(self, league):
        """Test the target id is matched case-insensitively for conference lookups."""
        result = pick_ideal_loser(league, "mtl", make_game(1, "PHI", "COL"))
        assert result.team_id == "PHI"

    def test_lowercase_target_plays(self, league):
        """Test a lowercase target id still settles its own game by the first rule."""
        with patch(ODDS_PATH) as mock_odds:
            result = pick_ideal_loser(league, "mtl", make_game(1, "MTL", "TOR"))
        assert result == IdealLoser(team_id="TOR", method=METHOD_INVOLVED)
        mock_odds.assert_not_called()
        assert is_relevant(league, "mtl", make_game(1, "EDM", "MTL"))

    def test_completed_game_without_past_standings(self, league):
        """Test a completed game is simulated from today's standings when yesterday's are missing."""
        league.past_standings = {}
        result = pick_ideal_loser(
            league, "MTL", make_game(1, "PIT", "WSH", 3, 2, 3, "OFF"),
            past=True, n_simulations=10, rng=random.Random(3)
        )
        assert result.method == METHOD_SIMULATION
        assert result.team_id == "PIT"

    def test_completed_game_uses_past_standings(self, league):
        """Test completed games are simulated from yesterday's records when present."""
        league.past_standings["PIT"].wins = 32
        league.past_standings["PIT"].games_played = 59
        league.past_standings["PIT"].points = 70
        with patch(ODDS_PATH, side_effect=[0.5, 0.5]) as mock_odds:
            pick_ideal_loser(league, "MTL", make_game(1, "PIT", "WSH"), past=True, n_simulations=10)

        home_wins = mock_odds.call_args_list[0].args[0]
        assert home_wins.base_entry("PIT").wins == 33
