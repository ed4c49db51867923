"""
Ideal outcome resolution.

Decides which participant of a game a target team's fans should root
against. Cheap rules settle most games; games between two conference rivals
are settled by comparing simulated odds under both fixed outcomes.
"""

import logging
import random
from dataclasses import dataclass
from typing import Optional

from .engine import DEFAULT_SIMULATIONS, Simulation, odds_for_team
from .errors import InvalidMatchupError
from .models import Game, League


logger = logging.getLogger(__name__)

METHOD_INVOLVED = "involved"
METHOD_CONFERENCE = "conference"
METHOD_SIMULATION = "simulation"


@dataclass
class IdealLoser:
    """The team that should lose a game, and how it was picked."""

    team_id: str
    method: str
    odds_if_home_wins: Optional[float] = None
    odds_if_away_wins: Optional[float] = None

    def to_dict(self) -> dict:
        return {
            "team_id": self.team_id,
            "method": self.method,
            "odds_if_home_wins": self.odds_if_home_wins,
            "odds_if_away_wins": self.odds_if_away_wins
        }


def is_relevant(league: League, target_id: str, game: Game) -> bool:
    """A game matters if the target plays in it or a conference rival does."""
    target = league.get_team(target_id)
    if game.involves(target.id):
        return True
    conference_id = target.conference_id
    return (
        league.get_team(game.home_team_id).conference_id == conference_id
        or league.get_team(game.away_team_id).conference_id == conference_id
    )


def pick_ideal_loser(
    league: League,
    target_id: str,
    game: Game,
    past: bool = False,
    n_simulations: int = DEFAULT_SIMULATIONS,
    rng: Optional[random.Random] = None,
    workers: int = 1
) -> IdealLoser:
    """
    Pick the participant whose loss helps the target team the most.

    Rules, in priority order:
    1. The target plays: its opponent should lose.
    2. Only one participant is in the target's conference: that one should lose.
    3. Otherwise simulate the season twice, once with each participant
       winning the game, and pick the loser of the better scenario.

    Args:
        league: League snapshot
        target_id: The team we're rooting for
        game: The game to resolve
        past: Simulate from yesterday's standings (for completed games),
            today's when a participant has no past record
        n_simulations: Trials per scenario
        rng: Random source shared by both scenarios
        workers: Number of processes per odds estimate

    Returns:
        IdealLoser for the game
    """
    home_id = game.home_team_id
    away_id = game.away_team_id
    target = league.get_team(target_id)

    if game.involves(target.id):
        return IdealLoser(team_id=game.opponent_of(target.id), method=METHOD_INVOLVED)

    home_in_conf = league.get_team(home_id).conference_id == target.conference_id
    away_in_conf = league.get_team(away_id).conference_id == target.conference_id

    if home_in_conf and not away_in_conf:
        return IdealLoser(team_id=home_id, method=METHOD_CONFERENCE)
    if away_in_conf and not home_in_conf:
        return IdealLoser(team_id=away_id, method=METHOD_CONFERENCE)
    if not home_in_conf:
        raise InvalidMatchupError(
            f"{away_id} at {home_id} doesn't involve {target.id}'s conference"
        )

    rng = rng or random.Random()

    if past and not all(tid in league.past_standings for tid in (home_id, away_id, target.id)):
        logger.warning(
            "No past record for %s at %s, simulating from today's standings", away_id, home_id
        )
        past = False

    home_wins = Simulation.for_conference(league, target.conference_id, past=past)
    home_wins.force_result(home_id, away_id)
    away_wins = Simulation.for_conference(league, target.conference_id, past=past)
    away_wins.force_result(away_id, home_id)

    odds_home = odds_for_team(home_wins, target.id, n_simulations, rng=rng, workers=workers)
    odds_away = odds_for_team(away_wins, target.id, n_simulations, rng=rng, workers=workers)

    logger.info(
        "%s at %s: %s odds %.3f if %s wins, %.3f if %s wins",
        away_id, home_id, target.id, odds_home, home_id, odds_away, away_id
    )

    # Equal odds leave the home team as the ideal loser
    loser_id = away_id if odds_home > odds_away else home_id
    return IdealLoser(
        team_id=loser_id,
        method=METHOD_SIMULATION,
        odds_if_home_wins=odds_home,
        odds_if_away_wins=odds_away
    )
