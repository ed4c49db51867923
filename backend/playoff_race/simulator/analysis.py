"""
Standings, bracket and game night analysis for one target team.
"""

import logging
import random
from dataclasses import dataclass, field
from typing import Callable, Dict, Iterable, List, Optional, Tuple, Union

from .engine import DEFAULT_SIMULATIONS, odds_for_league
from .errors import AnalysisError, InsufficientDataError, InvalidMatchupError
from .models import Game, League, StandingsRecord, Team
from .resolver import IdealLoser, is_relevant, pick_ideal_loser


logger = logging.getLogger(__name__)

MOOD_GREAT = "Great"
MOOD_GOOD = "Good"
MOOD_BAD = "Bad"


@dataclass
class Matchup:
    """A game annotated with the outcome the target team wants."""

    game: Game
    is_result: bool
    is_target_involved: bool
    ideal_loser: IdealLoser

    @property
    def ideal_loser_id(self) -> str:
        return self.ideal_loser.team_id

    @property
    def cheer_for_id(self) -> str:
        """The participant to cheer for: the one that isn't the ideal loser."""
        if self.game.home_team_id == self.ideal_loser_id:
            return self.game.away_team_id
        if self.game.away_team_id == self.ideal_loser_id:
            return self.game.home_team_id
        raise InvalidMatchupError(
            f"{self.ideal_loser_id} didn't play in game {self.game.id}"
        )

    @property
    def mood(self) -> Optional[str]:
        """How a completed game went for the target team; None for upcoming games."""
        if not self.is_result:
            return None
        if self.game.loser_id == self.ideal_loser_id:
            return MOOD_GOOD if self.game.overtime else MOOD_GREAT
        return MOOD_BAD

    def to_dict(self) -> dict:
        return {
            "game": self.game.to_dict(),
            "is_result": self.is_result,
            "is_target_involved": self.is_target_involved,
            "ideal_loser": self.ideal_loser.to_dict(),
            "cheer_for": self.cheer_for_id,
            "mood": self.mood
        }


@dataclass
class Seed:
    """A 1-based rank within a standings group."""

    seed: int
    record: StandingsRecord

    @property
    def team_id(self) -> str:
        return self.record.team_id

    def to_dict(self) -> dict:
        return {"seed": self.seed, "record": self.record.to_dict()}


@dataclass
class PlayoffMatchup:
    """A first round pairing based on current standings."""

    high_team: StandingsRecord
    low_team: StandingsRecord

    def to_dict(self) -> dict:
        return {
            "high_team": self.high_team.to_dict(),
            "low_team": self.low_team.to_dict()
        }


@dataclass
class Analysis:
    """Everything computed for one target team on one game night."""

    target: Team
    odds_today: float
    odds_yesterday: Optional[float] = None
    my_result: Optional[Matchup] = None
    results: List[Matchup] = field(default_factory=list)
    my_game: Optional[Matchup] = None
    games: List[Matchup] = field(default_factory=list)
    own_division_seed: List[Seed] = field(default_factory=list)
    other_division_seed: List[Seed] = field(default_factory=list)
    wildcard_seed: List[Seed] = field(default_factory=list)
    playoffs: List[PlayoffMatchup] = field(default_factory=list)
    schedule: List[Game] = field(default_factory=list)

    @property
    def odds_change(self) -> Optional[float]:
        if self.odds_yesterday is None:
            return None
        return self.odds_today - self.odds_yesterday

    def to_dict(self) -> dict:
        """Convert to dictionary for JSON serialization."""
        return {
            "target": self.target.to_dict(),
            "odds_today": self.odds_today,
            "odds_yesterday": self.odds_yesterday,
            "odds_change": self.odds_change,
            "my_result": self.my_result.to_dict() if self.my_result else None,
            "results": [m.to_dict() for m in self.results],
            "my_game": self.my_game.to_dict() if self.my_game else None,
            "games": [m.to_dict() for m in self.games],
            "own_division_seed": [s.to_dict() for s in self.own_division_seed],
            "other_division_seed": [s.to_dict() for s in self.other_division_seed],
            "wildcard_seed": [s.to_dict() for s in self.wildcard_seed],
            "playoffs": [p.to_dict() for p in self.playoffs],
            "schedule": [g.to_dict() for g in self.schedule]
        }


class Analyzer:
    """Builds the game night analysis of one target team."""

    def __init__(
        self,
        league: League,
        target_id: str,
        n_simulations: int = DEFAULT_SIMULATIONS,
        rng: Optional[random.Random] = None,
        workers: int = 1
    ):
        self.league = league
        self.target = league.get_team(target_id)
        self.n_simulations = n_simulations
        self.rng = rng or random.Random()
        self.workers = workers

    def build_seeds(self) -> Tuple[List[Seed], List[Seed], List[Seed]]:
        """
        Split the target's conference into division and wildcard seeds.

        Returns:
            Tuple of (own division seeds, other division seeds, wildcard seeds)
        """
        own_division: List[Seed] = []
        other_division: List[Seed] = []
        wildcard: List[Seed] = []

        for record in self.league.conference_records(self.target.conference_id):
            team = self.league.get_team(record.team_id)
            group = own_division if team.division_id == self.target.division_id else other_division
            if len(group) < 3:
                group.append(Seed(seed=len(group) + 1, record=record))
            else:
                wildcard.append(Seed(seed=len(wildcard) + 1, record=record))

        return own_division, other_division, wildcard

    @staticmethod
    def build_playoffs(
        own_division: List[Seed],
        other_division: List[Seed],
        wildcard: List[Seed]
    ) -> List[PlayoffMatchup]:
        """
        Pair the conference's first round from current seeds.

        The division leader with more points faces the second wildcard, the
        other leader faces the first wildcard, and each division's 2nd and
        3rd seeds face each other.

        Raises:
            InsufficientDataError: If a division has fewer than 3 seeds or
                there are fewer than 2 wildcard teams
        """
        if len(own_division) < 3 or len(other_division) < 3:
            raise InsufficientDataError("Each division needs at least 3 teams to build a bracket")
        if len(wildcard) < 2:
            raise InsufficientDataError("At least 2 wildcard teams are needed to build a bracket")

        tops = sorted(
            [own_division[0], other_division[0]],
            key=lambda s: s.record.points,
            reverse=True
        )

        return [
            PlayoffMatchup(tops[0].record, wildcard[1].record),
            PlayoffMatchup(tops[1].record, wildcard[0].record),
            PlayoffMatchup(own_division[1].record, own_division[2].record),
            PlayoffMatchup(other_division[1].record, other_division[2].record),
        ]

    def relevant_games(self, games: Iterable[Game]) -> List[Game]:
        return [g for g in games if is_relevant(self.league, self.target.id, g)]

    def make_matchup(self, game: Game, is_result: bool) -> Matchup:
        # Completed games are judged from the standings before they were played
        ideal_loser = pick_ideal_loser(
            self.league,
            self.target.id,
            game,
            past=is_result,
            n_simulations=self.n_simulations,
            rng=self.rng,
            workers=self.workers
        )
        return Matchup(
            game=game,
            is_result=is_result,
            is_target_involved=game.involves(self.target.id),
            ideal_loser=ideal_loser
        )

    def perform(self, progress_callback: Optional[Callable[[float], None]] = None) -> Analysis:
        """
        Run the full analysis.

        Bracket data is validated before any simulation starts.

        Args:
            progress_callback: Optional callback for progress updates (receives percent complete)

        Returns:
            The Analysis of the target team
        """
        logger.info("Analysing %s with %d simulations", self.target.id, self.n_simulations)

        own_division, other_division, wildcard = self.build_seeds()
        playoffs = self.build_playoffs(own_division, other_division, wildcard)

        results = self.relevant_games(self.league.results)
        games = self.relevant_games(self.league.games)

        total_steps = 2 + len(results) + len(games)
        done = 0

        def step() -> None:
            nonlocal done
            done += 1
            if progress_callback:
                progress_callback(done / total_steps * 100)

        analysis = Analysis(
            target=self.target,
            odds_today=odds_for_league(
                self.league, self.target.id, past=False,
                n_simulations=self.n_simulations, rng=self.rng, workers=self.workers
            ),
            own_division_seed=own_division,
            other_division_seed=other_division,
            wildcard_seed=wildcard,
            playoffs=playoffs,
            schedule=[g for g in self.league.schedule if g.involves(self.target.id)]
        )
        step()

        if self.target.id in self.league.past_standings:
            analysis.odds_yesterday = odds_for_league(
                self.league, self.target.id, past=True,
                n_simulations=self.n_simulations, rng=self.rng, workers=self.workers
            )
        step()

        for game in results:
            matchup = self.make_matchup(game, is_result=True)
            if matchup.is_target_involved:
                analysis.my_result = matchup
            else:
                analysis.results.append(matchup)
            step()

        for game in games:
            matchup = self.make_matchup(game, is_result=False)
            if matchup.is_target_involved:
                analysis.my_game = matchup
            else:
                analysis.games.append(matchup)
            step()

        logger.info("Analysis of %s done: %.1f%% playoff odds", self.target.id, analysis.odds_today * 100)
        return analysis


def analyze_many(
    league: League,
    target_ids: Iterable[str],
    n_simulations: int = DEFAULT_SIMULATIONS,
    rng: Optional[random.Random] = None,
    workers: int = 1
) -> Dict[str, Union[Analysis, AnalysisError]]:
    """
    Analyse several target teams independently.

    A failure for one team is recorded in its slot and doesn't stop the others.
    """
    rng = rng or random.Random()
    outcomes: Dict[str, Union[Analysis, AnalysisError]] = {}
    for target_id in target_ids:
        try:
            analyzer = Analyzer(league, target_id, n_simulations, rng=rng, workers=workers)
            outcomes[target_id] = analyzer.perform()
        except AnalysisError as e:
            logger.error("Analysis of %s failed: %s", target_id, e)
            outcomes[target_id] = e
    return outcomes
