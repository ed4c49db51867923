"""
Monte Carlo simulation engine for playoff odds calculations.
"""

import logging
import random
from collections import Counter
from concurrent.futures import ProcessPoolExecutor, as_completed
from typing import Callable, Dict, Iterable, List, Optional, Tuple

from ..core.season import SEASON_GAMES, DIVISION_SPOTS, WILDCARD_SPOTS
from .errors import InsufficientDataError, MalformedStandingsError, TeamNotFoundError
from .models import Event, League, SimEntry, StandingsRecord, Team
from .sampler import cumulative_weights, random_events


logger = logging.getLogger(__name__)

DEFAULT_SIMULATIONS = 50_000

Snapshot = Dict[str, SimEntry]


class Simulation:
    """
    Completes the season of every tracked team.

    Each team's remaining games are sampled independently from its own
    record, so the opponent of a game has no influence on its outcome.
    """

    def __init__(
        self,
        records: Iterable[StandingsRecord],
        teams: Dict[str, Team],
        season_games: int = SEASON_GAMES
    ):
        """
        Build the base entries of a simulation.

        Args:
            records: Standings records of the tracked teams (usually one conference)
            teams: Team lookup by id, used for division membership
            season_games: Number of games in a complete season

        Raises:
            TeamNotFoundError: If a record belongs to an unknown team
            MalformedStandingsError: If a team already played more than a season
        """
        self.season_games = season_games
        self._base: Dict[str, SimEntry] = {}
        self._weights: Dict[str, Tuple[int, ...]] = {}

        for record in records:
            team = teams.get(record.team_id)
            if team is None:
                raise TeamNotFoundError(record.team_id)
            if record.games_played > season_games:
                raise MalformedStandingsError(
                    f"{record.team_id} played {record.games_played} games, "
                    f"more than the {season_games} of a season"
                )
            if record.wins + record.losses + record.ot_losses == 0:
                logger.warning(
                    "%s has no recorded game, sampling its games uniformly", record.team_id
                )

            self._base[record.team_id] = SimEntry.from_record(record, team)
            # Weights stay those of the actual record, even after force_result
            self._weights[record.team_id] = cumulative_weights(
                record.wins, record.losses, record.ot_losses
            )

    @classmethod
    def for_conference(
        cls,
        league: League,
        conference_id: str,
        past: bool = False,
        season_games: int = SEASON_GAMES
    ) -> 'Simulation':
        """Build a simulation of one conference from a league snapshot."""
        records = league.conference_records(conference_id, past=past)
        return cls(records, league.teams, season_games)

    @property
    def team_ids(self) -> List[str]:
        return list(self._base)

    def __contains__(self, team_id: str) -> bool:
        return team_id in self._base

    def base_entry(self, team_id: str) -> SimEntry:
        entry = self._base.get(team_id)
        if entry is None:
            raise TeamNotFoundError(team_id)
        return entry.copy()

    def force_result(self, winner_id: str, loser_id: str) -> 'Simulation':
        """
        Fix the outcome of one game before simulating the rest of the season.

        The winner gets a regulation win and the loser a regulation loss.

        Raises:
            TeamNotFoundError: If either team isn't tracked
            MalformedStandingsError: If either team has no game left to play
        """
        winner = self._base.get(winner_id)
        if winner is None:
            raise TeamNotFoundError(winner_id)
        loser = self._base.get(loser_id)
        if loser is None:
            raise TeamNotFoundError(loser_id)

        for entry in (winner, loser):
            if entry.games_played >= self.season_games:
                raise MalformedStandingsError(
                    f"{entry.team_id} has no game left to play"
                )

        winner.apply(Event.WIN)
        loser.apply(Event.LOSS)
        return self

    def run(self, rng: random.Random) -> Snapshot:
        """
        Simulate one complete season.

        Args:
            rng: Random source for this trial

        Returns:
            Dict mapping team_id -> SimEntry with exactly `season_games` played
        """
        snapshot: Snapshot = {}
        for team_id, base in self._base.items():
            entry = base.copy()
            remaining = self.season_games - entry.games_played
            outcomes = Counter(random_events(self._weights[team_id], remaining, rng))
            for event, count in outcomes.items():
                entry.apply(event, count)
            snapshot[team_id] = entry
        return snapshot


def rank_entries(snapshot: Snapshot) -> List[SimEntry]:
    """
    Rank entries by points, then wins.

    Entries still tied keep their input order.
    """
    return sorted(snapshot.values(), key=lambda e: (e.points, e.wins), reverse=True)


def determine_playoffs(
    snapshot: Snapshot,
    division_spots: int = DIVISION_SPOTS,
    wildcard_spots: int = WILDCARD_SPOTS
) -> Tuple[List[str], List[str]]:
    """
    Determine the playoff teams of a conference.

    The top `division_spots` teams of each division qualify, then the best
    `wildcard_spots` of the remaining teams regardless of division.

    Args:
        snapshot: Final standings of one conference
        division_spots: Berths per division
        wildcard_spots: Wildcard berths per conference

    Returns:
        Tuple of (division qualifier IDs, wildcard IDs), each in ranked order
    """
    ranked = rank_entries(snapshot)

    per_division: Counter = Counter()
    division_qualifiers = []
    others = []
    for entry in ranked:
        if per_division[entry.division_id] < division_spots:
            per_division[entry.division_id] += 1
            division_qualifiers.append(entry.team_id)
        else:
            others.append(entry.team_id)

    return division_qualifiers, others[:wildcard_spots]


def qualifies(
    snapshot: Snapshot,
    team_id: str,
    division_spots: int = DIVISION_SPOTS,
    wildcard_spots: int = WILDCARD_SPOTS
) -> bool:
    """Check whether a team makes the playoffs in a final standings snapshot."""
    division_qualifiers, wildcards = determine_playoffs(
        snapshot, division_spots, wildcard_spots
    )
    return team_id in division_qualifiers or team_id in wildcards


def _run_batch(simulation: Simulation, team_id: str, n_simulations: int, seed: int) -> int:
    """Run a batch of trials with its own random stream and count qualifications."""
    rng = random.Random(seed)
    return sum(
        1 for _ in range(n_simulations)
        if qualifies(simulation.run(rng), team_id)
    )


def odds_for_team(
    simulation: Simulation,
    team_id: str,
    n_simulations: int = DEFAULT_SIMULATIONS,
    rng: Optional[random.Random] = None,
    workers: int = 1,
    progress_callback: Optional[Callable[[float], None]] = None
) -> float:
    """
    Estimate a team's playoff odds by simulating the season many times.

    Args:
        simulation: Simulation of the team's conference
        team_id: The team to estimate odds for
        n_simulations: Number of trials
        rng: Random source (a fresh unseeded one by default)
        workers: Number of processes to spread the trials over
        progress_callback: Optional callback for progress updates (receives percent complete)

    Returns:
        Fraction of trials in which the team qualified

    Raises:
        InsufficientDataError: If no trial is requested
        TeamNotFoundError: If the team isn't part of the simulation
    """
    if n_simulations <= 0:
        raise InsufficientDataError(f"At least one simulation is required, got {n_simulations}")
    if team_id not in simulation:
        raise TeamNotFoundError(team_id)

    rng = rng or random.Random()

    if workers > 1 and n_simulations >= workers:
        qualified = _odds_parallel(simulation, team_id, n_simulations, rng, workers)
    else:
        qualified = 0
        for sim_idx in range(n_simulations):
            if progress_callback and sim_idx % 100 == 0:
                progress_callback(sim_idx / n_simulations * 100)
            if qualifies(simulation.run(rng), team_id):
                qualified += 1

    if progress_callback:
        progress_callback(100)

    return qualified / n_simulations


def _odds_parallel(
    simulation: Simulation,
    team_id: str,
    n_simulations: int,
    rng: random.Random,
    workers: int
) -> int:
    # Split into batches with distinct seeds
    batch_size, extra = divmod(n_simulations, workers)
    batches = [
        (batch_size + (1 if i < extra else 0), rng.getrandbits(64))
        for i in range(workers)
    ]

    try:
        with ProcessPoolExecutor(max_workers=workers) as executor:
            futures = [
                executor.submit(_run_batch, simulation, team_id, size, seed)
                for size, seed in batches
            ]
            return sum(future.result() for future in as_completed(futures))
    except (RuntimeError, OSError) as e:
        logger.warning("Process pool unavailable (%s), simulating sequentially", e)
        return sum(_run_batch(simulation, team_id, size, seed) for size, seed in batches)


def odds_for_league(
    league: League,
    team_id: str,
    past: bool = False,
    n_simulations: int = DEFAULT_SIMULATIONS,
    rng: Optional[random.Random] = None,
    workers: int = 1
) -> float:
    """Estimate a team's playoff odds from today's (or yesterday's) standings."""
    team = league.get_team(team_id)
    simulation = Simulation.for_conference(league, team.conference_id, past=past)
    return odds_for_team(simulation, team.id, n_simulations, rng=rng, workers=workers)
