"""
Empirical game outcome sampling.

A team's future games are drawn from its own season-to-date results: the
win, loss and overtime loss counts are used directly as sampling weights.
"""

import random
from itertools import accumulate
from typing import List, Tuple

from .models import Event


EVENTS = (Event.WIN, Event.LOSS, Event.OT)


def cumulative_weights(wins: int, losses: int, ot_losses: int) -> Tuple[int, ...]:
    """
    Build cumulative sampling weights for a team's record.

    A team without any recorded game falls back to a uniform distribution.
    """
    weights = (wins, losses, ot_losses)
    if sum(weights) == 0:
        weights = (1, 1, 1)
    return tuple(accumulate(weights))


def random_event(wins: int, losses: int, ot_losses: int, rng: random.Random) -> Event:
    """Draw a single game outcome for a team with the given record."""
    return rng.choices(EVENTS, cum_weights=cumulative_weights(wins, losses, ot_losses))[0]


def random_events(
    cum_weights: Tuple[int, ...],
    k: int,
    rng: random.Random
) -> List[Event]:
    """Draw `k` independent game outcomes from precomputed cumulative weights."""
    if k <= 0:
        return []
    return rng.choices(EVENTS, cum_weights=cum_weights, k=k)
