from __future__ import annotations
import random
from typing import Iterable, Optional, Sequence, Tuple, Union

import numpy as np

from .cards import Card, parse_cards
from .montecarlo import MONTE_CARLO_TRIALS, estimate_win_probability

CardLike = Union[str, Card]


def repeated_estimates(
    hand: Iterable[CardLike],
    community: Iterable[CardLike] = (),
    num_players: int = 2,
    runs: int = 5,
    trials: int = MONTE_CARLO_TRIALS,
    seed: Optional[int] = None,
) -> np.ndarray:
    """Percentages from `runs` independently seeded queries."""
    if runs <= 0:
        raise ValueError("runs must be positive")
    h = parse_cards(hand)
    b = parse_cards(community)
    seeder = random.Random(seed)
    out = np.empty(runs, dtype=np.int64)
    for i in range(runs):
        out[i] = estimate_win_probability(
            h, b, num_players=num_players, trials=trials, seed=seeder.getrandbits(64)
        )
    return out


def players_curve(
    hand: Iterable[CardLike],
    community: Iterable[CardLike] = (),
    players: Sequence[int] = (2, 3, 4, 5, 6),
    runs: int = 5,
    trials: int = MONTE_CARLO_TRIALS,
    seed: Optional[int] = None,
) -> Tuple[np.ndarray, np.ndarray, np.ndarray]:
    """(players, mean %, std %) for each table size."""
    h = parse_cards(hand)
    b = parse_cards(community)
    seeder = random.Random(seed)
    xs = np.asarray(players, dtype=np.int64)
    means = np.zeros(len(xs))
    stds = np.zeros(len(xs))
    for i, n in enumerate(xs):
        est = repeated_estimates(h, b, int(n), runs=runs, trials=trials, seed=seeder.getrandbits(64))
        means[i] = est.mean()
        stds[i] = est.std()
    return xs, means, stds
