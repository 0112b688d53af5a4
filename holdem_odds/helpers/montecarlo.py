from __future__ import annotations
import logging
import random
from concurrent.futures import ProcessPoolExecutor
from dataclasses import dataclass
from typing import Iterable, List, Optional, Tuple, Union

from .cards import Card, NUM_CARDS, parse_cards
from .deck import fresh_shuffled_deck
from .evaluator import (
    BOARD_SIZE,
    HAND_SIZE,
    best_opponent_strength,
    compare_hands,
    evaluate_hand,
    find_winning_opponent,
)

logger = logging.getLogger(__name__)

MONTE_CARLO_TRIALS = 10_000

CardLike = Union[str, Card]


@dataclass(slots=True)
class SimulationOutcome:
    """
    Counters for one probability query.

    With the default settings a tie is scored as a win for the player, so
    `ties` only moves when the caller asks for ties to be counted.
    """
    wins: int = 0
    losses: int = 0
    ties: int = 0

    @property
    def total(self) -> int:
        return self.wins + self.losses + self.ties

    @property
    def percentage(self) -> int:
        if self.total == 0:
            raise ValueError("No trials were run")
        return self.wins * 100 // self.total

    def merge(self, other: "SimulationOutcome") -> "SimulationOutcome":
        return SimulationOutcome(
            wins=self.wins + other.wins,
            losses=self.losses + other.losses,
            ties=self.ties + other.ties,
        )


def _validate(hand: List[Card], board: List[Card], num_players: int, trials: int, complete_board: bool) -> None:
    if len(hand) != HAND_SIZE:
        raise ValueError("Player hand must be 2 cards")
    if len(board) > BOARD_SIZE:
        raise ValueError("Community cards cannot exceed 5")
    known = hand + board
    if len(set(known)) != len(known):
        raise ValueError("Duplicate cards in known cards")
    if num_players < 2:
        raise ValueError("num_players must be at least 2")
    if trials <= 0:
        raise ValueError("trials must be positive")

    needed = len(known) + HAND_SIZE * (num_players - 1)
    if complete_board:
        needed += BOARD_SIZE - len(board)
    if needed > NUM_CARDS:
        raise ValueError(f"Not enough cards to deal {num_players} players")


def _run_trials(
    hand: List[Card],
    board: List[Card],
    num_opponents: int,
    trials: int,
    rng: random.Random,
    complete_board: bool,
    count_ties: bool,
) -> SimulationOutcome:
    out = SimulationOutcome()
    known = hand + board

    for _ in range(trials):
        deck = fresh_shuffled_deck(rng)
        deck.mark_all_removed(known)

        opponents = [deck.deal(HAND_SIZE) for _ in range(num_opponents)]
        runout = list(board)
        if complete_board:
            runout.extend(deck.deal(BOARD_SIZE - len(board)))

        if find_winning_opponent(hand, opponents, runout) is not None:
            out.losses += 1
        elif count_ties and compare_hands(
            evaluate_hand(hand, runout), best_opponent_strength(opponents, runout)
        ) == 0:
            out.ties += 1
        else:
            out.wins += 1

    return out


def simulate(
    player_hand: Iterable[CardLike],
    community: Iterable[CardLike] = (),
    num_players: int = 2,
    trials: int = MONTE_CARLO_TRIALS,
    rng: Optional[random.Random] = None,
    seed: Optional[int] = None,
    complete_board: bool = True,
    count_ties: bool = False,
) -> SimulationOutcome:
    """
    Deal `trials` random completions and score the player against
    `num_players - 1` opponents.

    Each trial shuffles a fresh deck, marks the known cards removed, deals
    the opponents and (if `complete_board`) the rest of the board. With
    `complete_board=False` hands are compared on the known community cards
    only.
    """
    hand = parse_cards(player_hand)
    board = parse_cards(community)
    _validate(hand, board, num_players, trials, complete_board)
    rng = rng or random.Random(seed)

    out = _run_trials(hand, board, num_players - 1, trials, rng, complete_board, count_ties)
    logger.debug(
        "simulate hand=%s board=%s players=%d trials=%d -> wins=%d losses=%d ties=%d",
        " ".join(map(str, hand)), " ".join(map(str, board)) or "-",
        num_players, trials, out.wins, out.losses, out.ties,
    )
    return out


def estimate_win_probability(
    player_hand: Iterable[CardLike],
    community: Iterable[CardLike] = (),
    num_players: int = 2,
    trials: int = MONTE_CARLO_TRIALS,
    rng: Optional[random.Random] = None,
    seed: Optional[int] = None,
    complete_board: bool = True,
    count_ties: bool = False,
) -> int:
    """Win probability as an integer percentage in [0, 100]."""
    return simulate(
        player_hand,
        community,
        num_players=num_players,
        trials=trials,
        rng=rng,
        seed=seed,
        complete_board=complete_board,
        count_ties=count_ties,
    ).percentage


def _run_chunk(args: Tuple[List[Card], List[Card], int, int, int, bool, bool]) -> SimulationOutcome:
    hand, board, num_opponents, trials, seed, complete_board, count_ties = args
    return _run_trials(hand, board, num_opponents, trials, random.Random(seed), complete_board, count_ties)


def estimate_win_probability_parallel(
    player_hand: Iterable[CardLike],
    community: Iterable[CardLike] = (),
    num_players: int = 2,
    trials: int = MONTE_CARLO_TRIALS,
    workers: int = 4,
    seed: Optional[int] = None,
    complete_board: bool = True,
    count_ties: bool = False,
) -> int:
    """
    Same estimate with the trials split across worker processes.

    Every chunk gets its own deck and its own Random seeded from `seed`,
    so a given (seed, workers) pair is reproducible.
    """
    hand = parse_cards(player_hand)
    board = parse_cards(community)
    _validate(hand, board, num_players, trials, complete_board)
    if workers <= 0:
        raise ValueError("workers must be positive")

    parent = random.Random(seed)
    chunks = min(workers, trials)
    sizes = [trials // chunks + (1 if i < trials % chunks else 0) for i in range(chunks)]
    jobs = [
        (hand, board, num_players - 1, n, parent.getrandbits(64), complete_board, count_ties)
        for n in sizes
    ]

    out = SimulationOutcome()
    with ProcessPoolExecutor(max_workers=chunks) as pool:
        for part in pool.map(_run_chunk, jobs):
            out = out.merge(part)

    logger.debug(
        "parallel simulate players=%d trials=%d workers=%d -> wins=%d losses=%d ties=%d",
        num_players, trials, chunks, out.wins, out.losses, out.ties,
    )
    return out.percentage
