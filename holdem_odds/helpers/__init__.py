# cards + deck
from .cards import Card, parse_cards, make_deck, format_cards
from .deck import Deck, fresh_shuffled_deck, mark_removed

# evaluation
from .evaluator import (
    HandStrength,
    evaluate_hand,
    compare_hands,
    find_winning_opponent,
    best_opponent_strength,
    describe,
    CATEGORY,
)

# equity
from .montecarlo import (
    MONTE_CARLO_TRIALS,
    SimulationOutcome,
    simulate,
    estimate_win_probability,
    estimate_win_probability_parallel,
)
from .sweep import repeated_estimates, players_curve

__all__ = [
    # cards + deck
    "Card", "parse_cards", "make_deck", "format_cards",
    "Deck", "fresh_shuffled_deck", "mark_removed",

    # evaluation
    "HandStrength", "evaluate_hand", "compare_hands", "find_winning_opponent",
    "best_opponent_strength", "describe", "CATEGORY",

    # equity
    "MONTE_CARLO_TRIALS", "SimulationOutcome", "simulate",
    "estimate_win_probability", "estimate_win_probability_parallel",
    "repeated_estimates", "players_curve",
]
