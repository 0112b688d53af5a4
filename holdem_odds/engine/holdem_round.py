from __future__ import annotations

import random
from dataclasses import dataclass, replace
from enum import IntEnum
from typing import List, Optional, Tuple

from ..helpers.cards import Card
from ..helpers.deck import fresh_shuffled_deck
from ..helpers.evaluator import BOARD_SIZE, HAND_SIZE, HandStrength, evaluate_hand, find_winning_opponent
from ..helpers.montecarlo import MONTE_CARLO_TRIALS, estimate_win_probability

MIN_PLAYERS = 2
MAX_PLAYERS = 6
FLOP_SIZE = 3

Hand = Tuple[Card, Card]


class Street(IntEnum):
    PREFLOP = 0
    FLOP = 1
    TURN = 2
    RIVER = 3

    @property
    def community_size(self) -> int:
        return (0, FLOP_SIZE, FLOP_SIZE + 1, BOARD_SIZE)[int(self)]


class Act(IntEnum):
    FOLD = 0
    CONTINUE = 1


@dataclass(frozen=True, slots=True)
class RoundState:
    """
    One dealt hand. Seat 0 is the player, seats 1.. are the bots.

    The whole board is dealt up front, after all hole cards; only the
    prefix for the current street is visible.
    """
    hands: Tuple[Hand, ...]
    board: Tuple[Card, ...]
    street: int = Street.PREFLOP
    folded: bool = False

    @property
    def num_players(self) -> int:
        return len(self.hands)

    @property
    def player_hand(self) -> Hand:
        return self.hands[0]

    @property
    def opponent_hands(self) -> Tuple[Hand, ...]:
        return self.hands[1:]


def deal_round(num_players: int = MIN_PLAYERS, rng: Optional[random.Random] = None) -> RoundState:
    if not (MIN_PLAYERS <= num_players <= MAX_PLAYERS):
        raise ValueError(f"Number of players must be between {MIN_PLAYERS} and {MAX_PLAYERS}")
    deck = fresh_shuffled_deck(rng)
    hands = tuple(tuple(deck.deal(HAND_SIZE)) for _ in range(num_players))
    board = tuple(deck.deal(BOARD_SIZE))
    return RoundState(hands=hands, board=board)


def visible_community(state: RoundState) -> List[Card]:
    return list(state.board[: Street(state.street).community_size])


def is_terminal(state: RoundState) -> bool:
    return state.folded or state.street == Street.RIVER


def legal_actions(state: RoundState) -> List[int]:
    if is_terminal(state):
        return []
    return [Act.FOLD, Act.CONTINUE]


def fold(state: RoundState) -> RoundState:
    return replace(state, folded=True)


def advance_street(state: RoundState) -> RoundState:
    if state.folded:
        raise ValueError("Cannot advance a folded round")
    if state.street == Street.RIVER:
        raise ValueError("Round is already on the river")
    return replace(state, street=Street(state.street + 1))


def apply_action(state: RoundState, act: int) -> RoundState:
    if act not in legal_actions(state):
        raise ValueError(f"Illegal action {act} for state")
    return fold(state) if act == Act.FOLD else advance_street(state)


def street_probability(
    state: RoundState,
    trials: int = MONTE_CARLO_TRIALS,
    rng: Optional[random.Random] = None,
) -> int:
    """Player's win percentage given only what is visible on this street."""
    return estimate_win_probability(
        state.player_hand,
        visible_community(state),
        num_players=state.num_players,
        trials=trials,
        rng=rng,
    )


def player_strength(state: RoundState) -> HandStrength:
    return evaluate_hand(state.player_hand, visible_community(state))


def showdown(state: RoundState) -> int:
    """Winning seat on the full board: 0 for the player, i + 1 for bot i."""
    if state.folded:
        raise ValueError("No showdown after a fold")
    i = find_winning_opponent(state.player_hand, state.opponent_hands, state.board)
    return 0 if i is None else i + 1
