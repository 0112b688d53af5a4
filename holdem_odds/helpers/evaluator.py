from __future__ import annotations
from dataclasses import dataclass
from typing import Iterable, List, Optional, Sequence, Union

from .cards import Card, NUM_RANKS, NUM_SUITS, RANK_NAMES, parse_cards

HAND_SIZE = 2
BOARD_SIZE = 5

# Level 5 is unused: flush is checked before straight and there is no
# straight-flush level.
CATEGORY = {
    "high_card": 0,
    "pair": 1,
    "two_pair": 2,
    "trips": 3,
    "straight": 4,
    "flush": 6,
    "full_house": 7,
    "quads": 8,
}
CATEGORY_NAME = {v: k for k, v in CATEGORY.items()}

CardLike = Union[str, Card]


@dataclass(frozen=True)
class HandStrength:
    level: int
    primary: int
    secondary: Optional[int] = None

    @property
    def name(self) -> str:
        return CATEGORY_NAME[self.level]


def _straight_high(rank_count: List[int]) -> Optional[int]:
    run = 0
    for r in range(NUM_RANKS - 1, -1, -1):
        if rank_count[r] > 0:
            run += 1
            if run >= 5:
                return r + 4
        else:
            run = 0
    return None


def _check_sizes(hand: List[Card], community: List[Card]) -> None:
    if len(hand) != HAND_SIZE:
        raise ValueError("Hold'em hand must be exactly 2 cards")
    if len(community) > BOARD_SIZE:
        raise ValueError("Community cards cannot exceed 5")
    cards = hand + community
    if len(set(cards)) != len(cards):
        raise ValueError("Duplicate cards detected")


def evaluate_hand(hand: Iterable[CardLike], community: Iterable[CardLike] = ()) -> HandStrength:
    """
    Classify hole cards plus 0..5 community cards into a HandStrength.

    Precedence, first match wins: quads, full house, flush, straight,
    trips, two pair, pair, high card.
    """
    h = parse_cards(hand)
    b = parse_cards(community)
    _check_sizes(h, b)

    cards = sorted(h + b, key=lambda c: c.rank, reverse=True)
    rank_count = [0] * NUM_RANKS
    suit_count = [0] * NUM_SUITS
    for c in cards:
        rank_count[c.rank] += 1
        suit_count[c.suit] += 1

    top = cards[0].rank
    # ranks by multiplicity, highest first
    quads = [r for r in range(NUM_RANKS - 1, -1, -1) if rank_count[r] == 4]
    trips = [r for r in range(NUM_RANKS - 1, -1, -1) if rank_count[r] == 3]
    pairs = [r for r in range(NUM_RANKS - 1, -1, -1) if rank_count[r] == 2]

    if quads:
        return HandStrength(CATEGORY["quads"], quads[0])

    if trips:
        fillers = [r for r in range(NUM_RANKS - 1, -1, -1) if r != trips[0] and rank_count[r] >= 2]
        if fillers:
            return HandStrength(CATEGORY["full_house"], trips[0], fillers[0])

    if any(n >= 5 for n in suit_count):
        return HandStrength(CATEGORY["flush"], top)

    sh = _straight_high(rank_count)
    if sh is not None:
        return HandStrength(CATEGORY["straight"], sh)

    if trips:
        return HandStrength(CATEGORY["trips"], trips[0])

    if len(pairs) >= 2:
        return HandStrength(CATEGORY["two_pair"], pairs[0], pairs[1])

    if pairs:
        kickers = [c.rank for c in cards if c.rank != pairs[0]]
        return HandStrength(CATEGORY["pair"], pairs[0], kickers[0] if kickers else None)

    return HandStrength(CATEGORY["high_card"], top)


def compare_hands(a: HandStrength, b: HandStrength) -> int:
    """1 if a is better, -1 if b is better, 0 on a tie."""
    if a.level != b.level:
        return 1 if a.level > b.level else -1
    if a.primary != b.primary:
        return 1 if a.primary > b.primary else -1
    if a.secondary is not None and b.secondary is not None:
        if a.secondary != b.secondary:
            return 1 if a.secondary > b.secondary else -1
        return 0
    # a defined secondary rank beats a missing one
    if a.secondary is not None:
        return 1
    if b.secondary is not None:
        return -1
    return 0


def find_winning_opponent(
    player_hand: Iterable[CardLike],
    opponent_hands: Sequence[Iterable[CardLike]],
    community: Iterable[CardLike] = (),
) -> Optional[int]:
    """
    Index of the best opponent that strictly beats the player, or None when
    the player wins. Ties go to the player.
    """
    board = parse_cards(community)
    player = evaluate_hand(player_hand, board)

    best_i: Optional[int] = None
    best: HandStrength = player
    for i, oh in enumerate(opponent_hands):
        s = evaluate_hand(oh, board)
        if compare_hands(s, best) > 0:
            best_i, best = i, s
    return best_i


def best_opponent_strength(
    opponent_hands: Sequence[Iterable[CardLike]],
    community: Iterable[CardLike] = (),
) -> Optional[HandStrength]:
    board = parse_cards(community)
    best: Optional[HandStrength] = None
    for oh in opponent_hands:
        s = evaluate_hand(oh, board)
        if best is None or compare_hands(s, best) > 0:
            best = s
    return best


def describe(strength: HandStrength) -> str:
    name = strength.name.replace("_", " ")
    hi = RANK_NAMES[strength.primary]
    if strength.level == CATEGORY["full_house"]:
        return f"{name}, {hi} over {RANK_NAMES[strength.secondary]}"
    if strength.level == CATEGORY["two_pair"]:
        return f"{name}, {hi} and {RANK_NAMES[strength.secondary]}"
    if strength.level in (CATEGORY["straight"], CATEGORY["flush"], CATEGORY["high_card"]):
        return f"{name}, {hi} high"
    return f"{name}, {hi}"
