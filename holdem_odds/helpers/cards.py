from __future__ import annotations
from dataclasses import dataclass
from typing import Iterable, List, Sequence, Union

NUM_RANKS = 13
NUM_SUITS = 4
NUM_CARDS = NUM_RANKS * NUM_SUITS

RANKS = "23456789TJQKA"
SUITS = "hdcs"  # hearts, diamonds, clubs, spades
RANK_NAMES = ("2", "3", "4", "5", "6", "7", "8", "9", "10", "J", "Q", "K", "A")
SUIT_SYMBOLS = ("♥", "♦", "♣", "♠")
RANK_TO_I = {r: i for i, r in enumerate(RANKS)}  # 0..12
SUIT_TO_I = {s: i for i, s in enumerate(SUITS)}  # 0..3


@dataclass(frozen=True, order=True)
class Card:
    rank: int
    suit: int

    def __post_init__(self) -> None:
        if not (0 <= self.rank < NUM_RANKS) or not (0 <= self.suit < NUM_SUITS):
            raise ValueError(f"Card out of range: rank={self.rank} suit={self.suit}")

    def __str__(self) -> str:
        return f"{RANKS[self.rank]}{SUITS[self.suit]}"

    def pretty(self) -> str:
        return f"[ {RANK_NAMES[self.rank]}{SUIT_SYMBOLS[self.suit]} ]"

    @property
    def index(self) -> int:
        # rank-major, suit-minor: the slot this card occupies in an unshuffled deck
        return self.rank * NUM_SUITS + self.suit

    @staticmethod
    def from_str(s: str) -> "Card":
        s = s.strip()
        if len(s) == 3 and s[:2] == "10":
            s = "T" + s[2]
        if len(s) != 2:
            raise ValueError(f"Bad card string: {s!r}")
        r, su = s[0].upper(), s[1].lower()
        if r not in RANK_TO_I or su not in SUIT_TO_I:
            raise ValueError(f"Bad card string: {s!r}")
        return Card(RANK_TO_I[r], SUIT_TO_I[su])


def parse_cards(cards: Iterable[Union[str, Card]]) -> List[Card]:
    out: List[Card] = []
    for x in cards:
        out.append(x if isinstance(x, Card) else Card.from_str(x))
    return out


def make_deck(exclude: Iterable[Card] = ()) -> List[Card]:
    dead = set(exclude)
    deck = [Card(r, s) for r in range(NUM_RANKS) for s in range(NUM_SUITS)]
    return [c for c in deck if c not in dead]


def format_cards(cards: Sequence[Card]) -> str:
    return " ".join(c.pretty() for c in cards)
