from __future__ import annotations
import random
from typing import Iterable, List, Optional, Union

from .cards import Card, make_deck, parse_cards


_FULL_DECK = tuple(make_deck())


class Deck:
    """
    A shuffled 52-card deck dealt front to back.

    Known cards are not pulled out of the permutation; their slots are
    marked removed (None) and skipped while drawing. This keeps one full
    shuffle per deck and still draws without replacement from the unseen cards.
    """

    def __init__(self, rng: Optional[random.Random] = None):
        rng = rng or random.Random()
        self._slots: List[Optional[Card]] = list(_FULL_DECK)
        rng.shuffle(self._slots)
        self._pos = 0

    def __len__(self) -> int:
        # cards still available to draw
        return sum(1 for c in self._slots[self._pos:] if c is not None)

    @property
    def slots(self) -> List[Optional[Card]]:
        return list(self._slots)

    def mark_removed(self, card: Union[str, Card]) -> None:
        c = card if isinstance(card, Card) else Card.from_str(card)
        try:
            i = self._slots.index(c)
        except ValueError:
            raise ValueError(f"Card {c} is not in the deck (already removed or dealt)") from None
        if i < self._pos:
            raise ValueError(f"Card {c} has already been dealt")
        self._slots[i] = None

    def mark_all_removed(self, cards: Iterable[Union[str, Card]]) -> None:
        for c in parse_cards(cards):
            self.mark_removed(c)

    def draw(self) -> Card:
        while self._pos < len(self._slots):
            c = self._slots[self._pos]
            self._pos += 1
            if c is not None:
                return c
        raise ValueError("Deck is exhausted")

    def deal(self, size: int) -> List[Card]:
        return [self.draw() for _ in range(size)]


def fresh_shuffled_deck(rng: Optional[random.Random] = None) -> Deck:
    return Deck(rng)


def mark_removed(deck: Deck, card: Union[str, Card]) -> None:
    deck.mark_removed(card)
