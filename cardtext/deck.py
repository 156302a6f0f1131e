"""Mutable deck with pop-from-end draws."""

from __future__ import annotations

import logging
import random
from typing import Iterator

from .cards import Card, Rank, Suit
from .config import CardsConfig

logger = logging.getLogger(__name__)

STANDARD_DECK_SIZE = 52
JOKERS_PER_DECK = 2


def iter_full_deck(include_jokers: bool = False) -> Iterator[Card]:
    """Yield every card of a fresh deck in new-deck order."""

    for suit in Suit:
        for rank in Rank.ordered():
            yield Card(rank, suit)
    if include_jokers:
        for _ in range(JOKERS_PER_DECK):
            yield Card.joker()


class Deck:
    """Ordered pile of cards; the end of the list is the top of the deck."""

    def __init__(self, config: CardsConfig | None = None, rng: random.Random | None = None) -> None:
        self.config = config or CardsConfig()
        self._rng = rng or random.Random()
        self._cards: list[Card] = list(iter_full_deck(self.config.jokers))

    @classmethod
    def shuffled(cls, config: CardsConfig | None = None, rng: random.Random | None = None) -> "Deck":
        deck = cls(config, rng)
        deck.shuffle()
        return deck

    @property
    def cards(self) -> tuple[Card, ...]:
        return tuple(self._cards)

    def __len__(self) -> int:
        return len(self._cards)

    def is_empty(self) -> bool:
        return not self._cards

    def shuffle(self) -> None:
        """Shuffle the remaining cards in place."""

        self._rng.shuffle(self._cards)
        logger.debug("shuffled deck of %d card(s)", len(self._cards))

    def draw(self) -> Card | None:
        """Remove and return the top card, or ``None`` when the deck is empty."""

        if not self._cards:
            return None
        return self._cards.pop()

    def draw_many(self, count: int) -> list[Card]:
        """Draw up to ``count`` cards, stopping early if the deck runs out."""

        if count < 0:
            raise ValueError("count must be non-negative")
        drawn: list[Card] = []
        for _ in range(count):
            card = self.draw()
            if card is None:
                logger.debug("deck exhausted after %d draw(s)", len(drawn))
                break
            drawn.append(card)
        return drawn

    def reset(self) -> None:
        """Restore the full, unshuffled deck."""

        self._cards = list(iter_full_deck(self.config.jokers))
        logger.debug("deck reset to %d card(s)", len(self._cards))
