"""Canonical display glyphs for suits, ranks and cards."""

from __future__ import annotations

from typing import Final

from .cards import Card, Rank, Suit

JOKER_GLYPH: Final[str] = "🃏"
NO_CARDS: Final[str] = "No cards"

SUIT_SYMBOLS: Final[dict[Suit, str]] = {
    Suit.CLUBS: "♣",
    Suit.DIAMONDS: "♦",
    Suit.HEARTS: "♥",
    Suit.SPADES: "♠",
}

RANK_LABELS: Final[dict[Rank, str]] = {
    Rank.ACE: "A",
    Rank.TWO: "2",
    Rank.THREE: "3",
    Rank.FOUR: "4",
    Rank.FIVE: "5",
    Rank.SIX: "6",
    Rank.SEVEN: "7",
    Rank.EIGHT: "8",
    Rank.NINE: "9",
    Rank.TEN: "10",
    Rank.JACK: "J",
    Rank.QUEEN: "Q",
    Rank.KING: "K",
    Rank.JOKER: JOKER_GLYPH,
}


def suit_symbol(suit: Suit) -> str:
    """Return the one-glyph symbol for ``suit``."""

    return SUIT_SYMBOLS[suit]


def rank_label(rank: Rank) -> str:
    """Return the label for ``rank``; ``"10"`` is the only two-character label."""

    return RANK_LABELS[rank]


def card_symbol(card: Card) -> str:
    """Return ``rank + suit`` for ``card``, or the joker glyph for a Joker."""

    if card.is_joker:
        return JOKER_GLYPH
    return f"{rank_label(card.rank)}{suit_symbol(card.suit)}"


def suit_or_blank(card: Card) -> str:
    return SUIT_SYMBOLS[card.suit] if card.suit is not None else " "
