"""Card abstractions and helpers for cardtext."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class CardInvariantError(ValueError):
    """Raised when a card pairs a rank and suit that cannot coexist."""


class Suit(str, Enum):
    """Enumeration of the four suits in a standard deck."""

    CLUBS = "C"
    DIAMONDS = "D"
    HEARTS = "H"
    SPADES = "S"


class Rank(str, Enum):
    """Enumeration of ranks in new-deck order, plus the optional Joker."""

    ACE = "A"
    TWO = "2"
    THREE = "3"
    FOUR = "4"
    FIVE = "5"
    SIX = "6"
    SEVEN = "7"
    EIGHT = "8"
    NINE = "9"
    TEN = "10"
    JACK = "J"
    QUEEN = "Q"
    KING = "K"
    JOKER = "JOKER"

    @classmethod
    def ordered(cls, include_joker: bool = False) -> tuple["Rank", ...]:
        """Return ranks in deck order, appending ``JOKER`` when enabled."""

        ranks = (
            cls.ACE,
            cls.TWO,
            cls.THREE,
            cls.FOUR,
            cls.FIVE,
            cls.SIX,
            cls.SEVEN,
            cls.EIGHT,
            cls.NINE,
            cls.TEN,
            cls.JACK,
            cls.QUEEN,
            cls.KING,
        )
        if include_joker:
            return ranks + (cls.JOKER,)
        return ranks

    @property
    def numeric_value(self) -> int | None:
        """Pip count for TWO through TEN, ``None`` for categorical ranks."""

        if self.value.isdigit():
            return int(self.value)
        return None

    @property
    def is_face(self) -> bool:
        return self in (Rank.JACK, Rank.QUEEN, Rank.KING)


@dataclass(frozen=True, slots=True)
class Card:
    """Value object pairing a rank with a suit (``None`` only for the Joker)."""

    rank: Rank
    suit: Suit | None

    def __post_init__(self) -> None:
        check_card(self)

    @classmethod
    def joker(cls) -> "Card":
        return cls(Rank.JOKER, None)

    @classmethod
    def from_code(cls, code: str, *, allow_joker: bool = True) -> "Card":
        """Parse a short code such as ``"AS"``, ``"10h"``, ``"TD"`` or ``"JOKER"``."""

        text = code.strip().upper()
        if text == Rank.JOKER.value:
            if not allow_joker:
                raise ValueError("jokers are not enabled")
            return cls.joker()
        if len(text) < 2:
            raise ValueError(f"invalid card code '{code}'")
        rank_text, suit_text = text[:-1], text[-1]
        if rank_text == "T":
            rank_text = Rank.TEN.value
        try:
            rank = Rank(rank_text)
            suit = Suit(suit_text)
        except ValueError:
            raise ValueError(f"invalid card code '{code}'") from None
        if rank is Rank.JOKER:
            raise ValueError(f"invalid card code '{code}'")
        return cls(rank, suit)

    @property
    def is_joker(self) -> bool:
        """Return ``True`` when the card represents a Joker."""

        return self.rank is Rank.JOKER

    @property
    def code(self) -> str:
        if self.suit is None:
            return self.rank.value
        return f"{self.rank.value}{self.suit.value}"


def check_card(card: Card) -> None:
    """Raise :class:`CardInvariantError` unless the suit is absent exactly for Jokers."""

    if not isinstance(card.rank, Rank):
        raise CardInvariantError(f"unknown rank {card.rank!r}")
    if card.suit is not None and not isinstance(card.suit, Suit):
        raise CardInvariantError(f"unknown suit {card.suit!r}")
    if card.rank is Rank.JOKER and card.suit is not None:
        raise CardInvariantError("a Joker cannot carry a suit")
    if card.rank is not Rank.JOKER and card.suit is None:
        raise CardInvariantError(f"rank {card.rank.value} requires a suit")
