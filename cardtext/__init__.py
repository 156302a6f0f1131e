"""Playing-card model with compact and large text-art renderers."""

from . import cards, compact, config, deck, large, symbols
from .cards import Card, CardInvariantError, Rank, Suit
from .compact import render_compact
from .large import render_large
from .symbols import card_symbol, rank_label, suit_symbol

__all__ = [
    "cards",
    "compact",
    "config",
    "deck",
    "large",
    "symbols",
    "Card",
    "CardInvariantError",
    "Rank",
    "Suit",
    "card_symbol",
    "rank_label",
    "render_compact",
    "render_large",
    "suit_symbol",
]
