"""Compact four-row box rendering for a row of cards."""

from __future__ import annotations

from typing import Final, Iterable

from .cards import Card, check_card
from .symbols import JOKER_GLYPH, NO_CARDS, rank_label, suit_symbol

COMPACT_HEIGHT: Final[int] = 4
COMPACT_WIDTH: Final[int] = 5

_TOP: Final[str] = "┌───┐"
_BOTTOM: Final[str] = "└───┘"


def _rank_cell(card: Card) -> str:
    if card.is_joker:
        return f"│ {JOKER_GLYPH} │"
    label = rank_label(card.rank)
    if len(label) == 1:
        return f"│ {label} │"
    return f"│{label} │"


def _suit_cell(card: Card) -> str:
    if card.suit is None:
        return "│   │"
    return f"│ {suit_symbol(card.suit)} │"


def compact_card_lines(card: Card) -> list[str]:
    """Return the four rows making up a single compact card."""

    check_card(card)
    return [_TOP, _rank_cell(card), _suit_cell(card), _BOTTOM]


def render_compact(cards: Iterable[Card]) -> str:
    """Render ``cards`` side by side as small boxed rank/suit cells.

    Each card is five characters wide; adjacent borders are repeated rather
    than shared. An empty sequence renders as ``"No cards"``.
    """

    hand = list(cards)
    if not hand:
        return NO_CARDS

    rows = [""] * COMPACT_HEIGHT
    for card in hand:
        for idx, line in enumerate(compact_card_lines(card)):
            rows[idx] += line
    return "\n".join(rows)
