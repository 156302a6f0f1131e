"""Large twelve-row ASCII-art rendering with per-rank pip and face layouts."""

from __future__ import annotations

from typing import Final, Iterable

from .cards import Card, Rank, check_card
from .symbols import NO_CARDS, rank_label, suit_or_blank

LARGE_HEIGHT: Final[int] = 12
LARGE_WIDTH: Final[int] = 13
INTERIOR_WIDTH: Final[int] = 11

TOP_BORDER: Final[str] = "╭───────────╮"
BOTTOM_BORDER: Final[str] = "╰───────────╯"

# Interior rows are 11 characters once ``{s}`` is replaced by the suit glyph.
_BLANK = " " * INTERIOR_WIDTH
_CENTER = "     {s}     "
_SIDES = "  {s}     {s}  "
_PAIR = "    {s} {s}    "
_TRIPLE = "  {s}  {s}  {s}  "

BODY_LAYOUTS: Final[dict[Rank, tuple[str, ...]]] = {
    Rank.ACE: (
        _BLANK,
        "    ___    ",
        "   /   \\   ",
        "  |  {s}  |  ",
        "   \\___/   ",
        _BLANK,
    ),
    Rank.TWO: (_BLANK, _CENTER, _BLANK, _BLANK, _CENTER, _BLANK),
    Rank.THREE: (_BLANK, _CENTER, _BLANK, _CENTER, _BLANK, _CENTER),
    Rank.FOUR: (_BLANK, _SIDES, _BLANK, _BLANK, _SIDES, _BLANK),
    Rank.FIVE: (_BLANK, _SIDES, _BLANK, _CENTER, _BLANK, _SIDES),
    Rank.SIX: (_BLANK, _SIDES, _BLANK, _SIDES, _BLANK, _SIDES),
    Rank.SEVEN: (_BLANK, _SIDES, _BLANK, _TRIPLE, _BLANK, _SIDES),
    Rank.EIGHT: (_BLANK, _SIDES, _SIDES, _BLANK, _SIDES, _SIDES),
    Rank.NINE: (_BLANK, _PAIR, _SIDES, _CENTER, _SIDES, _PAIR),
    Rank.TEN: (_BLANK, _SIDES, _PAIR, _SIDES, _PAIR, _SIDES),
    Rank.JACK: (
        _BLANK,
        "   _____   ",
        "  |     |  ",
        "  | J   |  ",
        "  |     |  ",
        "  |_____|  ",
    ),
    Rank.QUEEN: (
        _BLANK,
        "   _____   ",
        "  /     \\  ",
        "  | Q   |  ",
        "  \\_____/  ",
        "    /_\\    ",
    ),
    Rank.KING: (
        _BLANK,
        "   _____   ",
        "  |/|\\|\\|  ",
        "  | K   |  ",
        "  |\\|\\|/|  ",
        "  |_____|  ",
    ),
}

# The Joker has no rank glyph or suit in its corners; the word JOKER takes their place.
JOKER_LAYOUT: Final[tuple[str, ...]] = (
    "JOKER      ",
    _BLANK,
    _BLANK,
    "    ___    ",
    "   /   \\   ",
    "  | o o |  ",
    "  |  >  |  ",
    "   \\_-_/   ",
    _BLANK,
    "      JOKER",
)


def _framed(interior: str) -> str:
    return f"│{interior}│"


def _card_template(card: Card) -> list[str]:
    if card.is_joker:
        return [TOP_BORDER, *(_framed(row) for row in JOKER_LAYOUT), BOTTOM_BORDER]

    label = rank_label(card.rank)
    suit = suit_or_blank(card)
    body = [row.format(s=suit) for row in BODY_LAYOUTS[card.rank]]
    return [
        TOP_BORDER,
        _framed(label.ljust(INTERIOR_WIDTH)),
        _framed(suit.ljust(INTERIOR_WIDTH)),
        *(_framed(row) for row in body),
        _framed(suit.rjust(INTERIOR_WIDTH)),
        _framed(label.rjust(INTERIOR_WIDTH)),
        BOTTOM_BORDER,
    ]


def _pad_to_height(lines: list[str]) -> list[str]:
    padded = list(lines)
    while len(padded) < LARGE_HEIGHT:
        if len(padded) == LARGE_HEIGHT - 1:
            padded.append(BOTTOM_BORDER)
        else:
            padded.append(_framed(_BLANK))
    return padded[:LARGE_HEIGHT]


def large_card_lines(card: Card) -> list[str]:
    """Return the twelve 13-character rows that draw ``card``."""

    check_card(card)
    return _pad_to_height(_card_template(card))


def render_large(cards: Iterable[Card]) -> str:
    """Render ``cards`` side by side in the large pip/face format.

    Row ``i`` of the output is row ``i`` of every card joined without a
    separator, so neighbouring borders touch. An empty sequence renders as
    ``"No cards"``.
    """

    hand = list(cards)
    if not hand:
        return NO_CARDS

    rows = [""] * LARGE_HEIGHT
    for card in hand:
        for idx, line in enumerate(large_card_lines(card)):
            rows[idx] += line
    return "\n".join(rows)
