"""Rich styling for rendered card blocks."""

from __future__ import annotations

from rich.text import Text

from ..cards import Suit
from ..symbols import JOKER_GLYPH, SUIT_SYMBOLS

_SUIT_STYLES = {
    Suit.HEARTS: "bold red",
    Suit.DIAMONDS: "bold red",
}
_JOKER_STYLE = "bold magenta"


def styled_block(block: str, *, color: bool = True) -> Text:
    """Return ``block`` as Rich text with red suit glyphs and Joker markings coloured."""

    text = Text(block, no_wrap=True)
    if not color:
        return text
    for suit, style in _SUIT_STYLES.items():
        text.highlight_words([SUIT_SYMBOLS[suit]], style)
    text.highlight_words([JOKER_GLYPH, "JOKER"], _JOKER_STYLE)
    return text
