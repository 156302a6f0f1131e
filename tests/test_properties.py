"""Property-based geometry checks for both renderers over arbitrary hands."""

from __future__ import annotations

from hypothesis import given, strategies as st

from cardtext.cards import Card, Rank, Suit
from cardtext.compact import render_compact
from cardtext.large import TOP_BORDER, render_large

standard_cards = st.builds(Card, st.sampled_from(Rank.ordered()), st.sampled_from(list(Suit)))
any_card = st.one_of(standard_cards, st.just(Card.joker()))
hands = st.lists(any_card, min_size=1, max_size=10)


@given(hands)
def test_compact_geometry_holds_for_any_hand(hand: list[Card]) -> None:
    rows = render_compact(hand).split("\n")
    assert len(rows) == 4
    assert all(len(row) == 5 * len(hand) for row in rows)
    assert rows[0].count("┌───┐") == len(hand)
    assert rows[-1].count("└───┘") == len(hand)


@given(hands)
def test_large_geometry_holds_for_any_hand(hand: list[Card]) -> None:
    rows = render_large(hand).split("\n")
    assert len(rows) == 12
    assert all(len(row) == 13 * len(hand) for row in rows)
    assert rows[0].count(TOP_BORDER) == len(hand)


@given(hands)
def test_rendering_same_hand_twice_is_identical(hand: list[Card]) -> None:
    assert render_compact(hand) == render_compact(list(hand))
    assert render_large(hand) == render_large(list(hand))


def test_mixed_hand_with_tens_and_jokers() -> None:
    hand = [
        Card(Rank.TEN, Suit.HEARTS),
        Card.joker(),
        Card(Rank.ACE, Suit.CLUBS),
        Card(Rank.TEN, Suit.SPADES),
    ]
    compact_rows = render_compact(hand).split("\n")
    large_rows = render_large(hand).split("\n")
    assert compact_rows[1] == "│10 ││ 🃏 ││ A ││10 │"
    assert {len(row) for row in compact_rows} == {20}
    assert {len(row) for row in large_rows} == {52}
