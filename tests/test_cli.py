from __future__ import annotations

from typer.testing import CliRunner

from cardtext.cli.main import app, main
from cardtext.cli.render import styled_block

runner = CliRunner()


def test_show_compact() -> None:
    result = runner.invoke(app, ["show", "AS", "KH", "--no-color"])
    assert result.exit_code == 0
    assert "┌───┐┌───┐" in result.output
    assert "│ A ││ K │" in result.output


def test_show_large_ten() -> None:
    result = runner.invoke(app, ["show", "10C", "--large", "--no-color"])
    assert result.exit_code == 0
    assert "│10         │" in result.output
    assert result.output.count("♣") == 12


def test_show_rejects_joker_unless_enabled() -> None:
    rejected = runner.invoke(app, ["show", "JOKER"])
    assert rejected.exit_code != 0

    accepted = runner.invoke(app, ["show", "JOKER", "--jokers", "--large"])
    assert accepted.exit_code == 0
    assert accepted.output.count("JOKER") == 2


def test_show_rejects_invalid_code() -> None:
    result = runner.invoke(app, ["show", "ZZ"])
    assert result.exit_code != 0


def test_deal_is_reproducible_with_seed() -> None:
    first = runner.invoke(app, ["deal", "--count", "5", "--seed", "7", "--no-color"])
    second = runner.invoke(app, ["deal", "--count", "5", "--seed", "7", "--no-color"])
    assert first.exit_code == 0
    assert first.output == second.output
    assert "47 card(s) remain" in first.output


def test_deal_zero_cards_prints_sentinel() -> None:
    result = runner.invoke(app, ["deal", "--count", "0"])
    assert result.exit_code == 0
    assert "No cards" in result.output


def test_deck_lists_every_suit() -> None:
    result = runner.invoke(app, ["deck", "--jokers", "--no-color"])
    assert result.exit_code == 0
    for heading in ("Clubs", "Diamonds", "Hearts", "Spades", "Jokers"):
        assert heading in result.output
    assert "┌───┐" * 13 in result.output


def test_styled_block_colours_red_suits() -> None:
    text = styled_block("│ ♥ │", color=True)
    assert text.plain == "│ ♥ │"
    assert any("red" in str(span.style) for span in text.spans)


def test_styled_block_without_colour_has_no_spans() -> None:
    assert styled_block("│ ♠ │", color=False).spans == []


def test_styled_block_leaves_black_suits_unstyled() -> None:
    assert styled_block("│ ♠ ││ ♣ │", color=True).spans == []


def test_module_entry_point_exposes_main() -> None:
    from cardtext.cli import __main__ as entry

    assert entry.main is main
