"""Typer entry-point wiring for the cardtext CLI."""

from __future__ import annotations

import logging
import random
from typing import Callable, Iterable, List, Sequence

import typer
from rich.console import Console

from ..cards import Card, Suit
from ..compact import render_compact
from ..config import CardsConfig
from ..deck import Deck, iter_full_deck
from ..large import render_large
from .render import styled_block

logger = logging.getLogger(__name__)

app = typer.Typer(add_completion=False, rich_markup_mode="rich")
console = Console(highlight=False)

Renderer = Callable[[Iterable[Card]], str]

_LARGE_OPTION = typer.Option(False, "--large/--compact", help="Use the 12-row pip/face layout.")
_JOKERS_OPTION = typer.Option(False, "--jokers/--no-jokers", help="Enable the Joker rank.")
_COLOR_OPTION = typer.Option(True, "--color/--no-color", help="Colour suit symbols.")
_DEBUG_OPTION = typer.Option(False, "--debug", help="Enable debug logging.")


def _configure_logging(debug: bool) -> None:
    logging.basicConfig(level=logging.DEBUG if debug else logging.WARNING)


def _renderer(large: bool) -> Renderer:
    return render_large if large else render_compact


def _emit(block: str, config: CardsConfig) -> None:
    console.print(styled_block(block, color=config.color), soft_wrap=True)


def _parse_codes(codes: Sequence[str], config: CardsConfig) -> list[Card]:
    cards: list[Card] = []
    for code in codes:
        try:
            cards.append(Card.from_code(code, allow_joker=config.jokers))
        except ValueError as exc:
            raise typer.BadParameter(str(exc), param_hint="CODES") from exc
    return cards


@app.command()
def show(
    codes: List[str] = typer.Argument(..., help="Card codes such as AS, 10H, TD or JOKER."),
    large: bool = _LARGE_OPTION,
    jokers: bool = _JOKERS_OPTION,
    color: bool = _COLOR_OPTION,
    debug: bool = _DEBUG_OPTION,
) -> None:
    """Render the given cards side by side."""

    _configure_logging(debug)
    config = CardsConfig(jokers=jokers, color=color)
    cards = _parse_codes(codes, config)
    logger.debug("rendering %d card(s)", len(cards))
    _emit(_renderer(large)(cards), config)


@app.command()
def deal(
    count: int = typer.Option(5, min=0, help="Number of cards to deal."),
    seed: int | None = typer.Option(None, help="Random seed for reproducible deals (omit for randomness)."),
    large: bool = _LARGE_OPTION,
    jokers: bool = _JOKERS_OPTION,
    color: bool = _COLOR_OPTION,
    debug: bool = _DEBUG_OPTION,
) -> None:
    """Shuffle a fresh deck and deal a hand from the top."""

    _configure_logging(debug)
    config = CardsConfig(jokers=jokers, color=color)
    deck = Deck.shuffled(config, random.Random(seed))
    hand = deck.draw_many(count)
    if len(hand) < count:
        console.print(f"[yellow]Deck only held {len(hand)} card(s).[/yellow]")
    _emit(_renderer(large)(hand), config)
    console.print(f"[cyan]{len(deck)} card(s) remain in the deck.[/cyan]")


@app.command("deck")
def deck_cli(
    large: bool = _LARGE_OPTION,
    jokers: bool = _JOKERS_OPTION,
    color: bool = _COLOR_OPTION,
    debug: bool = _DEBUG_OPTION,
) -> None:
    """Render the full ordered deck, one suit per block."""

    _configure_logging(debug)
    config = CardsConfig(jokers=jokers, color=color)
    render = _renderer(large)
    all_cards = list(iter_full_deck(config.jokers))
    for suit in Suit:
        console.print(f"[bold]{suit.name.title()}[/bold]")
        _emit(render([card for card in all_cards if card.suit is suit]), config)
    extras = [card for card in all_cards if card.is_joker]
    if extras:
        console.print("[bold]Jokers[/bold]")
        _emit(render(extras), config)


def main() -> None:
    """Entry-point for the ``cardtext`` console script."""

    app()


if __name__ == "__main__":  # pragma: no cover - CLI invocation
    main()
