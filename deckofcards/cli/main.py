"""Typer entry-point wiring for the deck-of-cards CLI."""

from __future__ import annotations

import logging
import random
from enum import Enum
from typing import Sequence

import typer
from rich.console import Console

from .. import deck, options, ordering
from ..cards import Card, Rank, Suit
from .render import format_card, render_summary

app = typer.Typer(add_completion=False, rich_markup_mode="rich")
console = Console()


class SortChoice(str, Enum):
    suit = "suit"
    value = "value"


_SORTS = {
    SortChoice.suit: ordering.sort_by_suit,
    SortChoice.value: ordering.sort_by_value,
}


def _parse_names(names: Sequence[str], members: type[Enum], kind: str) -> set[int]:
    parsed: set[int] = set()
    for name in names:
        try:
            member = members[name.upper()]
        except KeyError as exc:
            raise typer.BadParameter(f"unknown {kind} '{name}'") from exc
        if member.name == "JOKER":
            raise typer.BadParameter(f"the joker {kind} cannot be excluded; use --jokers 0")
        parsed.add(member.value)
    return parsed


def build_options(
    *,
    shuffle: bool,
    jokers: int,
    decks: int,
    sort: SortChoice | None,
    exclude_ranks: set[int],
    exclude_suits: set[int],
    seed: int | None,
) -> list[options.DeckOption]:
    """Translate command-line flags into deck option functions."""

    opts: list[options.DeckOption] = [
        options.with_jokers(jokers),
        options.with_multiple_decks(decks),
    ]
    if exclude_ranks or exclude_suits:

        def _excluded(card: Card) -> bool:
            return card.rank in exclude_ranks or card.suit in exclude_suits

        opts.append(options.with_filtered_cards(_excluded))
    if shuffle:
        opts.append(options.with_shuffle())
        if seed is not None:
            opts.append(options.with_rng(random.Random(seed)))
    if sort is not None:
        opts.append(options.with_sort(_SORTS[sort]))
    return opts


@app.command()
def show(
    shuffle: bool = typer.Option(False, "--shuffle", help="Shuffle the deck before sorting."),
    jokers: int = typer.Option(0, min=0, help="Number of jokers appended to the deck."),
    decks: int = typer.Option(1, min=1, help="Number of standard decks combined."),
    sort: SortChoice | None = typer.Option(None, case_sensitive=False, help="Sort the finished deck."),
    exclude_rank: list[str] = typer.Option([], "--exclude-rank", help="Rank name to leave out (repeatable)."),
    exclude_suit: list[str] = typer.Option([], "--exclude-suit", help="Suit name to leave out (repeatable)."),
    seed: int | None = typer.Option(None, help="Random seed for reproducible shuffles."),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging."),
) -> None:
    """Build a deck and print every card, one per line."""

    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s - %(levelname)s - %(message)s")

    opts = build_options(
        shuffle=shuffle,
        jokers=jokers,
        decks=decks,
        sort=sort,
        exclude_ranks=_parse_names(exclude_rank, Rank, "rank"),
        exclude_suits=_parse_names(exclude_suit, Suit, "suit"),
        seed=seed,
    )
    cards = deck.new(*opts)
    for card in cards:
        console.print(format_card(card))
    console.print(render_summary(cards))


def main() -> None:
    """Entry-point for ``python -m deckofcards.cli``."""

    app()


if __name__ == "__main__":  # pragma: no cover - CLI invocation
    main()
