"""Option functions that configure :func:`deckofcards.deck.new`."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, MutableSequence

from .cards import Card

__all__ = [
    "CardFilter",
    "SortFunc",
    "DeckOptions",
    "DeckOption",
    "with_shuffle",
    "with_filtered_cards",
    "with_jokers",
    "with_sort",
    "with_multiple_decks",
    "with_rng",
]

CardFilter = Callable[[Card], bool]
SortFunc = Callable[[MutableSequence[Card]], None]


@dataclass(slots=True)
class DeckOptions:
    """Configuration values for a single deck build.

    ``filter_card`` returns ``True`` for cards that must be left out.
    ``num_jokers`` and ``num_decks`` are stored as given; the builder treats
    values below 1 jokers as none and below 2 decks as a single deck.
    """

    filter_card: CardFilter | None = None
    sort_func: SortFunc | None = None
    shuffle: bool = False
    num_jokers: int = 0
    num_decks: int = 1
    rng: Any | None = None


DeckOption = Callable[[DeckOptions], None]


def with_shuffle() -> DeckOption:
    """Shuffle the finished deck before any sort is applied."""

    def _apply(opts: DeckOptions) -> None:
        opts.shuffle = True

    return _apply


def with_filtered_cards(filter_card: CardFilter) -> DeckOption:
    """Leave out every standard card for which ``filter_card`` returns ``True``."""

    def _apply(opts: DeckOptions) -> None:
        opts.filter_card = filter_card

    return _apply


def with_jokers(count: int) -> DeckOption:
    def _apply(opts: DeckOptions) -> None:
        opts.num_jokers = count

    return _apply


def with_sort(sort_func: SortFunc) -> DeckOption:
    """Reorder the deck with ``sort_func`` as the final build step."""

    def _apply(opts: DeckOptions) -> None:
        opts.sort_func = sort_func

    return _apply


def with_multiple_decks(count: int) -> DeckOption:
    """Combine ``count`` copies of the filtered deck."""

    def _apply(opts: DeckOptions) -> None:
        opts.num_decks = count

    return _apply


def with_rng(rng: Any) -> DeckOption:
    """Use ``rng`` (anything with a ``shuffle(list)`` method) when shuffling."""

    def _apply(opts: DeckOptions) -> None:
        opts.rng = rng

    return _apply
