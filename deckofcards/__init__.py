"""Build, customise and display decks of playing cards."""

from .cards import JOKER, Card, Rank, Suit, check_card, display
from .deck import new
from .errors import InvalidCardError, InvalidRankError, InvalidSuitError
from .options import (
    DeckOptions,
    with_filtered_cards,
    with_jokers,
    with_multiple_decks,
    with_rng,
    with_shuffle,
    with_sort,
)
from .ordering import sort_by_suit, sort_by_value

__all__ = [
    "Card",
    "DeckOptions",
    "InvalidCardError",
    "InvalidRankError",
    "InvalidSuitError",
    "JOKER",
    "Rank",
    "Suit",
    "check_card",
    "display",
    "new",
    "sort_by_suit",
    "sort_by_value",
    "with_filtered_cards",
    "with_jokers",
    "with_multiple_decks",
    "with_rng",
    "with_shuffle",
    "with_sort",
]
