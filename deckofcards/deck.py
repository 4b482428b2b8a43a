"""Deck assembly from a sequence of option functions."""

from __future__ import annotations

import logging
import random
from typing import Any, Callable, cast

from .cards import JOKER, STANDARD_RANKS, STANDARD_SUITS, Card
from .options import DeckOption, DeckOptions

__all__ = ["new", "standard_deck", "shuffle"]

logger = logging.getLogger(__name__)


def standard_deck() -> list[Card]:
    """Return the 52 standard cards in suit-major order."""

    return [Card(suit=suit, rank=rank) for suit in STANDARD_SUITS for rank in STANDARD_RANKS]


def shuffle(cards: list[Card], rng: Any | None = None) -> None:
    """Apply a uniform random permutation to ``cards`` in place.

    ``rng`` may be any object exposing ``shuffle(list)``; when omitted a fresh
    :class:`random.Random` is created so no generator state is shared between
    calls.
    """

    if rng is None:
        rng = random.Random()
    shuffle_fn = cast(Callable[[list[Card]], None], rng.shuffle)
    shuffle_fn(cards)


def new(*opts: DeckOption) -> list[Card]:
    """Build a deck of cards configured by ``opts``.

    Options are applied in order, so a later option overrides an earlier one
    that sets the same field. The build always runs filter, multiply, add
    jokers, shuffle and sort in that order regardless of option order.
    """

    config = DeckOptions()
    for opt in opts:
        opt(config)
    logger.debug(
        "Building deck: decks=%d jokers=%d shuffle=%s filtered=%s sorted=%s",
        config.num_decks,
        config.num_jokers,
        config.shuffle,
        config.filter_card is not None,
        config.sort_func is not None,
    )

    cards = standard_deck()
    if config.filter_card is not None:
        cards = [card for card in cards if not config.filter_card(card)]

    if config.num_decks > 1:
        cards = cards * config.num_decks

    cards.extend(JOKER for _ in range(config.num_jokers))

    if config.shuffle:
        shuffle(cards, config.rng)

    if config.sort_func is not None:
        config.sort_func(cards)

    logger.info("Successfully created deck of cards (%d cards)", len(cards))
    return cards
