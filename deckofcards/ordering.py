"""Ready-made sort strategies for :func:`deckofcards.options.with_sort`."""

from __future__ import annotations

from typing import MutableSequence

from .cards import Card

__all__ = ["sort_by_suit", "sort_by_value"]


def _stable_sort(cards: MutableSequence[Card], key) -> None:
    if isinstance(cards, list):
        cards.sort(key=key)
        return
    cards[:] = sorted(cards, key=key)


def sort_by_suit(cards: MutableSequence[Card]) -> None:
    """Order ``cards`` in place by suit, keeping input order within a suit."""

    _stable_sort(cards, lambda card: card.suit)


def sort_by_value(cards: MutableSequence[Card]) -> None:
    """Order ``cards`` in place by rank, keeping input order within a rank."""

    _stable_sort(cards, lambda card: card.rank)
