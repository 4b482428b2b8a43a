"""Card abstractions and display helpers."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from types import MappingProxyType
from typing import Final, Mapping

from .errors import InvalidCardError, InvalidRankError, InvalidSuitError

__all__ = [
    "Suit",
    "Rank",
    "Card",
    "JOKER",
    "SUIT_NAMES",
    "RANK_NAMES",
    "STANDARD_SUITS",
    "STANDARD_RANKS",
    "check_card",
    "display",
]


class Suit(IntEnum):
    """Card suits in default sort order, followed by the joker sentinel."""

    SPADES = 0
    DIAMONDS = 1
    CLUBS = 2
    HEARTS = 3
    JOKER = 4


class Rank(IntEnum):
    """Card ranks in default sort order, preceded by the joker sentinel."""

    JOKER = 0
    ACE = 1
    TWO = 2
    THREE = 3
    FOUR = 4
    FIVE = 5
    SIX = 6
    SEVEN = 7
    EIGHT = 8
    NINE = 9
    TEN = 10
    JACK = 11
    QUEEN = 12
    KING = 13


SUIT_NAMES: Final[Mapping[int, str]] = MappingProxyType(
    {
        Suit.SPADES: "Spades",
        Suit.DIAMONDS: "Diamonds",
        Suit.CLUBS: "Clubs",
        Suit.HEARTS: "Hearts",
        Suit.JOKER: "Joker",
    }
)
RANK_NAMES: Final[Mapping[int, str]] = MappingProxyType(
    {
        Rank.ACE: "Ace",
        Rank.TWO: "Two",
        Rank.THREE: "Three",
        Rank.FOUR: "Four",
        Rank.FIVE: "Five",
        Rank.SIX: "Six",
        Rank.SEVEN: "Seven",
        Rank.EIGHT: "Eight",
        Rank.NINE: "Nine",
        Rank.TEN: "Ten",
        Rank.JACK: "Jack",
        Rank.QUEEN: "Queen",
        Rank.KING: "King",
    }
)
STANDARD_SUITS: Final[tuple[Suit, ...]] = (Suit.SPADES, Suit.DIAMONDS, Suit.CLUBS, Suit.HEARTS)
STANDARD_RANKS: Final[tuple[Rank, ...]] = tuple(rank for rank in Rank if rank != Rank.JOKER)


@dataclass(frozen=True, slots=True)
class Card:
    """Value object describing a single playing card.

    Fields are not validated on construction; use :func:`check_card` or
    :attr:`is_valid` to find out whether a card is well formed.
    """

    suit: Suit
    rank: Rank

    @property
    def is_joker(self) -> bool:
        """Return ``True`` when the card belongs to the joker suit."""

        return self.suit == Suit.JOKER

    @property
    def is_valid(self) -> bool:
        try:
            check_card(self)
        except InvalidCardError:
            return False
        return True

    def __str__(self) -> str:
        return display(self)


JOKER: Final[Card] = Card(suit=Suit.JOKER, rank=Rank.JOKER)


def check_card(card: Card) -> None:
    """Raise when ``card`` is neither a joker nor a standard card.

    The rank is checked before the suit, so a card with both fields out of
    range reports the rank.
    """

    if card.suit == Suit.JOKER:
        return
    if not Rank.ACE <= card.rank <= Rank.KING:
        raise InvalidRankError(int(card.rank))
    if not Suit.SPADES <= card.suit <= Suit.HEARTS:
        raise InvalidSuitError(int(card.suit))


def display(card: Card) -> str:
    """Return a readable name such as ``"Ace of Spades"`` for ``card``.

    Malformed cards produce a message naming the offending value instead of
    raising.
    """

    try:
        check_card(card)
    except InvalidCardError as exc:
        return str(exc)
    if card.is_joker:
        return SUIT_NAMES[Suit.JOKER]
    return f"{RANK_NAMES[card.rank]} of {SUIT_NAMES[card.suit]}"
