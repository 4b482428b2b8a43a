from __future__ import annotations

import dataclasses

import pytest

from deckofcards.cards import (
    JOKER,
    RANK_NAMES,
    STANDARD_RANKS,
    STANDARD_SUITS,
    SUIT_NAMES,
    Card,
    Rank,
    Suit,
    check_card,
    display,
)
from deckofcards.errors import InvalidCardError, InvalidRankError, InvalidSuitError


@pytest.mark.parametrize("suit", STANDARD_SUITS)
@pytest.mark.parametrize("rank", STANDARD_RANKS)
def test_display_standard_cards(suit: Suit, rank: Rank) -> None:
    card = Card(suit=suit, rank=rank)

    assert display(card) == f"{RANK_NAMES[rank]} of {SUIT_NAMES[suit]}"
    assert str(card) == display(card)
    assert card.is_valid


def test_display_known_names() -> None:
    assert display(Card(Suit.SPADES, Rank.ACE)) == "Ace of Spades"
    assert display(Card(Suit.HEARTS, Rank.JACK)) == "Jack of Hearts"
    assert display(Card(Suit.DIAMONDS, Rank.TEN)) == "Ten of Diamonds"
    assert display(Card(Suit.CLUBS, Rank.KING)) == "King of Clubs"


@pytest.mark.parametrize("rank", [0, 1, 7, 13, 14, 99])
def test_joker_suit_always_displays_joker(rank: int) -> None:
    card = Card(suit=Suit.JOKER, rank=rank)

    assert display(card) == "Joker"
    assert card.is_joker
    assert card.is_valid


def test_joker_constant() -> None:
    assert JOKER == Card(Suit.JOKER, Rank.JOKER)
    assert str(JOKER) == "Joker"


@pytest.mark.parametrize("rank", [Rank.JOKER, 14, -1])
def test_display_reports_invalid_rank(rank: int) -> None:
    card = Card(suit=Suit.CLUBS, rank=rank)

    assert display(card) == f"invalid card value: {int(rank)}"
    assert not card.is_valid


@pytest.mark.parametrize("suit", [5, 9, -1])
def test_display_reports_invalid_suit(suit: int) -> None:
    card = Card(suit=suit, rank=Rank.QUEEN)

    assert display(card) == f"invalid card suit: {suit}"
    assert not card.is_valid


def test_rank_is_checked_before_suit() -> None:
    card = Card(suit=7, rank=20)

    with pytest.raises(InvalidRankError) as excinfo:
        check_card(card)
    assert excinfo.value.value == 20
    assert display(card) == "invalid card value: 20"


def test_check_card_raises_suit_error() -> None:
    with pytest.raises(InvalidSuitError) as excinfo:
        check_card(Card(suit=6, rank=Rank.TWO))

    assert isinstance(excinfo.value, InvalidCardError)
    assert isinstance(excinfo.value, ValueError)
    assert excinfo.value.value == 6


def test_check_card_accepts_valid_cards() -> None:
    check_card(Card(Suit.HEARTS, Rank.ACE))
    check_card(JOKER)


def test_display_is_idempotent() -> None:
    card = Card(Suit.DIAMONDS, Rank.SEVEN)

    assert display(card) == display(card)


def test_cards_are_immutable() -> None:
    card = Card(Suit.SPADES, Rank.ACE)

    with pytest.raises(dataclasses.FrozenInstanceError):
        card.rank = Rank.KING  # type: ignore[misc]


def test_name_tables_are_read_only() -> None:
    with pytest.raises(TypeError):
        SUIT_NAMES[Suit.SPADES] = "Swords"  # type: ignore[index]
    assert len(RANK_NAMES) == 13
    assert Rank.JOKER not in RANK_NAMES
