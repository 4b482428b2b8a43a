"""Rendering helpers dedicated to the CLI experience."""

from __future__ import annotations

from collections import Counter
from typing import Sequence

from rich import box
from rich.console import RenderableType
from rich.panel import Panel
from rich.table import Table

from ..cards import Card, Suit, display

_SUIT_STYLES = {
    Suit.SPADES: ("♠", "cyan"),
    Suit.DIAMONDS: ("♦", "magenta"),
    Suit.CLUBS: ("♣", "green"),
    Suit.HEARTS: ("♥", "red"),
    Suit.JOKER: ("🃏", "yellow"),
}


def format_card(card: Card) -> str:
    """Return a Rich-rendered label for ``card``."""

    if not card.is_valid:
        return f"[bold red]{display(card)}[/bold red]"
    symbol, color = _SUIT_STYLES[Suit(card.suit)]
    return f"[{color}]{symbol} {display(card)}[/{color}]"


def render_summary(cards: Sequence[Card], title: str = "Deck") -> RenderableType:
    """Return a panel counting the cards of each suit in ``cards``."""

    counts = Counter(card.suit for card in cards)
    table = Table(box=box.SIMPLE)
    table.add_column("Suit", justify="left")
    table.add_column("Cards", justify="right")
    for suit in Suit:
        if counts.get(suit):
            symbol, color = _SUIT_STYLES[suit]
            table.add_row(f"[{color}]{symbol} {suit.name.title()}[/{color}]", str(counts[suit]))
    table.add_row("[bold]Total[/bold]", f"[bold]{len(cards)}[/bold]")
    return Panel(table, title=title, padding=(0, 1), border_style="cyan")
