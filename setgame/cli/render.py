"""Rendering helpers dedicated to the CLI experience."""

from __future__ import annotations

from typing import Sequence

from rich.console import RenderableType
from rich.panel import Panel

from ..cards import Card
from ..session import GameSession
from .views import TableView

_COLOR_STYLES = {
    "red": "red",
    "blue": "blue",
    "green": "green",
}

_SHAPE_SYMBOLS = {
    "rectangle": "▬",
    "diamond": "◆",
    "squiggle": "~",
}

_SHADING_STYLES = {
    "solid": "bold",
    "striped": "underline",
    "empty": "dim",
}


def format_card(card: Card) -> str:
    """Return a Rich-rendered label for ``card``."""

    color = _COLOR_STYLES.get(card.color, "white")
    shading = _SHADING_STYLES.get(card.shading, "")
    symbol = _SHAPE_SYMBOLS.get(card.shape, card.shape[:1].upper())
    style = f"{shading} {color}".strip()
    return f"[{style}]{symbol * card.shape_count}[/{style}] [dim]{card.shading}[/dim]"


def format_cards(cards: Sequence[Card]) -> str:
    return "  ".join(format_card(card) for card in cards)


def render_session(session: GameSession, *, title: str = "Set") -> RenderableType:
    """Return a Rich panel describing the table and the scores."""

    view = TableView(
        deck=session.deck,
        players=session.players,
        high_score=session.high_score.value,
        card_formatter=format_card,
    )
    return Panel(view.render(), title=title, padding=(0, 1), border_style="cyan")
