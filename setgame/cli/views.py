"""Composable view primitives for the Set CLI."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable

from rich import box
from rich.console import Group, RenderableType
from rich.panel import Panel
from rich.table import Table

from ..cards import Card
from ..deck import Deck
from ..scoreboard import Players

CARDS_PER_ROW = 3


@dataclass(slots=True)
class TableView:
    """Renderable summarising the dealt cards and the scores."""

    deck: Deck
    players: Players | None
    high_score: int
    card_formatter: Callable[[Card], str]

    def _cell(self, index: int) -> str:
        card = self.deck.dealt[index]
        label = f"[bold]{index + 1:>2}[/bold] {self.card_formatter(card)}"
        if index in self.deck.choices:
            return f"[reverse]{label}[/reverse]"
        return label

    def _cards_table(self) -> Table:
        table = Table(box=box.ROUNDED, expand=True, show_header=False)
        for _ in range(CARDS_PER_ROW):
            table.add_column(justify="left")
        dealt_count = len(self.deck.dealt)
        for start in range(0, dealt_count, CARDS_PER_ROW):
            row = [self._cell(idx) for idx in range(start, min(start + CARDS_PER_ROW, dealt_count))]
            row.extend("" for _ in range(CARDS_PER_ROW - len(row)))
            table.add_row(*row)
        return table

    def _metadata_panel(self) -> Panel:
        grid = Table.grid(expand=True)
        grid.add_column(justify="left")
        grid.add_row(f"[cyan]Deck[/cyan]: {len(self.deck.deal_pile)} card(s)")
        grid.add_row(f"[cyan]Table[/cyan]: {len(self.deck.dealt)} card(s)")
        grid.add_row(f"[cyan]Discarded[/cyan]: {len(self.deck.discarded)} card(s)")
        grid.add_row(f"[cyan]High score[/cyan]: {self.high_score}")
        return Panel(grid, title="Table State", box=box.SQUARE, border_style="blue")

    def _scores_table(self, players: Players) -> Table:
        table = Table(box=box.MINIMAL, expand=True)
        table.add_column("Player", justify="left", style="bold")
        table.add_column("Score", justify="right")
        for idx, score in enumerate(players.scores):
            name = f"P{idx + 1}"
            if idx == players.chosen:
                name = f"[bold yellow]{name}[/bold yellow]"
            table.add_row(name, str(score))
        table.caption = f"{players.sets_found} set(s) found"
        return table

    def render(self) -> RenderableType:
        components: list[RenderableType] = [self._cards_table(), self._metadata_panel()]
        if self.players is not None:
            components.append(self._scores_table(self.players))
        return Group(*components)
