"""Typer entry-point wiring for the Set CLI."""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass, field

import typer
from rich import box
from rich.console import Console
from rich.table import Table

from .. import rules
from ..cards import Card
from ..deck import Deck, InvalidIndexError
from ..session import CheckResult, GameConfig, GameSession, NoSetResult
from .render import format_card, format_cards, render_session

app = typer.Typer(add_completion=False, rich_markup_mode="rich")
console = Console()

HELP_TEXT = (
    "Type three card numbers (e.g. [bold]1 5 9[/bold]) to claim a set, "
    "[bold]n[/bold] if you see no set, [bold]h[/bold] for a hint, "
    "[bold]p K[/bold] to hand the turn to player K and [bold]q[/bold] to quit."
)

_CHECK_MESSAGES = {
    CheckResult.CORRECT: "[green]Nice job![/green]",
    CheckResult.INCORRECT: "[red]Incorrect! Try again.[/red]",
    CheckResult.WRONG_COUNT: "[yellow]A set is exactly 3 cards.[/yellow]",
    CheckResult.GAME_OVER: "[bold green]That was the last set. Game over![/bold green]",
}

_NO_SET_MESSAGES = {
    NoSetResult.SET_PRESENT: "[red]Your guess was wrong, there IS a set.[/red]",
    NoSetResult.CARDS_ADDED: "[cyan]No set indeed. Three more cards dealt.[/cyan]",
    NoSetResult.REDEALT: "[cyan]No set on a full table. The table was redealt.[/cyan]",
    NoSetResult.GAME_OVER: "[bold green]No set and no cards left. Game over![/bold green]",
}


@dataclass(slots=True)
class Command:
    """A parsed line of player input."""

    action: str
    arguments: list[int] = field(default_factory=list)


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S",
    )


def _parse_command(text: str) -> Command:
    """Translate a prompt line into a ``Command``.

    Card and player numbers are typed 1-based and returned 0-based.
    """

    tokens = text.replace(",", " ").split()
    if not tokens:
        raise ValueError("empty input")
    head = tokens[0].lower()
    if head in {"q", "quit"}:
        return Command("quit")
    if head in {"h", "hint"}:
        return Command("hint")
    if head in {"n", "none", "noset"}:
        return Command("no_set")
    if head in {"p", "player"}:
        if len(tokens) != 2 or not tokens[1].isdigit():
            raise ValueError("usage: p <player number>")
        return Command("player", [int(tokens[1]) - 1])
    if all(token.isdigit() for token in tokens):
        return Command("claim", [int(token) - 1 for token in tokens])
    raise ValueError(f"unknown command '{text.strip()}'")


def _apply_command(game: GameSession, command: Command) -> str:
    """Run ``command`` against ``game`` and return the message to show."""

    if command.action == "hint":
        card = game.hint()
        if card is None:
            return "Have you tried the [bold]no set[/bold] command?"
        return f"A set contains the {card.label()} card"
    if command.action == "no_set":
        return _NO_SET_MESSAGES[game.no_set()]
    if command.action == "player":
        game.select_player(command.arguments[0])
        return f"Player {command.arguments[0] + 1} is now claiming sets"
    if command.action == "claim":
        return _CHECK_MESSAGES[game.check_set(command.arguments)]
    raise ValueError(f"unsupported action '{command.action}'")


def _render_final_scores(game: GameSession) -> Table:
    """Return a Rich table describing the outcome of a game."""

    table = Table(title="Final Scores", box=box.SIMPLE_HEAVY)
    table.add_column("Player", justify="center")
    table.add_column("Sets", justify="right")
    players = game.players
    if players is None:
        return table
    leaders = set(players.leaders())
    for idx, score in enumerate(players.scores):
        label = f"P{idx + 1}"
        if idx in leaders and score > 0:
            label = f"[bold green]{label}[/bold green]"
        table.add_row(label, str(score))
    return table


@app.command()
def play(
    players: int = typer.Option(1, min=1, max=4, help="Number of players sharing the table."),
    seed: int | None = typer.Option(None, help="Random seed for reproducible games (omit for randomness)."),
    verbose: bool = typer.Option(False, "--verbose", help="Log engine activity to stderr."),
) -> None:
    """Play an interactive game of Set in the terminal."""

    _configure_logging(verbose)
    game = GameSession(GameConfig(seed=seed))
    game.start(players)
    console.print(HELP_TEXT)

    while True:
        console.print(render_session(game))
        try:
            text = console.input("[bold cyan]>[/bold cyan] ")
        except EOFError:
            break
        try:
            command = _parse_command(text)
        except ValueError as exc:
            console.print(f"[red]{exc}[/red]")
            continue
        if command.action == "quit":
            break
        try:
            message = _apply_command(game, command)
        except (InvalidIndexError, ValueError) as exc:
            console.print(f"[red]{exc}[/red]")
            continue
        console.print(message)
        if game.is_over:
            console.print(render_session(game))
            break

    console.print(_render_final_scores(game))
    game.quit()
    console.print(f"[cyan]High score: {game.high_score.value}[/cyan]")


@app.command()
def deal(
    count: int = typer.Option(12, min=3, help="Number of cards to deal."),
    seed: int | None = typer.Option(None, help="Random seed for the shuffle."),
) -> None:
    """Shuffle a fresh deck, deal cards and show the first set found."""

    deck = Deck.canonical()
    deck.shuffle(random.Random(seed))
    dealt = deck.deal(count)
    if len(dealt) < count:
        console.print(f"[yellow]Only {len(dealt)} card(s) available.[/yellow]")

    table = Table(title="Dealt Cards", box=box.SIMPLE_HEAVY)
    table.add_column("#", justify="right")
    table.add_column("Card", justify="left")
    table.add_column("Code", justify="left")
    for idx, card in enumerate(dealt, start=1):
        table.add_row(str(idx), format_card(card), card.code)
    console.print(table)

    found = deck.set_exists()
    if found:
        console.print(f"First set: {format_cards(found)}  ({' '.join(card.code for card in found)})")
    else:
        console.print("[yellow]No set among the dealt cards.[/yellow]")


@app.command()
def solve(
    codes: list[str] = typer.Argument(..., help="Cards written as count-color-shading-shape."),
) -> None:
    """List every set among the given cards."""

    try:
        cards = [Card.from_code(code) for code in codes]
    except ValueError as exc:
        raise typer.BadParameter(str(exc)) from exc

    found = rules.find_all_sets(cards)
    if not found:
        console.print("[yellow]No set among the given cards.[/yellow]")
        return
    for triple in found:
        console.print(" ".join(card.code for card in triple))
    console.print(f"[cyan]{len(found)} set(s) found.[/cyan]")


def main() -> None:
    """Entry-point for ``python -m setgame.cli``."""

    app()


if __name__ == "__main__":  # pragma: no cover - CLI invocation
    main()
