"""Rendering helpers dedicated to the CLI experience."""

from __future__ import annotations

from typing import Iterable

from rich import box
from rich.console import RenderableType
from rich.panel import Panel
from rich.table import Table

from ..engine import GameResult
from ..scoreboard import RoundRange, SimulationStats
from ..state import GameState, Outcome

_OUTCOME_STYLES = {
    Outcome.WON: "bold green",
    Outcome.LOST: "red",
    Outcome.CAPPED: "yellow",
}


def format_card(value: int) -> str:
    """Return a Rich-rendered label for a card value."""

    if value == 10:
        return "[bold]10[/bold]"
    return str(value)


def format_cards(values: Iterable[int]) -> str:
    labels = [format_card(value) for value in values]
    return " ".join(labels) if labels else "[dim]empty[/dim]"


def format_outcome(outcome: Outcome) -> str:
    style = _OUTCOME_STYLES[outcome]
    return f"[{style}]{outcome.value}[/{style}]"


def _format_range(value: RoundRange | None) -> str:
    if value is None:
        return "n/a"
    return f"{value.minimum} .. {value.maximum}"


def render_summary(stats: SimulationStats, *, seed: int | None = None) -> Table:
    """Return a Rich table describing the aggregated simulation results."""

    table = Table(title="10-20-30 Simulation", box=box.SIMPLE_HEAVY)
    table.add_column("Metric", justify="left")
    table.add_column("Value", justify="right")

    average = stats.average_rounds
    mode = stats.most_common_rounds()

    if seed is not None:
        table.add_row("Seed", str(seed))
    table.add_row("Games", str(stats.games))
    table.add_row("Wins", f"[bold green]{stats.wins}[/bold green]")
    table.add_row("Win rate", f"{stats.win_rate:.2%}")
    table.add_row("Capped", str(stats.capped))
    table.add_row("Average rounds", "n/a" if average is None else f"{average:.1f}")
    table.add_row("Won in rounds", _format_range(stats.win_range))
    table.add_row("Lost in rounds", _format_range(stats.loss_range))
    table.add_row("Most common length", "n/a" if mode is None else str(mode))
    return table


def render_state(game_state: GameState, result: GameResult, *, title: str = "Final Table") -> RenderableType:
    """Return a Rich panel describing the hand and the piles."""

    grid = Table.grid(expand=True, padding=(0, 1))
    grid.add_column(justify="left", style="cyan")
    grid.add_column(justify="left")

    grid.add_row("Outcome", f"{format_outcome(result.outcome)} after {result.rounds} rounds")
    grid.add_row("Hand", f"{len(game_state.hand)} cards")
    for idx, board in enumerate(game_state.boards):
        grid.add_row(f"Pile {idx + 1}", format_cards(board))

    return Panel(grid, title=title, padding=(0, 1), border_style="cyan", box=box.ROUNDED)
