"""Typer entry-point wiring for the 10-20-30 CLI."""

from __future__ import annotations

import random

import typer
from rich.console import Console
from rich.progress import BarColumn, MofNCompleteColumn, Progress, TextColumn, TimeElapsedColumn

from .. import engine, simulation
from ..log_utils import setup_logging
from ..state import GameConfig, GameState
from .render import render_state, render_summary

app = typer.Typer(add_completion=False, rich_markup_mode="rich")
console = Console()


def _configure_logging(level: str | None) -> None:
    try:
        setup_logging(level)
    except ValueError as exc:
        raise typer.BadParameter(str(exc), param_hint="--log-level") from exc


def _build_config(piles: int, max_passes: int) -> GameConfig:
    try:
        return GameConfig(num_piles=piles, max_passes=max_passes)
    except ValueError as exc:
        raise typer.BadParameter(str(exc)) from exc


@app.command()
def simulate(
    games: int = typer.Option(100000, min=1, help="Number of games to simulate."),
    seed: int | None = typer.Option(None, help="Random seed for reproducible runs (omit for randomness)."),
    workers: int = typer.Option(1, min=1, help="Worker processes sharing the games."),
    piles: int = typer.Option(6, min=1, help="Number of piles dealt on the table."),
    max_passes: int = typer.Option(10000, min=1, help="Passes over the piles before a game is abandoned."),
    progress: bool = typer.Option(True, "--progress/--no-progress", help="Show a progress bar."),
    log_level: str | None = typer.Option(
        None, help="Logging level (DEBUG, INFO, WARNING, ERROR). Defaults to $TENTWENTY_LOG_LEVEL or WARNING."
    ),
) -> None:
    """Estimate the win rate and game length over many games."""

    _configure_logging(log_level)
    config = _build_config(piles, max_passes)

    if not progress:
        report = simulation.run_simulation(games, seed=seed, config=config, workers=workers)
    else:
        with Progress(
            TextColumn("[cyan]Simulating[/cyan]"),
            BarColumn(),
            MofNCompleteColumn(),
            TimeElapsedColumn(),
            console=console,
            transient=True,
        ) as bar:
            task = bar.add_task("games", total=games)
            report = simulation.run_simulation(
                games,
                seed=seed,
                config=config,
                workers=workers,
                progress=lambda done: bar.update(task, completed=done),
            )

    console.print(render_summary(report.stats, seed=report.seed))


@app.command()
def play(
    seed: int | None = typer.Option(None, help="Random seed for the shuffle (omit for randomness)."),
    piles: int = typer.Option(6, min=1, help="Number of piles dealt on the table."),
    max_passes: int = typer.Option(10000, min=1, help="Passes over the piles before a game is abandoned."),
    log_level: str | None = typer.Option(
        None, help="Logging level (DEBUG, INFO, WARNING, ERROR). Defaults to $TENTWENTY_LOG_LEVEL or WARNING."
    ),
) -> None:
    """Play a single game and show how the table ended up."""

    _configure_logging(log_level)
    config = _build_config(piles, max_passes)

    final: list[GameState] = []
    result = engine.play_game(random.Random(seed), config, observer=final.append)
    console.print(render_state(final[-1], result, title=f"Game (seed {seed})" if seed is not None else "Game"))


def main() -> None:
    """Entry-point for ``python -m tentwenty.cli``."""

    app()


if __name__ == "__main__":  # pragma: no cover - CLI invocation
    main()
