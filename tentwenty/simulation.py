"""Batch harness running many independent games."""

from __future__ import annotations

import logging
import random
from concurrent.futures import ProcessPoolExecutor, as_completed
from dataclasses import dataclass
from typing import Callable, Sequence

import numpy as np

from .engine import play_game
from .scoreboard import SimulationStats
from .state import GameConfig

__all__ = ["SimulationReport", "game_seeds", "run_simulation"]

logger = logging.getLogger(__name__)

ProgressCallback = Callable[[int], None]


@dataclass(frozen=True, slots=True)
class SimulationReport:
    """Summary of a batch of simulated games."""

    games: int
    seed: int
    config: GameConfig
    stats: SimulationStats


def game_seeds(seed: int, games: int) -> list[int]:
    """Return one independent 64-bit seed per game derived from ``seed``."""

    children = np.random.SeedSequence(seed).spawn(games)
    return [int(child.generate_state(1, dtype=np.uint64)[0]) for child in children]


def _run_chunk(seeds: Sequence[int], config: GameConfig) -> SimulationStats:
    stats = SimulationStats()
    for game_seed in seeds:
        stats.record(play_game(random.Random(game_seed), config))
    return stats


def _chunked(seeds: Sequence[int], parts: int) -> list[Sequence[int]]:
    size, extra = divmod(len(seeds), parts)
    chunks: list[Sequence[int]] = []
    start = 0
    for idx in range(parts):
        stop = start + size + (1 if idx < extra else 0)
        if stop > start:
            chunks.append(seeds[start:stop])
        start = stop
    return chunks


def run_simulation(
    games: int,
    *,
    seed: int | None = None,
    config: GameConfig | None = None,
    workers: int = 1,
    progress: ProgressCallback | None = None,
) -> SimulationReport:
    """Play ``games`` games and return the aggregated statistics.

    Every game shuffles with its own generator, so a given ``seed`` yields the
    same statistics whatever the number of ``workers``. ``progress`` receives
    the number of games completed so far.
    """

    if games <= 0:
        raise ValueError("games must be positive")
    if workers <= 0:
        raise ValueError("workers must be positive")

    config = config or GameConfig()
    if seed is None:
        seed = random.SystemRandom().getrandbits(64)
    seeds = game_seeds(seed, games)
    logger.info("simulating %d games with seed %d on %d worker(s)", games, seed, workers)

    stats = SimulationStats()
    if workers == 1:
        for done, game_seed in enumerate(seeds, start=1):
            stats.record(play_game(random.Random(game_seed), config))
            if progress is not None:
                progress(done)
    else:
        # Small chunks keep progress updates flowing while workers stay busy.
        chunks = _chunked(seeds, max(workers, min(games, workers * 8)))
        done = 0
        with ProcessPoolExecutor(max_workers=workers) as executor:
            futures = [executor.submit(_run_chunk, chunk, config) for chunk in chunks]
            for future in as_completed(futures):
                part = future.result()
                stats.merge(part)
                done += part.games
                if progress is not None:
                    progress(done)

    logger.info(
        "finished %d games: %d wins, %d capped", stats.games, stats.wins, stats.capped
    )
    return SimulationReport(games=games, seed=seed, config=config, stats=stats)
