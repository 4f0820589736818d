"""Helpers for aggregating results over many simulated games."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable

import numpy as np

from .engine import GameResult
from .state import Outcome

__all__ = ["RoundRange", "SimulationStats"]


@dataclass(frozen=True, slots=True)
class RoundRange:
    """Fewest and most rounds seen for one outcome."""

    minimum: int
    maximum: int


@dataclass(slots=True)
class SimulationStats:
    """Mutable tracker that accumulates game results.

    Capped games are counted, but kept out of the round totals, the ranges
    and the histogram so they do not skew the averages.
    """

    games: int = 0
    wins: int = 0
    capped: int = 0
    total_rounds: int = 0
    _histogram: np.ndarray = field(
        default_factory=lambda: np.zeros(0, dtype=np.int64), repr=False
    )
    _win_min: int | None = field(default=None, repr=False)
    _win_max: int | None = field(default=None, repr=False)
    _loss_min: int | None = field(default=None, repr=False)
    _loss_max: int | None = field(default=None, repr=False)

    def record(self, result: GameResult) -> None:
        """Record ``result`` and update cumulative totals."""

        if result.rounds < 0:
            raise ValueError("rounds must not be negative")
        self.games += 1
        if result.won:
            self.wins += 1
        if result.outcome is Outcome.CAPPED:
            self.capped += 1
            return

        self.total_rounds += result.rounds
        self._bump_histogram(result.rounds, 1)
        if result.won:
            self._win_min = _min(self._win_min, result.rounds)
            self._win_max = _max(self._win_max, result.rounds)
        else:
            self._loss_min = _min(self._loss_min, result.rounds)
            self._loss_max = _max(self._loss_max, result.rounds)

    def record_all(self, results: Iterable[GameResult]) -> None:
        for result in results:
            self.record(result)

    def merge(self, other: "SimulationStats") -> None:
        """Fold the totals of ``other`` into this tracker."""

        self.games += other.games
        self.wins += other.wins
        self.capped += other.capped
        self.total_rounds += other.total_rounds
        if other._histogram.size:
            self._grow_histogram(other._histogram.size)
            self._histogram[: other._histogram.size] += other._histogram
        self._win_min = _min(self._win_min, other._win_min)
        self._win_max = _max(self._win_max, other._win_max)
        self._loss_min = _min(self._loss_min, other._loss_min)
        self._loss_max = _max(self._loss_max, other._loss_max)

    @property
    def losses(self) -> int:
        return self.games - self.wins

    @property
    def resolved(self) -> int:
        """Number of games that ended in a win or a loss."""

        return self.games - self.capped

    @property
    def win_rate(self) -> float:
        if not self.games:
            return 0.0
        return self.wins / self.games

    @property
    def average_rounds(self) -> float | None:
        if not self.resolved:
            return None
        return self.total_rounds / self.resolved

    @property
    def win_range(self) -> RoundRange | None:
        if self._win_min is None or self._win_max is None:
            return None
        return RoundRange(self._win_min, self._win_max)

    @property
    def loss_range(self) -> RoundRange | None:
        if self._loss_min is None or self._loss_max is None:
            return None
        return RoundRange(self._loss_min, self._loss_max)

    def histogram(self) -> np.ndarray:
        """Return game counts indexed by round count, trailing zeros trimmed."""

        nonzero = np.flatnonzero(self._histogram)
        if not nonzero.size:
            return np.zeros(0, dtype=np.int64)
        return self._histogram[: nonzero[-1] + 1].copy()

    def most_common_rounds(self) -> int | None:
        hist = self.histogram()
        if not hist.size:
            return None
        return int(np.argmax(hist))

    def _grow_histogram(self, size: int) -> None:
        if size <= self._histogram.size:
            return
        grown = np.zeros(max(size, self._histogram.size * 2), dtype=np.int64)
        grown[: self._histogram.size] = self._histogram
        self._histogram = grown

    def _bump_histogram(self, rounds: int, count: int) -> None:
        self._grow_histogram(rounds + 1)
        self._histogram[rounds] += count


def _min(current: int | None, value: int | None) -> int | None:
    if value is None:
        return current
    if current is None:
        return value
    return min(current, value)


def _max(current: int | None, value: int | None) -> int | None:
    if value is None:
        return current
    if current is None:
        return value
    return max(current, value)
