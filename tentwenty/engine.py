"""Game loop driving a single 10-20-30 game to completion."""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass
from typing import Callable, Optional

from . import rules
from .state import GameConfig, GameState, Outcome, deal_new_game

__all__ = ["GameResult", "Observer", "play_game", "simulate_one_game"]

logger = logging.getLogger(__name__)

Observer = Callable[[GameState], None]


@dataclass(frozen=True, slots=True)
class GameResult:
    """Outcome of a single game."""

    won: bool
    rounds: int
    outcome: Outcome

    def as_tuple(self) -> tuple[bool, int]:
        return self.won, self.rounds


def _finish(game_state: GameState, outcome: Outcome) -> GameResult:
    logger.debug("game %s after %d rounds", outcome.value, game_state.rounds)
    return GameResult(
        won=outcome is Outcome.WON,
        rounds=game_state.rounds,
        outcome=outcome,
    )


def play_game(
    rng: random.Random,
    config: Optional[GameConfig] = None,
    *,
    observer: Optional[Observer] = None,
) -> GameResult:
    """Deal and play one game, returning how it ended.

    Each board turn counts as one round, including turns skipped because the
    pile was already cleared. The game is won once every card is back in the
    hand and lost once the hand runs dry. Games still running after
    ``config.max_passes`` passes over the piles end as ``Outcome.CAPPED``.
    """

    config = config or GameConfig()
    game_state = deal_new_game(config, rng)

    for _ in range(config.max_passes):
        for board in game_state.boards:
            game_state.rounds += 1

            if len(board):
                board.push_back(game_state.draw())
                rules.resolve_all(game_state.hand, board)

            game_state.check_conservation()
            if observer is not None:
                observer(game_state)

            if game_state.is_won():
                return _finish(game_state, Outcome.WON)
            if game_state.is_lost():
                return _finish(game_state, Outcome.LOST)

    return _finish(game_state, Outcome.CAPPED)


def simulate_one_game(
    rng: random.Random, config: Optional[GameConfig] = None
) -> tuple[bool, int]:
    """Play one game and return ``(won, rounds)``."""

    return play_game(rng, config).as_tuple()
