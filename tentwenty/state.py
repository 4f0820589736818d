"""Core game state data structures for 10-20-30."""

from __future__ import annotations

import random
from dataclasses import dataclass, field
from enum import Enum
from typing import List

from . import cards
from .stack import CardStack

__all__ = [
    "DealError",
    "GameConfig",
    "GameState",
    "InvariantError",
    "Outcome",
    "deal_new_game",
]


class DealError(RuntimeError):
    """Raised when a card is dealt from a hand that cannot supply it."""


class InvariantError(RuntimeError):
    """Raised when cards appear or vanish during a game."""


class Outcome(str, Enum):
    """Terminal states of a single game."""

    WON = "won"
    LOST = "lost"
    CAPPED = "capped"


@dataclass(frozen=True, slots=True)
class GameConfig:
    """Runtime configuration for a single game."""

    num_piles: int = 6
    max_passes: int = 10000

    def __post_init__(self) -> None:
        if self.num_piles <= 0:
            raise ValueError("num_piles must be positive")
        if self.num_piles >= cards.DECK_SIZE:
            raise ValueError("num_piles must leave cards in the hand")
        if self.max_passes <= 0:
            raise ValueError("max_passes must be positive")

    @property
    def round_cap(self) -> int:
        """Number of board turns after which a game is abandoned."""

        return self.max_passes * self.num_piles


@dataclass(slots=True)
class GameState:
    """Mutable state of one game: the hand, the piles and the turn counter."""

    hand: CardStack
    boards: List[CardStack]
    rounds: int = 0
    config: GameConfig = field(default_factory=GameConfig)

    def total_cards(self) -> int:
        return len(self.hand) + sum(len(board) for board in self.boards)

    def is_won(self) -> bool:
        return len(self.hand) == cards.DECK_SIZE

    def is_lost(self) -> bool:
        return len(self.hand) == 0

    def check_conservation(self) -> None:
        """Raise :class:`InvariantError` if the deck is no longer complete."""

        total = self.total_cards()
        if total != cards.DECK_SIZE:
            raise InvariantError(
                f"expected {cards.DECK_SIZE} cards in play after round {self.rounds}, found {total}"
            )

    def draw(self) -> int:
        """Take the next card from the front of the hand."""

        if not len(self.hand):
            raise DealError(f"hand empty while dealing in round {self.rounds}")
        return self.hand.pop_front()


def deal_new_game(config: GameConfig, rng: random.Random) -> GameState:
    """Shuffle a fresh deck and deal one card onto every pile."""

    hand = CardStack.full_deck().shuffle(rng)
    if len(hand) < config.num_piles:
        raise DealError("insufficient cards in deck for requested pile count")

    boards = [CardStack.empty() for _ in range(config.num_piles)]
    game_state = GameState(hand=hand, boards=boards, config=config)
    for board in boards:
        board.push_front(game_state.draw())
    return game_state
