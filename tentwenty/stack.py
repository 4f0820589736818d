"""Double-ended card piles used for the hand and the board."""

from __future__ import annotations

import random
from collections import deque
from itertools import islice
from typing import Iterable, Iterator, List

from . import cards

__all__ = ["CardStack", "EmptyStackError"]


class EmptyStackError(IndexError):
    """Raised when a card is popped from an empty stack."""


class CardStack:
    """Ordered pile of card values.

    The front holds the oldest card (bottom of a board pile, top of the hand)
    and the back holds the newest one.
    """

    __slots__ = ("_cards",)

    def __init__(self, cards_iter: Iterable[int] = ()) -> None:
        self._cards: deque[int] = deque(cards_iter)

    @classmethod
    def empty(cls) -> "CardStack":
        return cls()

    @classmethod
    def full_deck(cls) -> "CardStack":
        """Return an unshuffled stack holding the whole deck."""

        return cls(cards.full_deck())

    @classmethod
    def from_cards(cls, values: Iterable[int]) -> "CardStack":
        """Build a stack from arbitrary values, validating each card."""

        return cls(cards.validate_card(value) for value in values)

    def __len__(self) -> int:
        return len(self._cards)

    def __iter__(self) -> Iterator[int]:
        return iter(self._cards)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, CardStack):
            return NotImplemented
        return self._cards == other._cards

    def __repr__(self) -> str:
        return f"CardStack({list(self._cards)!r})"

    def push_front(self, card: int) -> None:
        self._cards.appendleft(card)

    def push_back(self, card: int) -> None:
        self._cards.append(card)

    def pop_front(self) -> int:
        if not self._cards:
            raise EmptyStackError("pop_front: card stack empty")
        return self._cards.popleft()

    def pop_back(self) -> int:
        if not self._cards:
            raise EmptyStackError("pop_back: card stack empty")
        return self._cards.pop()

    def peek_front(self, count: int) -> List[int]:
        """Return up to ``count`` cards from the front, oldest first."""

        return list(islice(self._cards, count))

    def peek_back(self, count: int) -> List[int]:
        """Return up to ``count`` cards from the back, newest first."""

        return list(islice(reversed(self._cards), count))

    def to_list(self) -> List[int]:
        return list(self._cards)

    def shuffle(self, rng: random.Random) -> "CardStack":
        """Return a new stack holding the same cards in a random order."""

        pool = list(self._cards)
        rng.shuffle(pool)
        return CardStack(pool)
