"""Card values and deck assembly utilities."""

from __future__ import annotations

from typing import Final, List

MIN_VALUE: Final[int] = 1
MAX_VALUE: Final[int] = 10
DECK_COPIES: Final[int] = 4
EXTRA_TENS: Final[int] = 3
DECK_SIZE: Final[int] = DECK_COPIES * (MAX_VALUE - MIN_VALUE + 1 + EXTRA_TENS)

__all__ = [
    "DECK_COPIES",
    "DECK_SIZE",
    "EXTRA_TENS",
    "MAX_VALUE",
    "MIN_VALUE",
    "full_deck",
    "validate_card",
]


def validate_card(value: int) -> int:
    """Return ``value`` unchanged when it is a legal card value."""

    if not isinstance(value, int) or isinstance(value, bool):
        raise ValueError(f"card value must be an int, got {value!r}")
    if not MIN_VALUE <= value <= MAX_VALUE:
        raise ValueError(f"card value {value} outside {MIN_VALUE}..{MAX_VALUE}")
    return value


def full_deck() -> List[int]:
    """Return a deterministic ordering of all cards.

    Face cards count as ten, so every copy of the ranks is followed by three
    additional tens.
    """

    cards: List[int] = []
    for _ in range(DECK_COPIES):
        cards.extend(range(MIN_VALUE, MAX_VALUE + 1))
        cards.extend([MAX_VALUE] * EXTRA_TENS)
    return cards
