"""Matching rules for a single board pile."""

from __future__ import annotations

from typing import Final

from .stack import CardStack

__all__ = [
    "MATCH_SIZE",
    "MATCH_TOTALS",
    "is_match",
    "resolve",
    "resolve_all",
]

MATCH_SIZE: Final[int] = 3
MATCH_TOTALS: Final[frozenset[int]] = frozenset({10, 20, 30})


def is_match(total: int) -> bool:
    """Return ``True`` when ``total`` can be collected."""

    return total in MATCH_TOTALS


def _collect_front(hand: CardStack, board: CardStack, count: int) -> None:
    for _ in range(count):
        hand.push_back(board.pop_front())


def _collect_wrapped(hand: CardStack, board: CardStack, from_back: int) -> None:
    tail = [board.pop_back() for _ in range(from_back)]
    for card in reversed(tail):
        hand.push_back(card)
    _collect_front(hand, board, MATCH_SIZE - from_back)


def resolve(hand: CardStack, board: CardStack) -> bool:
    """Collect one run of three cards from ``board`` onto the back of ``hand``.

    The three oldest cards are tried first. Failing that, the newest cards
    replace the oldest ones one at a time (newest for the third card, then
    the two newest for the last two, and so on), which lets a run wrap from
    the top of the pile onto the cards resurfacing at its bottom. Cards taken
    from the back keep their dealing order in the hand and go in before the
    front cards.

    Returns ``True`` when cards were collected. ``hand`` and ``board`` are
    left untouched otherwise.
    """

    if len(board) < MATCH_SIZE:
        return False

    front = board.peek_front(MATCH_SIZE)
    total = sum(front)
    if is_match(total):
        _collect_front(hand, board, MATCH_SIZE)
        return True

    back = board.peek_back(MATCH_SIZE)
    for idx, (old, new) in enumerate(zip(reversed(front), back)):
        total = total - old + new
        if is_match(total):
            _collect_wrapped(hand, board, idx + 1)
            return True

    return False


def resolve_all(hand: CardStack, board: CardStack) -> int:
    """Resolve ``board`` until no run matches, returning the match count."""

    matches = 0
    while resolve(hand, board):
        matches += 1
    return matches
