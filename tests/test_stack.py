"""Tests covering the card stack and deck assembly."""

from __future__ import annotations

import random
from collections import Counter

import pytest

from tentwenty import cards
from tentwenty.stack import CardStack, EmptyStackError


def test_full_deck_composition() -> None:
    deck = CardStack.full_deck()
    counts = Counter(deck)

    assert len(deck) == 52
    assert counts[10] == 16
    for value in range(1, 10):
        assert counts[value] == 4


def test_full_deck_order_is_deterministic() -> None:
    assert CardStack.full_deck().to_list()[:13] == [1, 2, 3, 4, 5, 6, 7, 8, 9, 10, 10, 10, 10]
    assert CardStack.full_deck() == CardStack.full_deck()


def test_push_and_pop_at_both_ends() -> None:
    stack = CardStack.empty()
    stack.push_back(2)
    stack.push_front(1)
    stack.push_back(3)

    assert stack.to_list() == [1, 2, 3]
    assert stack.pop_front() == 1
    assert stack.pop_back() == 3
    assert len(stack) == 1


@pytest.mark.parametrize("method", ["pop_front", "pop_back"])
def test_pop_from_empty_stack_raises(method: str) -> None:
    stack = CardStack.empty()
    with pytest.raises(EmptyStackError):
        getattr(stack, method)()


def test_empty_stack_error_is_index_error() -> None:
    assert issubclass(EmptyStackError, IndexError)


def test_peek_does_not_mutate() -> None:
    stack = CardStack([1, 2, 3, 4, 5])

    assert stack.peek_front(3) == [1, 2, 3]
    assert stack.peek_back(2) == [5, 4]
    assert stack.peek_back(10) == [5, 4, 3, 2, 1]
    assert stack.to_list() == [1, 2, 3, 4, 5]


@pytest.mark.parametrize("seed", [0, 1, 42, 2024])
def test_shuffle_preserves_cards(seed: int) -> None:
    deck = CardStack.full_deck()
    shuffled = deck.shuffle(random.Random(seed))

    assert sorted(shuffled) == sorted(deck)
    assert deck == CardStack.full_deck()


def test_shuffle_is_reproducible_with_seed() -> None:
    first = CardStack.full_deck().shuffle(random.Random(99))
    second = CardStack.full_deck().shuffle(random.Random(99))

    assert first == second
    assert first != CardStack.full_deck()


def test_shuffle_spreads_cards_over_positions() -> None:
    rng = random.Random(5)
    first_cards = Counter(CardStack(range(1, 5)).shuffle(rng).pop_front() for _ in range(4000))

    assert set(first_cards) == {1, 2, 3, 4}
    for count in first_cards.values():
        assert 850 < count < 1150


def test_from_cards_rejects_invalid_values() -> None:
    assert CardStack.from_cards([1, 10]).to_list() == [1, 10]
    with pytest.raises(ValueError):
        CardStack.from_cards([0])
    with pytest.raises(ValueError):
        CardStack.from_cards([11])


def test_deck_size_constant_matches_deck() -> None:
    assert cards.DECK_SIZE == len(cards.full_deck()) == 52


def test_full_deck_returns_fresh_stacks() -> None:
    first = CardStack.full_deck()
    first.pop_back()

    assert len(first) == 51
    assert len(CardStack.full_deck()) == cards.DECK_SIZE
