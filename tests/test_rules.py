"""Tests covering the pile matching rules."""

from __future__ import annotations

import random

import pytest

from tentwenty import rules
from tentwenty.stack import CardStack


@pytest.mark.parametrize(
    ("board_cards", "expected_hand"),
    [
        ([5, 4, 1], [5, 4, 1]),
        ([10, 10, 10], [10, 10, 10]),
        ([10, 5, 5], [10, 5, 5]),
        ([6, 10, 10], []),
        ([1, 2, 3, 5, 6, 7], [7, 1, 2]),
        ([1, 9, 3, 5, 2, 7], [2, 7, 1]),
        ([1, 9, 3, 10, 3, 7], [10, 3, 7]),
        ([10, 10, 1, 2, 10], [10, 10, 10]),
        ([1, 2, 3, 5, 5, 10], [5, 5, 10]),
    ],
)
def test_resolve_collects_expected_cards(board_cards: list[int], expected_hand: list[int]) -> None:
    hand = CardStack.empty()
    board = CardStack(board_cards)

    assert rules.resolve(hand, board) == bool(expected_hand)
    assert hand.to_list() == expected_hand


@pytest.mark.parametrize(
    ("board_cards", "expected_board"),
    [
        ([5, 4, 1], []),
        ([1, 2, 3, 5, 6, 7], [3, 5, 6]),
        ([1, 9, 3, 5, 2, 7], [9, 3, 5]),
        ([1, 9, 3, 10, 3, 7], [1, 9, 3]),
        ([10, 10, 1, 2, 10], [1, 2]),
    ],
)
def test_resolve_leaves_remaining_cards_in_order(board_cards: list[int], expected_board: list[int]) -> None:
    board = CardStack(board_cards)
    rules.resolve(CardStack.empty(), board)

    assert board.to_list() == expected_board


def test_no_match_leaves_hand_and_board_unchanged() -> None:
    hand = CardStack([4, 4])
    board = CardStack([6, 10, 10])

    assert not rules.resolve(hand, board)
    assert hand.to_list() == [4, 4]
    assert board.to_list() == [6, 10, 10]


@pytest.mark.parametrize("board_cards", [[], [10], [5, 5]])
def test_short_boards_never_match(board_cards: list[int]) -> None:
    board = CardStack(board_cards)
    hand = CardStack.empty()

    assert not rules.resolve(hand, board)
    assert board.to_list() == board_cards
    assert len(hand) == 0


def test_collected_cards_go_to_back_of_hand() -> None:
    hand = CardStack([7, 8])
    board = CardStack([5, 4, 1, 9])

    assert rules.resolve(hand, board)
    assert hand.to_list() == [7, 8, 5, 4, 1]
    assert board.to_list() == [9]


def test_three_card_board_without_front_match_never_wraps() -> None:
    board = CardStack([1, 2, 4])

    assert not rules.resolve(CardStack.empty(), board)
    assert board.to_list() == [1, 2, 4]


def test_four_card_board_can_take_all_three_from_back() -> None:
    hand = CardStack.empty()
    board = CardStack([9, 2, 3, 5])

    assert rules.resolve(hand, board)
    assert hand.to_list() == [2, 3, 5]
    assert board.to_list() == [9]


@pytest.mark.parametrize("seed", range(60))
def test_resolve_on_shuffled_deck_collects_matching_total(seed: int) -> None:
    board = CardStack.full_deck().shuffle(random.Random(seed))
    hand = CardStack.empty()

    if rules.resolve(hand, board):
        assert len(hand) == 3
        assert sum(hand) in rules.MATCH_TOTALS
        assert len(board) == 49
    else:
        assert len(hand) == 0
        assert len(board) == 52


def test_resolve_is_deterministic() -> None:
    board_cards = [1, 9, 3, 5, 2, 7]
    outcomes = []
    for _ in range(3):
        hand = CardStack.empty()
        board = CardStack(board_cards)
        outcomes.append((rules.resolve(hand, board), hand.to_list(), board.to_list()))

    assert outcomes[0] == outcomes[1] == outcomes[2]


def test_resolve_all_counts_matches() -> None:
    hand = CardStack.empty()
    board = CardStack([5, 4, 1, 10, 10, 10, 2])

    assert rules.resolve_all(hand, board) == 2
    assert hand.to_list() == [5, 4, 1, 10, 10, 10]
    assert board.to_list() == [2]


@pytest.mark.parametrize(("total", "expected"), [(10, True), (20, True), (30, True), (15, False), (0, False)])
def test_is_match(total: int, expected: bool) -> None:
    assert rules.is_match(total) is expected
