"""Tests for the card set generator."""

from collections import Counter

import numpy as np
import pytest

from pairsone.domain.card_rules import generate_cards, pair_count
from pairsone.domain.errors import InsufficientThemeValues


@pytest.mark.parametrize("board_size", [1, 2, 3, 4, 5, 6])
def test_every_value_appears_exactly_twice(board_size: int) -> None:
    cards = generate_cards(board_size, 32, np.random.default_rng(7))

    assert len(cards) == (board_size * board_size // 2) * 2
    counts = Counter(card.value for card in cards)
    assert all(count == 2 for count in counts.values())
    assert len(counts) == pair_count(board_size)


def test_values_are_drawn_from_theme_pool() -> None:
    cards = generate_cards(6, 20, np.random.default_rng(3))

    assert all(1 <= card.value <= 20 for card in cards)


def test_pool_exactly_large_enough_uses_every_value() -> None:
    cards = generate_cards(4, 8, np.random.default_rng(11))

    assert sorted({card.value for card in cards}) == list(range(1, 9))


def test_odd_board_leaves_one_cell_empty() -> None:
    assert len(generate_cards(3, 32, np.random.default_rng(0))) == 8
    assert generate_cards(1, 0, np.random.default_rng(0)) == []


def test_pool_too_small_raises() -> None:
    with pytest.raises(InsufficientThemeValues) as exc_info:
        generate_cards(4, 7, np.random.default_rng(0))

    assert exc_info.value.details == {"pair_count": 8, "cards_available": 7}


def test_deck_is_shuffled() -> None:
    rng = np.random.default_rng(42)
    orders = {tuple(card.value for card in generate_cards(4, 8, rng)) for _ in range(20)}

    assert len(orders) > 1
