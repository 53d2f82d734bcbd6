"""Card set rules that are independent from HTTP and Redis.

Note that the board can only be a square (n*n). For an odd side length one
cell stays empty; there is no blank card.
"""

import numpy as np

from pairsone.domain.errors import InsufficientThemeValues
from pairsone.models.schema_models import CardSchema


def pair_count(board_size: int) -> int:
    """Return how many pairs fit on a board of the given side length."""
    return (board_size * board_size) // 2


def generate_cards(
    board_size: int, cards_available: int, rng: np.random.Generator
) -> list[CardSchema]:
    """Return a shuffled deck where every value appears exactly twice.

    Args:
        board_size (int): Side length of the board
        cards_available (int): Number of distinct values the theme provides
        rng (np.random.Generator): Random source

    Returns:
        list[CardSchema]: floor(board_size**2 / 2) * 2 cards
    """
    pairs = pair_count(board_size)
    if cards_available < pairs:
        raise InsufficientThemeValues(pairs, cards_available)
    if pairs == 0:
        return []

    card_values = rng.choice(np.arange(1, cards_available + 1), size=pairs, replace=False)
    double_values = np.concatenate([card_values, card_values])
    rng.shuffle(double_values)
    return [CardSchema(value=int(value)) for value in double_values]
