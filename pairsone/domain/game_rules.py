"""Seat and turn rules that are independent from HTTP and Redis.

Rule of thumb:
- OK: slot lookup, predicates, pure transformations of a game record.
- Not OK: touching Redis, FastAPI, the clock.
"""

import math
from typing import List, Optional

from pairsone.models.schema_models import GameSchema, PlayerSchema

NOT_STARTED_TURN = -1


def resolve_slot(players: List[PlayerSchema], player_id: str) -> Optional[int]:
    """Find the index at which to join the player.

    A slot already held by player_id (page reload) or the first slot that has
    not been joined, whichever comes first.

    Returns:
        Optional[int]: Slot index, None when the game is full for this player
    """
    for index, player in enumerate(players):
        if player.id == player_id or not player.joined:
            return index
    return None


def find_player(players: List[PlayerSchema], player_id: str) -> Optional[int]:
    for index, player in enumerate(players):
        if player.id == player_id:
            return index
    return None


def all_players_joined(players: List[PlayerSchema]) -> bool:
    return all(player.joined for player in players)


def any_player_online(game: GameSchema) -> bool:
    return any(player.online for player in game.players)


def next_turn(game: GameSchema) -> int:
    """Start the game once every seat is joined; never touch a running turn."""
    if game.turn == NOT_STARTED_TURN and all_players_joined(game.players):
        return 0
    return game.turn


def initial_turn(players: List[PlayerSchema]) -> int:
    return 0 if all_players_joined(players) else NOT_STARTED_TURN


def board_size(card_count: int) -> int:
    """Recover the board side from the number of cards.

    Odd boards hold one card less than n*n, rounding brings back n.
    """
    return round(math.sqrt(card_count))


def reset_counters(player: PlayerSchema) -> PlayerSchema:
    return player.model_copy(update={"score": 0, "turns": 0, "inaccurate_turns": 0})
