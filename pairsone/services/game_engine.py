"""Game session use cases: create, join, leave, replay.

Every mutation is a full read-modify-write of the game record: the caller
fetches the game, the engine updates it in place and saves the whole record.
There is no lock and no version check. Two players joining the same game at
the same moment can both resolve the same vacant slot from the same snapshot;
the second save overwrites the first (last writer wins). This is accepted for
the handful of players a game holds.
"""

import logging
from typing import Optional, Union

import numpy as np
from uuid6 import uuid7

from pairsone.domain import game_rules
from pairsone.domain.card_rules import generate_cards
from pairsone.domain.errors import InvalidParameters
from pairsone.models.dc_models import VisibilityModel
from pairsone.models.schema_models import GameSchema, PlayerSchema
from pairsone.services.game_db import GameRepository
from pairsone.themes import ThemeCatalog

DEFAULT_FLIPS = 2


def new_game_id() -> str:
    """Short id: the last group of a fresh UUID (12 hex characters)."""
    return str(uuid7()).split("-")[-1]


def parse_positive_int(name: str, value: Union[int, str]) -> int:
    if isinstance(value, bool):
        raise InvalidParameters(f"{name} must be a positive integer", {name: value})
    try:
        number = int(value)
    except (TypeError, ValueError):
        raise InvalidParameters(f"{name} must be a positive integer", {name: value})
    if number <= 0:
        raise InvalidParameters(f"{name} must be a positive integer", {name: value})
    return number


class GameEngine:
    def __init__(
        self,
        repository: GameRepository,
        themes: ThemeCatalog,
        rng: Optional[np.random.Generator] = None,
    ):
        self.repository: GameRepository = repository
        self.themes: ThemeCatalog = themes
        self.rng: np.random.Generator = rng if rng is not None else np.random.default_rng()

    async def load(self, game_id: str) -> GameSchema:
        return await self.repository.fetch(game_id)

    async def exists(self, game_id: str) -> bool:
        return await self.repository.exists(game_id)

    async def create(
        self,
        board_size: Union[int, str],
        players_number: Union[int, str],
        theme_name: str,
        visibility: str = VisibilityModel.public.value,
    ) -> GameSchema:
        """Create and save a new game

        Args:
            board_size (Union[int, str]): Side length of the square board
            players_number (Union[int, str]): Number of player slots
            theme_name (str): Theme the cards are drawn from
            visibility (str): "public" or "private"

        Returns:
            GameSchema: The new game, every slot vacant and turn at -1
        """
        board_size = parse_positive_int("board_size", board_size)
        players_number = parse_positive_int("players_number", players_number)
        if visibility not in {v.value for v in VisibilityModel}:
            raise InvalidParameters(f"Unknown visibility: {visibility}", {"visibility": visibility})

        cards = generate_cards(board_size, self.themes.cards_available(theme_name), self.rng)
        game = GameSchema(
            id=new_game_id(),
            cards=cards,
            players=[PlayerSchema(id="", name="") for _ in range(players_number)],
            theme=theme_name,
            flips=DEFAULT_FLIPS,
            turn=game_rules.NOT_STARTED_TURN,
            visibility=visibility,
        )
        await self.repository.save(game)
        logging.info(f"Created game {game.id}: {board_size}x{board_size}, {players_number} players, theme {theme_name}")
        return game

    async def replay(self, game: GameSchema, theme_name: str) -> GameSchema:
        """Reset a finished game with a fresh deck

        Player identities and joined/online flags stay. Scores and turn
        counters go back to zero. The turn restarts at 0 when every seat is
        still joined, otherwise the game is forming again.
        """
        cards = generate_cards(
            game_rules.board_size(len(game.cards)),
            self.themes.cards_available(theme_name),
            self.rng,
        )
        game.players = [game_rules.reset_counters(player) for player in game.players]
        game.cards = cards
        game.theme = theme_name
        game.turn = game_rules.initial_turn(game.players)
        await self.repository.save(game)
        logging.info(f"Replaying game {game.id} with theme {theme_name}")
        return game

    async def join_player(
        self, game: GameSchema, player_id: str, player_name: str
    ) -> Optional[PlayerSchema]:
        """Try to join the player to the game

        1) If the player is already in the game (page reload), rejoin that slot.
        2) If the player is new, take the first vacant slot.
        3) Otherwise the game is full: return None and write nothing.

        Args:
            game (GameSchema): Game as just fetched; updated in place
            player_id (str): Opaque player id
            player_name (str): Display name

        Returns:
            Optional[PlayerSchema]: The joined player, None when not joined
        """
        if not player_id or not player_name:
            raise InvalidParameters("Player id and name are required", {"id": player_id, "name": player_name})

        index = game_rules.resolve_slot(game.players, player_id)
        if index is None:
            logging.info(f"Player {player_id} not joined: game {game.id} is full")
            return None

        player = game.players[index].model_copy(
            update={"id": player_id, "name": player_name, "joined": True, "online": True}
        )
        game.players[index] = player
        game.turn = game_rules.next_turn(game)

        await self.repository.save(game)
        logging.info(f"Player {player_id} joined game {game.id} at slot {index}, turn {game.turn}")
        return player

    async def leave_player(self, game: GameSchema, player_id: str) -> Optional[PlayerSchema]:
        """Mark the player offline. The seat stays theirs for a later rejoin."""
        index = game_rules.find_player(game.players, player_id)
        if index is None:
            return None

        player = game.players[index].model_copy(update={"online": False})
        game.players[index] = player
        await self.repository.save(game)
        logging.info(f"Player {player_id} left game {game.id}")
        return player

    @staticmethod
    def all_players_joined(players: list[PlayerSchema]) -> bool:
        return game_rules.all_players_joined(players)

    @staticmethod
    def any_player_online(game: GameSchema) -> bool:
        return game_rules.any_player_online(game)
