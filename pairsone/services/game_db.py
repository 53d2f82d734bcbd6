"""Redis service layer for game records.

- The engine should not touch Redis keys directly; it calls this module.
- This layer owns the "game:<id>" key namespace and the expiration policy.
"""

import logging

from pydantic import ValidationError

from pairsone.domain.errors import CorruptRecord, GameNotFound, StoreUnavailable
from pairsone.models.schema_models import GameSchema
from pairsone.redis_store import RedisStore

REDIS_PREFIX = "game:"
GAME_EXPIRATION_SECONDS = 24 * 60 * 60


def game_key(game_id: str) -> str:
    return f"{REDIS_PREFIX}{game_id}"


class GameRepository:
    def __init__(self, store: RedisStore):
        self.store: RedisStore = store

    async def fetch(self, game_id: str) -> GameSchema:
        """Fetch persisted game by its id

        Args:
            game_id (str): ID to identify the game

        Returns:
            GameSchema: The stored game
        """
        game_string = await self.store.get(game_key(game_id))
        if game_string is None:
            raise GameNotFound(game_id)
        try:
            game = GameSchema.model_validate_json(game_string)
        except ValidationError as e:
            logging.error(f"Stored game {game_id} is corrupt: {e}")
            raise CorruptRecord(game_id, str(e)) from e
        if game.id != game_id:
            logging.error(f"Stored game {game_id} carries id {game.id}")
            raise CorruptRecord(game_id, f"record id {game.id} does not match key")
        return game

    async def exists(self, game_id: str) -> bool:
        """Check whether the game is persisted. A store failure counts as absent."""
        try:
            return await self.store.exists(game_key(game_id))
        except StoreUnavailable as e:
            logging.warning(f"Treating game {game_id} as missing: {e.details.get('reason')}")
            return False

    async def save(self, game: GameSchema) -> GameSchema:
        """Save the whole game and restart its 24h expiration

        Args:
            game (GameSchema): Game to store under its own id

        Returns:
            GameSchema: The same game, unchanged
        """
        game_string = game.model_dump_json(by_alias=True)
        await self.store.set_with_expiry(game_key(game.id), game_string, GAME_EXPIRATION_SECONDS)
        return game
