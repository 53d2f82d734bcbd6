import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from pairsone.domain.errors import GameError
from pairsone.exception_handlers import game_error_handler
from pairsone.load_secrets import log_level
from pairsone.redis_store import RedisStore, create_redis
from pairsone.routers import game
from pairsone.services.game_db import GameRepository
from pairsone.services.game_engine import GameEngine
from pairsone.themes import ThemeCatalog

logging.basicConfig(level=log_level)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Open the Redis pool and build the game engine.
    This function is called to start the server.
    """
    redis = create_redis()
    app.state.game_engine = GameEngine(GameRepository(RedisStore(redis)), ThemeCatalog())
    try:
        yield
    finally:
        await redis.aclose()
        logging.info("Stop Server")


def create_app() -> FastAPI:
    app = FastAPI(lifespan=lifespan)
    app.add_exception_handler(GameError, game_error_handler)
    app.include_router(game.game_router)
    return app


app = create_app()
