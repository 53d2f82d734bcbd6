"""Pytest configuration and fixtures."""

from typing import Dict, Optional

import numpy as np
import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from redis.exceptions import ConnectionError as RedisConnectionError

from pairsone.main import create_app
from pairsone.manager import ConnectionManager
from pairsone.redis_store import RedisStore
from pairsone.routers.game import get_connection_manager, get_game_engine
from pairsone.services.game_db import GameRepository
from pairsone.services.game_engine import GameEngine
from pairsone.themes import ThemeCatalog


class InMemoryPipeline:
    """Queues SET/EXPIRE and applies them together on execute()."""

    def __init__(self, redis: "InMemoryRedis"):
        self.redis = redis
        self.commands = []

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc, tb):
        self.commands = []

    def set(self, key: str, value: str):
        self.commands.append(("set", key, value))
        return self

    def expire(self, key: str, seconds: int):
        self.commands.append(("expire", key, seconds))
        return self

    async def execute(self):
        self.redis.check()
        results = []
        for command, key, arg in self.commands:
            if command == "set":
                self.redis.data[key] = arg
                self.redis.ttl.pop(key, None)
                results.append(True)
            else:
                if key in self.redis.data:
                    self.redis.ttl[key] = arg
                results.append(key in self.redis.data)
        self.redis.writes += 1
        return results


class InMemoryRedis:
    """Just enough of redis.asyncio.Redis for RedisStore."""

    def __init__(self):
        self.data: Dict[str, str] = {}
        self.ttl: Dict[str, int] = {}
        self.writes = 0
        self.fail = False

    def check(self):
        if self.fail:
            raise RedisConnectionError("Connection refused")

    async def get(self, key: str) -> Optional[str]:
        self.check()
        return self.data.get(key)

    async def exists(self, key: str) -> int:
        self.check()
        return 1 if key in self.data else 0

    def pipeline(self, transaction: bool = True) -> InMemoryPipeline:
        return InMemoryPipeline(self)


@pytest.fixture
def fake_redis() -> InMemoryRedis:
    return InMemoryRedis()


@pytest.fixture
def repository(fake_redis: InMemoryRedis) -> GameRepository:
    return GameRepository(RedisStore(fake_redis))


@pytest.fixture
def themes() -> ThemeCatalog:
    return ThemeCatalog({"eighties": 32, "tiny": 2})


@pytest.fixture
def engine(repository: GameRepository, themes: ThemeCatalog) -> GameEngine:
    return GameEngine(repository, themes, rng=np.random.default_rng(1234))


@pytest.fixture
def connection_manager() -> ConnectionManager:
    return ConnectionManager()


@pytest_asyncio.fixture
async def client(engine: GameEngine, connection_manager: ConnectionManager):
    """Create async test client with the engine backed by the in-memory Redis."""
    app = create_app()
    app.dependency_overrides[get_game_engine] = lambda: engine
    app.dependency_overrides[get_connection_manager] = lambda: connection_manager

    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test"
    ) as ac:
        yield ac
