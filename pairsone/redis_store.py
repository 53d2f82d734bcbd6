import logging
from typing import Optional

from redis.asyncio import Redis
from redis.exceptions import RedisError

from pairsone.domain.errors import StoreUnavailable
from pairsone.load_secrets import (
    redis_db,
    redis_host,
    redis_password,
    redis_port,
    redis_socket_timeout,
)


def create_redis() -> Redis:
    """Create the pooled Redis client shared by the app.

    Every command borrows a connection from the pool and gives it back,
    so no connection state leaks from one request to another.
    """
    return Redis(
        host=redis_host,
        port=redis_port,
        db=redis_db,
        password=redis_password,
        decode_responses=True,
        socket_timeout=redis_socket_timeout,
        socket_connect_timeout=redis_socket_timeout,
        health_check_interval=30,
    )


class RedisStore:
    """Key/value access to Redis: GET, SET with EXPIRE, EXISTS."""

    def __init__(self, redis: Redis):
        self.redis: Redis = redis

    async def get(self, key: str) -> Optional[str]:
        try:
            return await self.redis.get(key)
        except RedisError as e:
            logging.error(f"Redis GET {key} failed: {e}")
            raise StoreUnavailable("get", str(e)) from e

    async def set_with_expiry(self, key: str, value: str, seconds: int) -> None:
        """Write the value and (re)set its expiration in one MULTI/EXEC

        Args:
            key (str): Redis key
            value (str): Serialized value
            seconds (int): Time to live counted from this write
        """
        try:
            async with self.redis.pipeline(transaction=True) as pipe:
                pipe.set(key, value)
                pipe.expire(key, seconds)
                await pipe.execute()
        except RedisError as e:
            logging.error(f"Redis SET/EXPIRE {key} failed: {e}")
            raise StoreUnavailable("set", str(e)) from e

    async def exists(self, key: str) -> bool:
        try:
            return await self.redis.exists(key) == 1
        except RedisError as e:
            raise StoreUnavailable("exists", str(e)) from e
