from contextlib import asynccontextmanager
from typing import AsyncIterator, Optional
from urllib.parse import urlsplit

import redis.asyncio as redis
from redis.exceptions import RedisError

from product_lookup.adapters.interfaces.cache import CacheBackend
from product_lookup.core.exceptions import CacheLookupError, CacheWriteError
from product_lookup.core.logging import get_logger

logger = get_logger(__name__)


class RedisCache(CacheBackend):
    """
    Redis-based implementation of the CacheBackend interface.

    Each operation dials its own connection from the URL and closes it when
    the operation ends, so a failing connection never outlives the request
    that hit it. Entries are stored without expiry.
    """

    def __init__(self, url: str):
        """
        Initialize the Redis cache.

        Args:
            url: Redis connection URL, e.g. redis://localhost:6379/0
        """
        self.url = url

    def describe(self) -> str:
        parts = urlsplit(self.url)
        host = parts.hostname or "localhost"
        port = f":{parts.port}" if parts.port else ""
        return f"redis ({host}{port}{parts.path})"

    @asynccontextmanager
    async def _connection(self) -> AsyncIterator[redis.Redis]:
        """Open a client for a single operation and always close it."""
        client = redis.from_url(self.url)
        try:
            yield client
        finally:
            try:
                await client.aclose()
            except RedisError as e:
                logger.debug(f"Error closing Redis connection: {str(e)}")

    async def get(self, key: str) -> Optional[bytes]:
        """
        Get a record from Redis.

        Args:
            key: Item id

        Returns:
            Stored bytes or None if the key does not exist

        Raises:
            CacheLookupError: If Redis cannot be reached or answers with an error
        """
        try:
            async with self._connection() as client:
                value = await client.get(key)
        except (RedisError, OSError, ValueError) as e:
            raise CacheLookupError(f"Redis error getting key {key}: {str(e)}", key=key) from e

        if value is None:
            logger.debug(f"Cache miss for key: {key}")
            return None

        return bytes(value)

    async def put(self, key: str, value: bytes) -> None:
        """
        Store a record in Redis, replacing any previous value.

        Args:
            key: Item id
            value: Serialized record

        Raises:
            CacheWriteError: If the value could not be stored
        """
        try:
            async with self._connection() as client:
                await client.set(key, value)
        except (RedisError, OSError, ValueError) as e:
            raise CacheWriteError(f"Redis error setting key {key}: {str(e)}", key=key) from e

        logger.debug(f"Stored key in Redis: {key}")
