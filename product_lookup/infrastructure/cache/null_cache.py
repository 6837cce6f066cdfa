from typing import Optional

from product_lookup.adapters.interfaces.cache import CacheBackend


class NullCache(CacheBackend):
    """Cache backend used when caching is disabled: never hits, never stores."""

    def describe(self) -> str:
        return "disabled"

    async def get(self, key: str) -> Optional[bytes]:
        return None

    async def put(self, key: str, value: bytes) -> None:
        return None
