"""Caching implementations for the Product Lookup Service."""

from product_lookup.infrastructure.cache.factory import build_cache_backend
from product_lookup.infrastructure.cache.file_cache import FileCache
from product_lookup.infrastructure.cache.null_cache import NullCache
from product_lookup.infrastructure.cache.redis_cache import RedisCache

__all__ = ["FileCache", "NullCache", "RedisCache", "build_cache_backend"]
