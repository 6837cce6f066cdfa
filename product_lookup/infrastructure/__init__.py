"""Infrastructure layer for the Product Lookup Service."""

from product_lookup.infrastructure.amazon import ProductAdvertisingClient
from product_lookup.infrastructure.cache import (
    FileCache,
    NullCache,
    RedisCache,
    build_cache_backend,
)
