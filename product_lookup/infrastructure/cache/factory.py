from product_lookup.adapters.interfaces.cache import CacheBackend
from product_lookup.core.config import CacheConfig, CacheMode
from product_lookup.core.logging import get_logger
from product_lookup.infrastructure.cache.file_cache import FileCache
from product_lookup.infrastructure.cache.null_cache import NullCache
from product_lookup.infrastructure.cache.redis_cache import RedisCache

logger = get_logger(__name__)


def build_cache_backend(config: CacheConfig) -> CacheBackend:
    """
    Create the single cache backend for the process.

    Args:
        config: Resolved cache selection

    Returns:
        CacheBackend: Backend matching the configured mode
    """
    if config.mode is CacheMode.REDIS:
        backend = RedisCache(config.redis_url)
    elif config.mode is CacheMode.FILE:
        backend = FileCache(config.directory)
    else:
        backend = NullCache()

    logger.info(f"Using cache backend: {backend.describe()}")
    return backend
