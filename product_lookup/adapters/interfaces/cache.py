from abc import ABC, abstractmethod
from typing import Optional


class CacheBackend(ABC):
    """
    Abstract base interface for the record cache.

    Values are the serialized record bytes, keyed by the raw item id.
    Implementations hold no per-request state; connections or file handles
    are acquired and released inside each call.
    """

    @abstractmethod
    async def get(self, key: str) -> Optional[bytes]:
        """
        Retrieves a cached record by key.

        Args:
            key: The item id to look up

        Returns:
            Optional[bytes]: The stored bytes, or None if the key is absent

        Raises:
            CacheLookupError: If the backend could not be read
        """
        pass

    @abstractmethod
    async def put(self, key: str, value: bytes) -> None:
        """
        Stores a serialized record. Existing entries are overwritten.

        Args:
            key: The item id to store under
            value: The serialized record

        Raises:
            CacheWriteError: If the record could not be stored
        """
        pass

    def describe(self) -> str:
        """Short human-readable description used in startup logs."""
        return type(self).__name__
