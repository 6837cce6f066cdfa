from dataclasses import dataclass
from typing import Optional

from product_lookup.adapters.interfaces.cache import CacheBackend
from product_lookup.adapters.interfaces.catalog import ProductCatalogClient
from product_lookup.core.exceptions import (
    CacheLookupError,
    CacheWriteError,
    MappingError,
    SerializationError,
    UpstreamError,
    ValidationException,
)
from product_lookup.core.logging import get_logger
from product_lookup.domain.schemas.catalog import ItemLookupParams
from product_lookup.services.mapper import response_to_record

logger = get_logger(__name__)


@dataclass(frozen=True)
class LookupResult:
    """Serialized record returned to the client."""
    item_id: str
    body: bytes
    from_cache: bool


class ItemService:
    """
    Read-through / write-through lookup of catalog items.

    Holds only the process-wide cache backend and catalog client; every
    call is independent of every other.
    """

    def __init__(self, cache: CacheBackend, catalog: ProductCatalogClient):
        """Initialize with the active cache backend and catalog client."""
        self.cache = cache
        self.catalog = catalog

    async def lookup(self, item_id: Optional[str]) -> LookupResult:
        """
        Returns the serialized record for an item id.

        Raises:
            ValidationException: If the item id is missing or empty
            UpstreamError: If the catalog lookup fails
            MappingError: If the catalog returned no usable item
            SerializationError: If the record cannot be encoded
        """
        if not item_id:
            raise ValidationException(f"invalid item id: {item_id or ''}", field="item_id")

        cached = await self._read_cache(item_id)
        if cached is not None:
            logger.info(f"hit cache: {item_id}")
            return LookupResult(item_id=item_id, body=cached, from_cache=True)

        try:
            response = await self.catalog.item_lookup(ItemLookupParams(item_id=item_id))
        except UpstreamError as e:
            raise UpstreamError(
                f"failed to get item information: {e.detail}",
                context=e.context,
                original_exception=e.original_exception or e
            )

        try:
            record = response_to_record(response)
        except MappingError as e:
            logger.warning(f"No usable item for {item_id}: {e.detail}")
            raise MappingError(f"failed to get item from response: {e.detail}")

        try:
            body = record.to_json()
        except SerializationError as e:
            logger.error(f"Failed to serialize item {item_id}: {e.detail}")
            raise

        await self._write_cache(item_id, body)
        return LookupResult(item_id=item_id, body=body, from_cache=False)

    async def _read_cache(self, item_id: str) -> Optional[bytes]:
        """A failed read counts as a miss."""
        try:
            return await self.cache.get(item_id)
        except CacheLookupError as e:
            logger.warning(f"failed get a cache: {str(e)}", extra={"item_id": item_id})
            return None

    async def _write_cache(self, item_id: str, body: bytes) -> None:
        """A failed write is logged and otherwise ignored."""
        try:
            await self.cache.put(item_id, body)
        except CacheWriteError as e:
            logger.error(f"failed to save a cache: {str(e)}", extra={"item_id": item_id})
