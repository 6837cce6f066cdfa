from abc import ABC, abstractmethod

from product_lookup.domain.schemas.catalog import ItemLookupParams, ItemLookupResponse


class ProductCatalogClient(ABC):
    """
    Abstract base interface for the upstream product catalog.

    Request signing, transport and the catalog's own error semantics live
    behind this interface. Lookups are awaited by the caller; no retries are
    performed.
    """

    @abstractmethod
    async def item_lookup(self, params: ItemLookupParams) -> ItemLookupResponse:
        """
        Looks up a single item.

        Args:
            params: Lookup parameters

        Returns:
            ItemLookupResponse: Parsed response; may hold zero items

        Raises:
            UpstreamError: On transport, HTTP, protocol or API errors
        """
        pass

    async def close(self) -> None:
        """Releases any network resources held by the client."""
        return None
