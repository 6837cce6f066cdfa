from datetime import datetime
from typing import Callable, Optional

import httpx

from product_lookup.adapters.interfaces.catalog import ProductCatalogClient
from product_lookup.core.exceptions import ConfigurationError, UpstreamError
from product_lookup.core.logging import get_logger
from product_lookup.domain.schemas.catalog import ItemLookupParams, ItemLookupResponse
from product_lookup.infrastructure.amazon.parser import (
    ResponseParseError,
    parse_errors,
    parse_item_lookup,
    parse_root,
)
from product_lookup.infrastructure.amazon.signing import ENDPOINTS, build_signed_url

logger = get_logger(__name__)


class ProductAdvertisingClient(ProductCatalogClient):
    """Client for the Product Advertising API ItemLookup operation."""

    def __init__(
        self,
        domain: str,
        associate_tag: str,
        access_key: str,
        secret_key: str,
        http_client: Optional[httpx.AsyncClient] = None,
        clock: Optional[Callable[[], datetime]] = None
    ):
        """
        Initialize the client.

        Args:
            domain: Marketplace code, e.g. "JP" or "US"
            associate_tag: Partner tag credited for requests
            access_key: AWS access key id
            secret_key: AWS secret key
            http_client: Optional HTTP client for requests
            clock: Optional callable returning the request time

        Raises:
            ConfigurationError: If the marketplace code is unknown
        """
        domain = (domain or "").upper()
        if domain not in ENDPOINTS:
            raise ConfigurationError(
                f"Unknown Amazon domain '{domain}', expected one of: {', '.join(sorted(ENDPOINTS))}"
            )

        self.domain = domain
        self.host = ENDPOINTS[domain]
        self.associate_tag = associate_tag
        self.access_key = access_key
        self.secret_key = secret_key
        self.http_client = http_client or httpx.AsyncClient()
        self._clock = clock

        logger.info(f"Product Advertising API client initialized for {self.host}")

    async def item_lookup(self, params: ItemLookupParams) -> ItemLookupResponse:
        """
        Perform an ItemLookup request.

        Args:
            params: Lookup parameters

        Returns:
            ItemLookupResponse: Parsed response, possibly without items

        Raises:
            UpstreamError: On transport errors, HTTP errors, malformed XML or
                errors reported by the API
        """
        now = self._clock() if self._clock else None
        url = build_signed_url(
            self.host,
            self.access_key,
            self.secret_key,
            self.associate_tag,
            params.to_query(),
            now=now,
        )

        try:
            response = await self.http_client.get(url)
        except httpx.HTTPError as e:
            logger.error(f"ItemLookup request for {params.item_id} failed: {str(e)}")
            raise UpstreamError(
                f"request to {self.host} failed: {str(e) or type(e).__name__}",
                original_exception=e
            )

        if response.is_error:
            detail = self._error_detail(response.content) or response.reason_phrase
            logger.error(
                f"ItemLookup for {params.item_id} returned HTTP {response.status_code}: {detail}"
            )
            raise UpstreamError(
                f"{self.host} returned HTTP {response.status_code}: {detail}",
                context={"status_code": response.status_code}
            )

        try:
            root = parse_root(response.content)
        except ResponseParseError as e:
            raise UpstreamError(str(e), original_exception=e)

        errors = parse_errors(root)
        if errors:
            detail = "; ".join(f"{code}: {message}" for code, message in errors)
            logger.warning(f"ItemLookup for {params.item_id} reported errors: {detail}")
            raise UpstreamError(detail, context={"errors": [code for code, _ in errors]})

        result = parse_item_lookup(root)
        logger.debug(
            f"ItemLookup for {params.item_id} returned {len(result.items)} item(s)",
            extra={"request_id": result.request_id}
        )
        return result

    @staticmethod
    def _error_detail(body: bytes) -> str:
        """Extract error codes and messages from an error response body, if any."""
        try:
            root = parse_root(body)
        except ResponseParseError:
            return ""
        return "; ".join(f"{code}: {message}" for code, message in parse_errors(root))

    async def close(self) -> None:
        await self.http_client.aclose()
