"""Shared fixtures and test doubles."""

from typing import Dict, List, Optional

import pytest
from fastapi.testclient import TestClient

from product_lookup.adapters.interfaces.cache import CacheBackend
from product_lookup.adapters.interfaces.catalog import ProductCatalogClient
from product_lookup.application import create_application
from product_lookup.core.config import Settings
from product_lookup.core.exceptions import CacheLookupError, CacheWriteError
from product_lookup.domain.schemas.catalog import (
    AmazonItem,
    ItemAttributes,
    ItemImage,
    ItemLookupParams,
    ItemLookupResponse,
)


class FakeCatalog(ProductCatalogClient):
    """Catalog client returning a canned response and recording calls."""

    def __init__(
        self,
        response: Optional[ItemLookupResponse] = None,
        error: Optional[Exception] = None
    ) -> None:
        self.response = response or ItemLookupResponse()
        self.error = error
        self.calls: List[ItemLookupParams] = []
        self.closed = False

    async def item_lookup(self, params: ItemLookupParams) -> ItemLookupResponse:
        self.calls.append(params)
        if self.error is not None:
            raise self.error
        return self.response

    async def close(self) -> None:
        self.closed = True


class MemoryCache(CacheBackend):
    """Dict-backed cache with switchable failures."""

    def __init__(self, fail_get: bool = False, fail_put: bool = False) -> None:
        self.store: Dict[str, bytes] = {}
        self.fail_get = fail_get
        self.fail_put = fail_put
        self.gets: List[str] = []
        self.puts: List[str] = []

    async def get(self, key: str) -> Optional[bytes]:
        self.gets.append(key)
        if self.fail_get:
            raise CacheLookupError("connection refused", key=key)
        return self.store.get(key)

    async def put(self, key: str, value: bytes) -> None:
        self.puts.append(key)
        if self.fail_put:
            raise CacheWriteError("disk full", key=key)
        self.store[key] = value


def make_item(
    asin: str = "B000X",
    title: str = "Example Widget",
    with_attributes: bool = True,
    with_images: bool = True,
) -> AmazonItem:
    """Build a fully populated upstream item."""
    attributes = ItemAttributes(
        brand="Acme",
        creator="Jane Doe",
        manufacturer="Acme Corp",
        publisher="Acme Press",
        release_date="2016-04-01",
        studio="Acme Studio",
        title=title,
    ) if with_attributes else None

    def image(size: str) -> Optional[ItemImage]:
        if not with_images:
            return None
        return ItemImage(url=f"https://images.example.com/{asin}.{size}.jpg")

    return AmazonItem(
        asin=asin,
        detail_page_url=f"https://www.amazon.co.jp/dp/{asin}",
        item_attributes=attributes,
        small_image=image("SL75"),
        medium_image=image("SL160"),
        large_image=image("SL500"),
    )


def make_response(*items: AmazonItem) -> ItemLookupResponse:
    return ItemLookupResponse(request_id="req-1", items=list(items))


@pytest.fixture
def settings() -> Settings:
    return Settings(
        AMAZON_ACCESS_KEY="AKIDEXAMPLE",
        AMAZON_SECRET_KEY="secret",
        AMAZON_ASSOCIATE_TAG="tag-22",
        LOG_LEVEL="WARNING",
        ENABLE_STRUCTURED_LOGGING=False,
    )


@pytest.fixture
def cache() -> MemoryCache:
    return MemoryCache()


@pytest.fixture
def catalog() -> FakeCatalog:
    return FakeCatalog(make_response(make_item()))


@pytest.fixture
def client(settings: Settings, cache: MemoryCache, catalog: FakeCatalog):
    app = create_application(settings, cache=cache, catalog=catalog)
    with TestClient(app) as test_client:
        yield test_client
