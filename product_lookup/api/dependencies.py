from typing import Optional

from fastapi import Depends, Request
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.formparsers import MultiPartException

from product_lookup.adapters.interfaces.cache import CacheBackend
from product_lookup.adapters.interfaces.catalog import ProductCatalogClient
from product_lookup.core.exceptions import ValidationException
from product_lookup.core.logging import get_logger
from product_lookup.services.item_service import ItemService

# Initialize logger
logger = get_logger(__name__)

FORM_CONTENT_TYPES = ("application/x-www-form-urlencoded", "multipart/form-data")


def get_cache_backend(request: Request) -> CacheBackend:
    """
    Dependency providing the process-wide cache backend.

    The backend is selected once at startup and kept on the application state.
    """
    return request.app.state.cache


def get_catalog_client(request: Request) -> ProductCatalogClient:
    """Dependency providing the upstream catalog client."""
    return request.app.state.catalog


def get_item_service(
    cache: CacheBackend = Depends(get_cache_backend),
    catalog: ProductCatalogClient = Depends(get_catalog_client),
) -> ItemService:
    """
    Dependency providing a lookup service for the current request.

    Returns:
        ItemService: Service bound to the active cache and catalog client
    """
    return ItemService(cache=cache, catalog=catalog)


async def get_item_id(request: Request) -> Optional[str]:
    """
    Extract the item id from the request.

    A key present in a form body takes precedence over the query string,
    even when its value is empty.

    Raises:
        ValidationException: If the form body cannot be parsed
    """
    content_type = request.headers.get("content-type", "").split(";")[0].strip().lower()

    if request.method in ("POST", "PUT", "PATCH") and content_type in FORM_CONTENT_TYPES:
        try:
            form = await request.form()
        except (StarletteHTTPException, MultiPartException, ValueError) as e:
            message = getattr(e, "detail", None) or getattr(e, "message", None) or str(e)
            logger.warning(f"Rejected unparseable form: {message}")
            raise ValidationException(f"invalid form: {message}", code="invalid_form")

        if "item_id" in form:
            value = form.get("item_id")
            return value if isinstance(value, str) else ""

    return request.query_params.get("item_id")
