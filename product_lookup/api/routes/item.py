from typing import Optional

from fastapi import APIRouter, Depends, Response

from product_lookup.api.dependencies import get_item_id, get_item_service
from product_lookup.services.item_service import ItemService

item_router = APIRouter()


@item_router.api_route(
    "/",
    methods=["GET", "POST"],
    summary="Look up an item",
    response_class=Response,
)
async def lookup_item(
    item_id: Optional[str] = Depends(get_item_id),
    item_service: ItemService = Depends(get_item_service),
) -> Response:
    """Returns the normalized record for `item_id`, from cache when present."""
    result = await item_service.lookup(item_id)
    return Response(content=result.body, media_type="application/json")
