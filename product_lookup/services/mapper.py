from product_lookup.core.exceptions import MappingError
from product_lookup.domain.models.item import ItemRecord
from product_lookup.domain.schemas.catalog import ItemAttributes, ItemImage, ItemLookupResponse

_NO_ATTRIBUTES = ItemAttributes()
_NO_IMAGE = ItemImage()


def response_to_record(response: ItemLookupResponse) -> ItemRecord:
    """
    Maps the first item of a lookup response to an ItemRecord.

    A missing attribute group or image yields empty fields rather than an
    error.

    Raises:
        MappingError: If the response holds no items
    """
    if not response.items:
        raise MappingError("empty amazon items")

    item = response.items[0]
    attributes = item.item_attributes or _NO_ATTRIBUTES

    return ItemRecord(
        asin=item.asin,
        brand=attributes.brand,
        creator=attributes.creator,
        manufacturer=attributes.manufacturer,
        publisher=attributes.publisher,
        release_date=attributes.release_date,
        studio=attributes.studio,
        title=attributes.title,
        url=item.detail_page_url,
        small_image=(item.small_image or _NO_IMAGE).url,
        medium_image=(item.medium_image or _NO_IMAGE).url,
        large_image=(item.large_image or _NO_IMAGE).url,
    )
