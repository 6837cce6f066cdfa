from .catalog import (
    AmazonItem,
    ItemAttributes,
    ItemImage,
    ItemLookupParams,
    ItemLookupResponse,
)

__all__ = [
    "AmazonItem",
    "ItemAttributes",
    "ItemImage",
    "ItemLookupParams",
    "ItemLookupResponse",
]
