from typing import Dict, List, Optional

from pydantic import BaseModel, ConfigDict


class ItemAttributes(BaseModel):
    """Descriptive attribute group of a catalog item."""
    model_config = ConfigDict(frozen=True)

    brand: str = ""
    creator: str = ""
    manufacturer: str = ""
    publisher: str = ""
    release_date: str = ""
    studio: str = ""
    title: str = ""


class ItemImage(BaseModel):
    """One image size of a catalog item."""
    model_config = ConfigDict(frozen=True)

    url: str = ""
    height: Optional[int] = None
    width: Optional[int] = None


class AmazonItem(BaseModel):
    """A single item from an ItemLookup response."""
    model_config = ConfigDict(frozen=True)

    asin: str = ""
    detail_page_url: str = ""
    item_attributes: Optional[ItemAttributes] = None
    small_image: Optional[ItemImage] = None
    medium_image: Optional[ItemImage] = None
    large_image: Optional[ItemImage] = None


class ItemLookupResponse(BaseModel):
    """Parsed ItemLookup response."""
    model_config = ConfigDict(frozen=True)

    request_id: str = ""
    items: List[AmazonItem] = []


class ItemLookupParams(BaseModel):
    """Request parameters for a single-item lookup by ASIN."""
    model_config = ConfigDict(frozen=True)

    item_id: str
    id_type: str = "ASIN"
    operation: str = "ItemLookup"
    response_group: str = "Large"

    def to_query(self) -> Dict[str, str]:
        """Returns the parameters under their API names."""
        return {
            "IdType": self.id_type,
            "ItemId": self.item_id,
            "Operation": self.operation,
            "ResponseGroup": self.response_group,
        }
