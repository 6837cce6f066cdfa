"""Parsing of Product Advertising API XML responses."""
import xml.etree.ElementTree as ET
from typing import List, Optional, Tuple

from product_lookup.domain.schemas.catalog import (
    AmazonItem,
    ItemAttributes,
    ItemImage,
    ItemLookupResponse,
)


class ResponseParseError(ValueError):
    """Raised when a response body is not a usable XML document."""


def _strip_namespaces(root: ET.Element) -> ET.Element:
    for element in root.iter():
        if isinstance(element.tag, str) and "}" in element.tag:
            element.tag = element.tag.split("}", 1)[1]
    return root


def _text(element: Optional[ET.Element], path: str) -> str:
    if element is None:
        return ""
    found = element.find(path)
    if found is None or found.text is None:
        return ""
    return found.text


def _int(element: Optional[ET.Element], path: str) -> Optional[int]:
    value = _text(element, path)
    try:
        return int(value)
    except ValueError:
        return None


def _image(item: ET.Element, name: str) -> Optional[ItemImage]:
    node = item.find(name)
    if node is None:
        return None
    return ItemImage(
        url=_text(node, "URL"),
        height=_int(node, "Height"),
        width=_int(node, "Width"),
    )


def _attributes(item: ET.Element) -> Optional[ItemAttributes]:
    node = item.find("ItemAttributes")
    if node is None:
        return None
    return ItemAttributes(
        brand=_text(node, "Brand"),
        creator=_text(node, "Creator"),
        manufacturer=_text(node, "Manufacturer"),
        publisher=_text(node, "Publisher"),
        release_date=_text(node, "ReleaseDate"),
        studio=_text(node, "Studio"),
        title=_text(node, "Title"),
    )


def parse_root(body: bytes) -> ET.Element:
    try:
        return _strip_namespaces(ET.fromstring(body))
    except ET.ParseError as e:
        raise ResponseParseError(f"malformed XML response: {e}") from e


def parse_errors(root: ET.Element) -> List[Tuple[str, str]]:
    """
    Collects (code, message) pairs from any Error elements in the document.

    Covers both request-level errors inside Items/Request/Errors and the
    top-level Error element of an ItemLookupErrorResponse.
    """
    return [
        (_text(error, "Code"), _text(error, "Message"))
        for error in root.iter("Error")
    ]


def parse_item_lookup(root: ET.Element) -> ItemLookupResponse:
    """Converts a namespace-stripped ItemLookupResponse into models."""
    items = [
        AmazonItem(
            asin=_text(item, "ASIN"),
            detail_page_url=_text(item, "DetailPageURL"),
            item_attributes=_attributes(item),
            small_image=_image(item, "SmallImage"),
            medium_image=_image(item, "MediumImage"),
            large_image=_image(item, "LargeImage"),
        )
        for item in root.findall("./Items/Item")
    ]
    return ItemLookupResponse(
        request_id=_text(root, "./OperationRequest/RequestId"),
        items=items,
    )
