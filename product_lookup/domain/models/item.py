from dataclasses import dataclass
from typing import Dict
import json

from product_lookup.core.exceptions import SerializationError


# Public JSON keys, in output order
JSON_FIELDS = (
    ("asin", "ASIN"),
    ("brand", "Brand"),
    ("creator", "Creator"),
    ("manufacturer", "Manufacturer"),
    ("publisher", "Publisher"),
    ("release_date", "ReleaseDate"),
    ("studio", "Studio"),
    ("title", "Title"),
    ("url", "URL"),
    ("small_image", "SmallImage"),
    ("medium_image", "MediumImage"),
    ("large_image", "LargeImage"),
)


@dataclass(frozen=True)
class ItemRecord:
    """
    Normalized, cacheable representation of one product.

    Every field is a string; absent values are empty strings, never None.
    """

    asin: str = ""
    brand: str = ""
    creator: str = ""
    manufacturer: str = ""
    publisher: str = ""
    release_date: str = ""
    studio: str = ""
    title: str = ""
    url: str = ""
    small_image: str = ""
    medium_image: str = ""
    large_image: str = ""

    def __post_init__(self):
        for attr, _ in JSON_FIELDS:
            if getattr(self, attr) is None:
                object.__setattr__(self, attr, "")

    def to_dict(self) -> Dict[str, str]:
        """Returns the record keyed by its public JSON field names."""
        return {key: getattr(self, attr) for attr, key in JSON_FIELDS}

    def to_json(self) -> bytes:
        """
        Serializes the record as a compact JSON document.

        Raises:
            SerializationError: If a field holds a value JSON cannot encode
        """
        try:
            return json.dumps(
                self.to_dict(),
                ensure_ascii=False,
                separators=(",", ":"),
            ).encode("utf-8")
        except (TypeError, ValueError) as e:
            raise SerializationError(f"failed to marshal item to json: {e}")

    @classmethod
    def from_dict(cls, data: Dict[str, str]) -> "ItemRecord":
        """Builds a record from a dict keyed by public JSON field names."""
        return cls(**{attr: data.get(key) or "" for attr, key in JSON_FIELDS})
