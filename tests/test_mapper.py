"""Tests for mapping upstream responses to item records."""

import json

import pytest
from hypothesis import given, strategies as st

from product_lookup.core.exceptions import MappingError
from product_lookup.domain.models.item import ItemRecord
from product_lookup.domain.schemas.catalog import AmazonItem, ItemAttributes, ItemImage
from product_lookup.services.mapper import response_to_record

from .conftest import make_item, make_response


def test_maps_all_fields() -> None:
    record = response_to_record(make_response(make_item()))

    assert record == ItemRecord(
        asin="B000X",
        brand="Acme",
        creator="Jane Doe",
        manufacturer="Acme Corp",
        publisher="Acme Press",
        release_date="2016-04-01",
        studio="Acme Studio",
        title="Example Widget",
        url="https://www.amazon.co.jp/dp/B000X",
        small_image="https://images.example.com/B000X.SL75.jpg",
        medium_image="https://images.example.com/B000X.SL160.jpg",
        large_image="https://images.example.com/B000X.SL500.jpg",
    )


def test_empty_response_raises() -> None:
    with pytest.raises(MappingError, match="empty amazon items"):
        response_to_record(make_response())


def test_missing_attribute_group_maps_to_empty_fields() -> None:
    record = response_to_record(make_response(make_item(with_attributes=False)))

    assert record.asin == "B000X"
    assert record.title == ""
    assert record.brand == ""
    assert record.release_date == ""
    assert record.small_image.endswith(".SL75.jpg")


def test_missing_images_map_to_empty_fields() -> None:
    record = response_to_record(make_response(make_item(with_images=False)))

    assert (record.small_image, record.medium_image, record.large_image) == ("", "", "")
    assert record.title == "Example Widget"


def test_bare_item_maps_to_empty_record() -> None:
    record = response_to_record(make_response(AmazonItem()))

    assert record == ItemRecord()
    assert all(value == "" for value in record.to_dict().values())


def test_record_is_immutable() -> None:
    record = response_to_record(make_response(make_item()))

    with pytest.raises(AttributeError):
        record.title = "changed"


def test_json_is_compact_and_ordered() -> None:
    record = ItemRecord(asin="B000X", title="Example Widget")

    assert record.to_json() == (
        b'{"ASIN":"B000X","Brand":"","Creator":"","Manufacturer":"","Publisher":"",'
        b'"ReleaseDate":"","Studio":"","Title":"Example Widget","URL":"",'
        b'"SmallImage":"","MediumImage":"","LargeImage":""}'
    )


def test_none_fields_become_empty_strings() -> None:
    record = ItemRecord(asin="B000X", brand=None)

    assert record.brand == ""


text_values = st.text(max_size=40)


@given(
    asin=text_values,
    title=text_values,
    brand=text_values,
    url=text_values,
    image=text_values,
)
def test_mapping_copies_fields_verbatim(asin: str, title: str, brand: str, url: str, image: str) -> None:
    item = AmazonItem(
        asin=asin,
        detail_page_url=url,
        item_attributes=ItemAttributes(title=title, brand=brand),
        medium_image=ItemImage(url=image),
    )

    record = response_to_record(make_response(item))
    decoded = json.loads(record.to_json().decode("utf-8"))

    assert decoded["ASIN"] == asin
    assert decoded["Title"] == title
    assert decoded["Brand"] == brand
    assert decoded["URL"] == url
    assert decoded["MediumImage"] == image
    assert decoded["SmallImage"] == ""
    assert ItemRecord.from_dict(decoded) == record
