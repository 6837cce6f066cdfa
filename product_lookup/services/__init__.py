"""
Services package for the Product Lookup Service.

Services orchestrate the request workflow, coordinating the record cache,
the upstream catalog client and the record mapper. They depend on the
adapter interfaces rather than concrete implementations.
"""

from product_lookup.services.item_service import ItemService, LookupResult
from product_lookup.services.mapper import response_to_record

__all__ = ["ItemService", "LookupResult", "response_to_record"]
