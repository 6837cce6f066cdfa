"""Product Advertising API integration."""

from product_lookup.infrastructure.amazon.client import ProductAdvertisingClient

__all__ = ["ProductAdvertisingClient"]
