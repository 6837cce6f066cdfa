"""
Interfaces package for the Product Lookup Service adapters.

This package contains abstract base classes that define the contracts
for the record cache and the upstream product catalog.
"""

from .cache import CacheBackend
from .catalog import ProductCatalogClient

__all__ = [
    "CacheBackend",
    "ProductCatalogClient",
]
