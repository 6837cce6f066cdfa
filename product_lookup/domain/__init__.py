"""
Domain layer for the Product Lookup Service.

Holds the normalized item record served to clients and stored in the cache.
"""

from .models import ItemRecord

__all__ = ["ItemRecord"]
