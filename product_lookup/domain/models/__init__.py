"""
Domain models for the Product Lookup Service.
"""

from .item import ItemRecord

__all__ = ["ItemRecord"]
