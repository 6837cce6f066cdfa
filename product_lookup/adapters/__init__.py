"""
Adapters package for the Product Lookup Service.

Abstract interfaces for the components the request flow depends on:
the record cache and the upstream product catalog.
"""

from . import interfaces

__all__ = [
    "interfaces",
]
