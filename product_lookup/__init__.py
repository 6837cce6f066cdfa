"""
Product Lookup Service - JSON lookup of catalog items by ASIN.

Records are fetched from the Product Advertising API and optionally cached
in a local directory or in Redis.
"""

__version__ = "0.1.0"
