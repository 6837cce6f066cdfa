"""HTTP surface of the Product Lookup Service."""
