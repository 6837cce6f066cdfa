"""Core settings, logging and exception types for the Product Lookup Service."""
