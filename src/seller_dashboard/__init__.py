"""Seller dashboard: a thin client over the seller REST API."""

__version__ = "0.1.0"
