"""Configuration for the seller dashboard."""

from seller_dashboard.config.settings import Settings, get_settings

__all__ = ["Settings", "get_settings"]
