"""Shopify App Store review scraper, CSV/JSON exporters and Singer tap."""

__version__ = "0.1.0"
