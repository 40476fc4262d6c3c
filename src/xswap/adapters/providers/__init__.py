# src/xswap/adapters/providers/__init__.py
"""
Provider Adapters - Currency Catalog Sources

This package contains adapters for catalog sources.
All providers implement the CatalogProvider interface.
"""

from xswap.adapters.providers.base import CatalogProvider
from xswap.adapters.providers.coingecko import CoinGeckoCatalogProvider
from xswap.adapters.providers.static import StaticCatalogProvider

__all__ = [
    "CatalogProvider",
    "CoinGeckoCatalogProvider",
    "StaticCatalogProvider",
]
