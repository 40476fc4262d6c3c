# src/xswap/adapters/providers/base.py
"""
Base Provider Interface for Currency Catalog Providers

This module defines the abstract base class for all catalog providers.
It establishes the contract that all provider implementations must follow.

Files that USE this module:
- xswap.adapters.providers.coingecko (CoinGeckoCatalogProvider implements CatalogProvider)
- xswap.adapters.providers.static (StaticCatalogProvider implements CatalogProvider)
- xswap.application.catalog_service (uses CatalogProvider)

Files that this module USES:
- xswap.domain.models (Catalog)
"""
from abc import ABC, abstractmethod

from xswap.domain.models import Catalog


class CatalogProvider(ABC):
    name: str = "unknown"

    @abstractmethod
    def fetch_catalog(self) -> Catalog:
        """
        Return the ordered currency list and its price table.

        Raises:
            CatalogUnavailableError: If the catalog cannot be produced
        """
        raise NotImplementedError
