# src/xswap/application/catalog_service.py
"""
Catalog Service - Price Catalog Loader

This module loads the tradable currency catalog together with its price table
from a CatalogProvider. The provider call is blocking (HTTP), so it runs in a
worker thread to keep the event loop responsive.

Files that USE this module:
- xswap.application.swap_form (load_catalog drives the loader)
- xswap.app (builds the service for the configured source)
- tests.test_catalog_service (unit tests)

Files that this module USES:
- xswap.adapters.providers (CatalogProvider, CoinGeckoCatalogProvider, StaticCatalogProvider)
- xswap.domain.models (Catalog)
- xswap.domain.errors (CatalogUnavailableError)
"""
from __future__ import annotations

import asyncio
import logging
from typing import Optional

from xswap.adapters.providers.base import CatalogProvider
from xswap.adapters.providers.coingecko import CoinGeckoCatalogProvider
from xswap.adapters.providers.static import StaticCatalogProvider
from xswap.domain.errors import CatalogUnavailableError
from xswap.domain.models import Catalog

logger = logging.getLogger(__name__)


class CatalogService:
    """Loads the currency catalog once per session."""

    def __init__(self, provider: CatalogProvider):
        """
        Args:
            provider: CatalogProvider instance (CoinGecko or static)
        """
        self.provider = provider
        self.catalog: Optional[Catalog] = None

    async def load(self) -> Catalog:
        """
        Fetch the catalog and price table.

        Returns:
            Catalog with currencies in provider order (may be empty)

        Raises:
            CatalogUnavailableError: If the provider fails for any reason
        """
        try:
            catalog = await asyncio.to_thread(self.provider.fetch_catalog)
        except CatalogUnavailableError as e:
            logger.error("Catalog unavailable from %s: %s", self.provider.name, e)
            raise
        except Exception as e:
            logger.exception("Unexpected error loading catalog from %s", self.provider.name)
            raise CatalogUnavailableError(f"Catalog provider {self.provider.name} failed: {e}") from e

        self.catalog = catalog
        logger.info("Loaded %d currencies from %s", len(catalog), self.provider.name)
        return catalog


def build_catalog_provider(source: str) -> CatalogProvider:
    """
    Create the catalog provider for a configured source name.

    Args:
        source: "coingecko" or "static"

    Raises:
        ValueError: For an unknown source
    """
    if source == "coingecko":
        return CoinGeckoCatalogProvider()
    if source == "static":
        return StaticCatalogProvider()
    raise ValueError(f"Unknown catalog source: {source}")
