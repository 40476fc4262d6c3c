# src/xswap/adapters/providers/static.py
"""
Static Catalog Provider

Serves a fixed in-memory catalog. Used when CATALOG_SOURCE=static (offline
runs) and by tests.

Files that USE this module:
- xswap.application.catalog_service (build_catalog_provider creates it)
- tests.* (deterministic catalogs)

Files that this module USES:
- xswap.adapters.providers.base (CatalogProvider interface)
- xswap.domain.models (Catalog, Currency)
"""
from typing import Mapping, Optional, Sequence

from xswap.adapters.providers.base import CatalogProvider
from xswap.domain.models import Catalog, Currency

# Reference prices (USD) for the seeded ledger currencies
DEFAULT_CURRENCIES = (
    Currency("AAVE", "Aave"),
    Currency("BNB", "BNB"),
    Currency("BTC", "Bitcoin"),
    Currency("ETH", "Ethereum"),
    Currency("SOL", "Solana"),
    Currency("USDT", "Tether"),
)
DEFAULT_PRICES = {
    "AAVE": 95.0,
    "BNB": 580.0,
    "BTC": 64000.0,
    "ETH": 3000.0,
    "SOL": 145.0,
    "USDT": 1.0,
}


class StaticCatalogProvider(CatalogProvider):
    name = "static"

    def __init__(self, currencies: Optional[Sequence[Currency]] = None,
                 prices: Optional[Mapping[str, float]] = None):
        """
        Args:
            currencies: Ordered currencies (defaults to DEFAULT_CURRENCIES)
            prices: Symbol -> unit price; non-positive prices are dropped
        """
        self.currencies = tuple(DEFAULT_CURRENCIES if currencies is None else currencies)
        source = DEFAULT_PRICES if prices is None else prices
        self.prices = {k: float(v) for k, v in source.items() if v is not None and v > 0}

    def fetch_catalog(self) -> Catalog:
        return Catalog(currencies=self.currencies, prices=dict(self.prices))
