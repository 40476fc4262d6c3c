# src/xswap/adapters/providers/coingecko.py
"""
CoinGecko API Provider for the Currency Catalog

This module implements the CoinGecko markets client that produces the
tradable currency catalog (symbol, name, icon) and the USD price table.
It caches the last catalog for a TTL and maps every transport or schema
problem to CatalogUnavailableError.

Files that USE this module:
- xswap.application.catalog_service (build_catalog_provider creates it)
- tests.test_providers (unit tests)

Files that this module USES:
- xswap.adapters.providers.base (CatalogProvider interface)
- xswap.config (settings for URL, page size, timeout and cache TTL)
- xswap.domain (Catalog, Currency, CatalogUnavailableError)
"""
import logging
import requests
from typing import Any, Dict, List, Optional
from datetime import datetime, timedelta, timezone

from xswap.adapters.providers.base import CatalogProvider
from xswap.config import settings
from xswap.domain.errors import CatalogUnavailableError
from xswap.domain.models import Catalog, Currency

log = logging.getLogger(__name__)


class CoinGeckoCatalogProvider(CatalogProvider):
    """
    CoinGecko markets endpoint provider.

    The API returns a JSON list ordered by market cap, one object per coin:
    {"symbol": "eth", "name": "Ethereum", "image": "https://...", "current_price": 3000.0, ...}
    """

    name = "coingecko"

    # Class-level cache shared across instances
    _cache_catalog: Optional[Catalog] = None
    _cache_ts: Optional[datetime] = None

    def __init__(self, base_url: Optional[str] = None, timeout: Optional[int] = None,
                 page_size: Optional[int] = None):
        """
        Initialize CoinGecko catalog provider.
        
        Args:
            base_url: Optional markets endpoint URL (defaults to settings.COINGECKO_MARKETS_URL)
            timeout: Optional HTTP timeout in seconds (defaults to settings.http_timeout_seconds)
            page_size: Optional number of coins to fetch (defaults to settings.catalog_page_size)
        """
        self.url = base_url or settings.COINGECKO_MARKETS_URL
        self.timeout = timeout or settings.http_timeout_seconds
        self.page_size = page_size or settings.catalog_page_size
        self.ttl = timedelta(minutes=settings.catalog_cache_minutes)

    def _cache_valid(self) -> bool:
        """
        Check if cached catalog is still valid based on TTL.
        
        Returns:
            True if cache exists and is within TTL, False otherwise
        """
        if self._cache_catalog is None or self._cache_ts is None:
            return False
        return datetime.now(timezone.utc) - self._cache_ts < self.ttl

    def get_markets_raw(self) -> List[Dict[str, Any]]:
        """
        Get the raw markets list from CoinGecko.
        
        Returns:
            List of market dictionaries
            
        Raises:
            CatalogUnavailableError: If the request fails or returns invalid JSON
        """
        params = {
            "vs_currency": "usd",
            "order": "market_cap_desc",
            "per_page": self.page_size,
            "page": 1,
        }
        try:
            log.info("Fetching currency catalog from CoinGecko")
            resp = requests.get(self.url, params=params, timeout=self.timeout)
            resp.raise_for_status()
            data = resp.json()
        except requests.exceptions.Timeout as e:
            log.warning("CoinGecko API timeout after %d seconds", self.timeout)
            raise CatalogUnavailableError(f"CoinGecko API timeout after {self.timeout}s") from e
        except requests.exceptions.HTTPError as e:
            log.error("CoinGecko API HTTP error: %s", e)
            raise CatalogUnavailableError(f"CoinGecko API HTTP error: {e}") from e
        except requests.exceptions.RequestException as e:
            log.warning("CoinGecko API request failed (network/connection error): %s", e)
            raise CatalogUnavailableError(f"CoinGecko API request failed: {e}") from e
        except ValueError as e:
            log.error("CoinGecko API returned invalid JSON: %s", e)
            raise CatalogUnavailableError(f"CoinGecko API returned invalid JSON: {e}") from e

        if not isinstance(data, list):
            log.error("CoinGecko returned non-list JSON: %s", type(data).__name__)
            raise CatalogUnavailableError("CoinGecko returned non-list JSON")
        return data

    @staticmethod
    def parse_markets(data: List[Dict[str, Any]]) -> Catalog:
        """
        Build a Catalog from raw market entries.

        Symbols are upper-cased and the list is sorted by symbol. A repeated
        symbol keeps its first (highest market cap) entry. Entries without a
        positive price stay in the currency list but get no price.

        Raises:
            CatalogUnavailableError: If an entry is not an object or has no symbol
        """
        prices: Dict[str, float] = {}
        currencies: Dict[str, Currency] = {}
        for item in data:
            try:
                symbol = str(item["symbol"]).strip().upper()
                name = str(item.get("name") or symbol)
                icon = str(item.get("image") or "")
                raw_price = item.get("current_price")
            except (KeyError, TypeError, AttributeError) as e:
                log.error("CoinGecko unexpected schema: %s", item)
                raise CatalogUnavailableError(f"CoinGecko schema error: {e}") from e

            if not symbol or symbol in currencies:
                continue
            currencies[symbol] = Currency(id=symbol, name=name, icon=icon)

            try:
                price = float(raw_price) if raw_price is not None else 0.0
            except (TypeError, ValueError):
                price = 0.0
            if price > 0:
                prices[symbol] = price
            else:
                log.debug("No usable price for %s: %r", symbol, raw_price)

        ordered = tuple(sorted(currencies.values(), key=lambda c: c.id))
        return Catalog(currencies=ordered, prices=prices)

    def fetch_catalog(self) -> Catalog:
        if self._cache_valid():
            log.debug("Using cached CoinGecko catalog")
            return self._cache_catalog  # type: ignore[return-value]

        catalog = self.parse_markets(self.get_markets_raw())

        # cache
        CoinGeckoCatalogProvider._cache_catalog = catalog
        CoinGeckoCatalogProvider._cache_ts = datetime.now(timezone.utc)

        log.info(
            "CoinGecko catalog updated: %d currencies, %d prices (ttl=%sm)",
            len(catalog.currencies), len(catalog.prices), settings.catalog_cache_minutes,
        )
        return catalog
