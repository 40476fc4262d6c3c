"""
Provider Tests - Unit Tests for Catalog Provider Classes

This module contains unit tests for the catalog providers, including
CoinGeckoCatalogProvider and StaticCatalogProvider. It tests API interactions,
caching behavior, error handling and catalog parsing.

Files that USE this module:
- pytest (test runner executes these tests)

Files that this module USES:
- xswap.adapters.providers.coingecko (CoinGeckoCatalogProvider for testing)
- xswap.adapters.providers.static (StaticCatalogProvider for testing)
- unittest.mock (Mock for API mocking)
- pytest (testing framework)
"""
import pytest  # Testing framework for writing and running tests

from unittest.mock import Mock, patch  # Mock objects and patching for testing without real API calls
import requests  # HTTP library (used for mocking responses)
from datetime import datetime, timezone, timedelta  # Date/time utilities for testing cache timestamps

from xswap.adapters.providers.coingecko import CoinGeckoCatalogProvider  # CoinGecko provider to test
from xswap.adapters.providers.static import StaticCatalogProvider  # Static provider to test
from xswap.domain.errors import CatalogUnavailableError  # Expected error
from xswap.domain.models import Catalog, Currency  # Domain models for test data

MARKETS = [
    {"symbol": "usdt", "name": "Tether", "image": "https://img/usdt.png", "current_price": 1.0},
    {"symbol": "eth", "name": "Ethereum", "image": "https://img/eth.png", "current_price": 3000.0},
    {"symbol": "btc", "name": "Bitcoin", "image": "https://img/btc.png", "current_price": 64000.0},
]


def _response(payload):
    mock_response = Mock()
    mock_response.json.return_value = payload
    mock_response.raise_for_status.return_value = None
    return mock_response


class TestCoinGeckoCatalogProvider:
    def setup_method(self):
        # Clear class-level cache between tests
        CoinGeckoCatalogProvider._cache_catalog = None
        CoinGeckoCatalogProvider._cache_ts = None

    def test_init_with_defaults(self):
        provider = CoinGeckoCatalogProvider()
        assert provider.timeout == 10
        assert provider.page_size == 50
        assert provider.url.endswith("/coins/markets")
        assert provider.ttl.total_seconds() == 5 * 60  # 5 minutes

    def test_parse_markets_sorts_and_uppercases(self):
        catalog = CoinGeckoCatalogProvider.parse_markets(MARKETS)

        assert catalog.ids() == ("BTC", "ETH", "USDT")
        assert catalog.currencies[1] == Currency("ETH", "Ethereum", "https://img/eth.png")
        assert catalog.prices == {"BTC": 64000.0, "ETH": 3000.0, "USDT": 1.0}

    def test_parse_markets_drops_unusable_prices(self):
        catalog = CoinGeckoCatalogProvider.parse_markets([
            {"symbol": "eth", "name": "Ethereum", "current_price": 3000},
            {"symbol": "dead", "name": "Dead", "current_price": 0},
            {"symbol": "null", "name": "Null", "current_price": None},
            {"symbol": "bad", "name": "Bad", "current_price": "n/a"},
        ])

        assert set(catalog.ids()) == {"BAD", "DEAD", "ETH", "NULL"}
        assert catalog.prices == {"ETH": 3000.0}
        assert catalog.price_of("DEAD") is None

    def test_parse_markets_keeps_first_duplicate(self):
        catalog = CoinGeckoCatalogProvider.parse_markets([
            {"symbol": "eth", "name": "Ethereum", "current_price": 3000},
            {"symbol": "ETH", "name": "Bridged Ether", "current_price": 2990},
        ])
        assert catalog.currencies == (Currency("ETH", "Ethereum", ""),)
        assert catalog.prices == {"ETH": 3000.0}

    def test_parse_markets_schema_error(self):
        with pytest.raises(CatalogUnavailableError, match="CoinGecko schema error"):
            CoinGeckoCatalogProvider.parse_markets([{"name": "no symbol"}])

    @patch('xswap.adapters.providers.coingecko.requests.get')
    def test_fetch_catalog_success(self, mock_get):
        mock_get.return_value = _response(MARKETS)

        provider = CoinGeckoCatalogProvider()
        catalog = provider.fetch_catalog()

        assert catalog.ids() == ("BTC", "ETH", "USDT")
        mock_get.assert_called_once()
        _, kwargs = mock_get.call_args
        assert kwargs["params"]["vs_currency"] == "usd"
        assert kwargs["params"]["per_page"] == 50
        assert kwargs["timeout"] == 10

    @patch('xswap.adapters.providers.coingecko.requests.get')
    def test_fetch_catalog_uses_cache(self, mock_get):
        mock_get.return_value = _response(MARKETS)

        provider = CoinGeckoCatalogProvider()
        first = provider.fetch_catalog()
        second = CoinGeckoCatalogProvider().fetch_catalog()

        assert first is second
        mock_get.assert_called_once()

    @patch('xswap.adapters.providers.coingecko.requests.get')
    def test_expired_cache_refetches(self, mock_get):
        mock_get.return_value = _response(MARKETS)

        provider = CoinGeckoCatalogProvider()
        provider.fetch_catalog()
        CoinGeckoCatalogProvider._cache_ts = datetime.now(timezone.utc) - timedelta(minutes=10)
        provider.fetch_catalog()

        assert mock_get.call_count == 2

    @patch('xswap.adapters.providers.coingecko.requests.get')
    def test_request_error(self, mock_get):
        mock_get.side_effect = requests.exceptions.RequestException("API Error")

        provider = CoinGeckoCatalogProvider()
        with pytest.raises(CatalogUnavailableError, match="CoinGecko API request failed"):
            provider.fetch_catalog()

    @patch('xswap.adapters.providers.coingecko.requests.get')
    def test_timeout(self, mock_get):
        mock_get.side_effect = requests.exceptions.Timeout("slow")

        provider = CoinGeckoCatalogProvider()
        with pytest.raises(CatalogUnavailableError, match="CoinGecko API timeout"):
            provider.fetch_catalog()

    @patch('xswap.adapters.providers.coingecko.requests.get')
    def test_http_error(self, mock_get):
        mock_response = Mock()
        mock_response.raise_for_status.side_effect = requests.exceptions.HTTPError("429 Too Many Requests")
        mock_get.return_value = mock_response

        provider = CoinGeckoCatalogProvider()
        with pytest.raises(CatalogUnavailableError, match="CoinGecko API HTTP error"):
            provider.fetch_catalog()

    @patch('xswap.adapters.providers.coingecko.requests.get')
    def test_invalid_json(self, mock_get):
        mock_response = Mock()
        mock_response.json.side_effect = ValueError("Invalid JSON")
        mock_response.raise_for_status.return_value = None
        mock_get.return_value = mock_response

        provider = CoinGeckoCatalogProvider()
        with pytest.raises(CatalogUnavailableError, match="CoinGecko API returned invalid JSON"):
            provider.fetch_catalog()

    @patch('xswap.adapters.providers.coingecko.requests.get')
    def test_non_list_response(self, mock_get):
        mock_get.return_value = _response({"error": "rate limited"})

        provider = CoinGeckoCatalogProvider()
        with pytest.raises(CatalogUnavailableError, match="CoinGecko returned non-list JSON"):
            provider.fetch_catalog()

    @patch('xswap.adapters.providers.coingecko.requests.get')
    def test_failure_is_not_cached(self, mock_get):
        mock_get.side_effect = [requests.exceptions.RequestException("down"), _response(MARKETS)]

        provider = CoinGeckoCatalogProvider()
        with pytest.raises(CatalogUnavailableError):
            provider.fetch_catalog()
        assert provider.fetch_catalog().ids() == ("BTC", "ETH", "USDT")


class TestStaticCatalogProvider:
    def test_defaults_cover_seed_currencies(self):
        catalog = StaticCatalogProvider().fetch_catalog()
        assert catalog.ids() == ("AAVE", "BNB", "BTC", "ETH", "SOL", "USDT")
        assert all(catalog.price_of(cid) for cid in catalog.ids())

    def test_custom_catalog_drops_non_positive_prices(self):
        provider = StaticCatalogProvider(
            currencies=[Currency("ETH", "Ethereum"), Currency("ZERO", "Zero")],
            prices={"ETH": 3000, "ZERO": 0},
        )
        catalog = provider.fetch_catalog()
        assert isinstance(catalog, Catalog)
        assert catalog.prices == {"ETH": 3000.0}

    def test_empty_catalog(self):
        catalog = StaticCatalogProvider(currencies=[], prices={}).fetch_catalog()
        assert len(catalog) == 0
