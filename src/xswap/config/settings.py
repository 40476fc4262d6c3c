# src/xswap/config/settings.py
"""
Settings - Pydantic-based Configuration Management

Provides centralized configuration management using Pydantic Settings.
Supports environment variables (and a .env file) with validation.

Files that USE this module:
- xswap.app (composition root reads timings, seed balances and logging options)
- xswap.adapters.providers.coingecko (catalog URL, page size, timeout, cache TTL)

Files that this module USES:
- xswap.shared.validators (validation functions for settings)
"""

from __future__ import annotations  # Enable postponed evaluation of annotations

from typing import Dict, Optional  # Type hints for mappings and optional values

from pydantic import Field, field_validator  # Data validation and field configuration
from pydantic_settings import BaseSettings, SettingsConfigDict  # Settings management with Pydantic

from xswap.shared.validators import validate_currency_symbol  # Validate ledger seed symbols


# Seed balances for a fresh session
DEFAULT_BALANCES: Dict[str, float] = {
    "ETH": 10.0,
    "BTC": 1.0,
    "USDT": 10000.0,
    "BNB": 50.0,
    "SOL": 200.0,
    "AAVE": 1993.0,
}


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        populate_by_name=True,
    )

    # --- Catalog source ---
    catalog_source: str = Field(default="coingecko", alias="CATALOG_SOURCE")
    coingecko_url: str = Field(default="https://api.coingecko.com/api/v3", alias="COINGECKO_URL")
    catalog_page_size: int = Field(default=50, alias="CATALOG_PAGE_SIZE", ge=1, le=250)
    catalog_cache_minutes: int = Field(default=5, alias="CATALOG_CACHE_MINUTES", ge=0, le=1440)

    # --- HTTP Settings ---
    http_timeout_seconds: int = Field(default=10, alias="HTTP_TIMEOUT_SECONDS", ge=1, le=60)

    # --- Pipeline timings (milliseconds) ---
    amount_debounce_ms: int = Field(default=500, alias="AMOUNT_DEBOUNCE_MS", ge=0, le=10_000)
    calculation_delay_ms: int = Field(default=300, alias="CALCULATION_DELAY_MS", ge=0, le=10_000)
    swap_latency_ms: int = Field(default=1500, alias="SWAP_LATENCY_MS", ge=0, le=60_000)

    # --- Simulated exchange ---
    swap_success_rate: float = Field(default=0.9, alias="SWAP_SUCCESS_RATE", ge=0.0, le=1.0)
    swap_fee_pct: float = Field(default=1.0, alias="SWAP_FEE_PCT", ge=0.0, lt=100.0)

    # --- Display precision ---
    amount_decimals: int = Field(default=4, alias="AMOUNT_DECIMALS", ge=0, le=12)
    balance_decimals: int = Field(default=4, alias="BALANCE_DECIMALS", ge=0, le=12)

    # --- Ledger seed (JSON object in the environment) ---
    initial_balances: Dict[str, float] = Field(
        default_factory=lambda: dict(DEFAULT_BALANCES), alias="INITIAL_BALANCES"
    )

    # --- Logging ---
    log_file: Optional[str] = Field(default=None, alias="LOG_FILE")
    log_dir: Optional[str] = Field(default=None, alias="LOG_DIR")
    log_stdout: bool = Field(default=True, alias="XSWAP_LOG_STDOUT")
    log_max_bytes: int = Field(default=10 * 1024 * 1024, alias="LOG_MAX_BYTES")  # 10MB
    log_backup_count: int = Field(default=5, alias="LOG_BACKUP_COUNT")

    # Computed properties for convenience
    @property
    def COINGECKO_MARKETS_URL(self) -> str:
        """CoinGecko markets endpoint."""
        return f"{self.coingecko_url.rstrip('/')}/coins/markets"

    @property
    def amount_debounce_seconds(self) -> float:
        return self.amount_debounce_ms / 1000.0

    @property
    def calculation_delay_seconds(self) -> float:
        return self.calculation_delay_ms / 1000.0

    @property
    def swap_latency_seconds(self) -> float:
        return self.swap_latency_ms / 1000.0

    @field_validator("catalog_source")
    @classmethod
    def validate_catalog_source(cls, v: str) -> str:
        """Validate catalog source name."""
        v = v.strip().lower()
        if v not in ["coingecko", "static"]:
            raise ValueError("CATALOG_SOURCE must be 'coingecko' or 'static'")
        return v

    @field_validator("initial_balances")
    @classmethod
    def validate_initial_balances(cls, v: Dict[str, float]) -> Dict[str, float]:
        """Validate seed balances: known symbol format, non-negative amounts."""
        cleaned: Dict[str, float] = {}
        for symbol, amount in v.items():
            symbol = symbol.strip().upper()
            if not validate_currency_symbol(symbol):
                raise ValueError(f"Invalid currency symbol in INITIAL_BALANCES: {symbol!r}")
            if amount < 0:
                raise ValueError(f"Negative seed balance for {symbol}: {amount}")
            cleaned[symbol] = float(amount)
        return cleaned


# Global settings instance
settings = Settings()
