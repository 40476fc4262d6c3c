# src/xswap/domain/models.py
"""
Domain Models - Pure Business Objects

This module contains domain models representing core business concepts:
- Tradable currencies and the loaded catalog
- Result messages shown on the swap form
- Swap receipts and the per-submission phase

Files that USE this module:
- xswap.application.* (all services use domain models)
- xswap.adapters.* (providers build Catalog instances, formatter renders them)
- tests.* (tests use domain models for test data)

Files that this module USES:
- None (pure domain layer, no external dependencies)
"""

from __future__ import annotations  # Enable postponed evaluation of annotations

from dataclasses import dataclass, field  # Decorator for creating data classes
from enum import Enum  # Enumerations for message kinds and swap phases
from typing import Mapping, Optional, Tuple  # Type hints for read-only mappings and tuples


@dataclass(frozen=True)
class Currency:
    """
    A tradable currency.

    Attributes:
        id: Unique symbol (e.g., "ETH")
        name: Display name (e.g., "Ethereum")
        icon: Icon reference (usually a URL)
    """
    id: str
    name: str
    icon: str = ""


@dataclass(frozen=True)
class Catalog:
    """
    Currencies and their unit prices, loaded together once per session.

    Attributes:
        currencies: Ordered currencies; the first two are the default pair
        prices: Symbol -> strictly positive unit price in the quote currency
    """
    currencies: Tuple[Currency, ...] = ()
    prices: Mapping[str, float] = field(default_factory=dict)

    def price_of(self, currency_id: str) -> Optional[float]:
        """Return the unit price, or None when the price is unknown."""
        price = self.prices.get(currency_id)
        if price is None or price <= 0:
            return None
        return price

    def ids(self) -> Tuple[str, ...]:
        return tuple(c.id for c in self.currencies)

    def __len__(self) -> int:
        return len(self.currencies)


class MessageKind(str, Enum):
    """Kind of result message shown on the form."""
    NONE = "none"
    ERROR = "error"
    SUCCESS = "success"


@dataclass(frozen=True)
class Message:
    """Result message record (kind + literal text)."""
    kind: MessageKind = MessageKind.NONE
    text: str = ""

    @classmethod
    def error(cls, text: str) -> Message:
        return cls(MessageKind.ERROR, text)

    @classmethod
    def success(cls, text: str) -> Message:
        return cls(MessageKind.SUCCESS, text)


NO_MESSAGE = Message()


class SwapPhase(str, Enum):
    """Per-submission state: IDLE -> SUBMITTING -> {SETTLED, FAILED} -> IDLE."""
    IDLE = "idle"
    SUBMITTING = "submitting"
    SETTLED = "settled"
    FAILED = "failed"


@dataclass(frozen=True)
class SwapReceipt:
    """
    Outcome of a settled swap returned by an executor.

    Attributes:
        success: Always True for a settled swap (failures raise SwapFailedError)
        message: User-facing success text
        from_currency: Currency debited
        to_currency: Currency credited
        amount: Amount of from_currency submitted
    """
    success: bool
    message: str
    from_currency: str
    to_currency: str
    amount: float
