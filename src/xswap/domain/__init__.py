# src/xswap/domain/__init__.py
"""
Domain Layer - Pure Business Objects

This package contains domain models and business rules.
No dependencies on infrastructure or external systems.
"""

from xswap.domain.models import (
    Catalog,
    Currency,
    Message,
    MessageKind,
    NO_MESSAGE,
    SwapPhase,
    SwapReceipt,
)
from xswap.domain.errors import (
    CatalogUnavailableError,
    DomainError,
    InsufficientBalanceError,
    InvalidAmountError,
    InvalidCurrenciesError,
    SameCurrencyError,
    SwapFailedError,
    SwapValidationError,
)

__all__ = [
    "Catalog",
    "Currency",
    "Message",
    "MessageKind",
    "NO_MESSAGE",
    "SwapPhase",
    "SwapReceipt",
    "DomainError",
    "CatalogUnavailableError",
    "SwapValidationError",
    "InvalidAmountError",
    "SameCurrencyError",
    "InvalidCurrenciesError",
    "InsufficientBalanceError",
    "SwapFailedError",
]
