# src/xswap/domain/errors.py
"""
Domain Errors - Business Logic Exceptions

This module defines domain-specific exceptions that represent
business rule violations and domain errors. Every error carries the
user-facing text shown when it ends a swap attempt.
"""

from xswap.shared.messages import MESSAGES


class DomainError(Exception):
    """Base exception for domain errors."""

    default_message = MESSAGES["errors"]["swap_failed"]

    def __init__(self, message: str = ""):
        super().__init__(message or self.default_message)

    @property
    def user_message(self) -> str:
        """Text to show the user for this error (str(e) may carry log detail)."""
        return self.default_message


class CatalogUnavailableError(DomainError):
    """Raised when the currency catalog or price table cannot be loaded."""
    default_message = MESSAGES["errors"]["catalog_unavailable"]


class SwapValidationError(DomainError):
    """Base for synchronous pre-submission validation failures."""
    pass


class InvalidAmountError(SwapValidationError):
    """Raised when the amount is empty, unparsable or not strictly positive."""
    default_message = MESSAGES["errors"]["invalid_amount"]


class SameCurrencyError(SwapValidationError):
    """Raised when the from and to currencies are identical."""
    default_message = MESSAGES["errors"]["same_currency"]


class InvalidCurrenciesError(SwapValidationError):
    """Raised when either currency has no known price."""
    default_message = MESSAGES["errors"]["invalid_currencies"]


class InsufficientBalanceError(SwapValidationError):
    """Raised when the requested amount exceeds the available balance."""
    default_message = MESSAGES["errors"]["insufficient_balance"]


class SwapFailedError(DomainError):
    """Raised by a swap executor when the transaction does not settle."""
    default_message = MESSAGES["errors"]["swap_failed"]

    @property
    def user_message(self) -> str:
        # Executors may report their own reason to the user
        return str(self) or self.default_message
