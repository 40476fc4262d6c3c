# src/xswap/shared/__init__.py
"""
Shared Utilities - Cross-cutting Concerns

This package contains shared utilities used across all layers:
- Validation
- User-facing messages
- Logging configuration
"""

from xswap.shared.validators import (
    sanitize_user_input,
    validate_currency_symbol,
    validate_numeric_input,
)
from xswap.shared.messages import MESSAGES, swap_success_message

__all__ = [
    "validate_currency_symbol",
    "validate_numeric_input",
    "sanitize_user_input",
    "MESSAGES",
    "swap_success_message",
]
