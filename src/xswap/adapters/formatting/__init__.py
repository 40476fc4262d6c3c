# src/xswap/adapters/formatting/__init__.py
"""
Formatting Adapters - Message Formatting

This package contains plain-text formatting adapters for console output.
"""

from xswap.adapters.formatting.formatter import (
    balance_lines,
    catalog_lines,
    form_lines,
    format_balance,
    format_message,
)

__all__ = [
    "balance_lines",
    "catalog_lines",
    "form_lines",
    "format_balance",
    "format_message",
]
