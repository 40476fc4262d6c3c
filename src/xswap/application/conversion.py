# src/xswap/application/conversion.py
"""
Conversion Calculator - Pure Amount Conversion Functions

Converts an amount between two currencies quoted against a common unit,
parses raw amount text and formats amounts for display.

Files that USE this module:
- xswap.application.swap_form (derives the "to" amount and the ledger credit)
- xswap.adapters.formatting.formatter (format_amount for balances)
- tests.test_conversion (unit tests)

Files that this module USES:
- xswap.shared.validators (validate_numeric_input)
"""
from __future__ import annotations

from decimal import Decimal, InvalidOperation, ROUND_HALF_UP  # Fixed-precision display rounding
from typing import Optional

from xswap.shared.validators import validate_numeric_input  # Finite-number check


def convert(amount: float, from_price: float, to_price: float) -> float:
    """
    Convert an amount priced at from_price into units priced at to_price.

    Args:
        amount: Amount of the source currency
        from_price: Unit price of the source currency
        to_price: Unit price of the target currency (must be > 0)

    Returns:
        amount * from_price / to_price

    Raises:
        ValueError: If to_price is not strictly positive
    """
    if to_price <= 0:
        raise ValueError(f"to_price must be positive, got {to_price}")
    return amount * from_price / to_price


def parse_amount(text: Optional[str]) -> Optional[float]:
    """
    Parse raw amount text.

    Args:
        text: Raw input (e.g., "5", " 0.25 ")

    Returns:
        Parsed finite float, or None if blank or not a number
    """
    if text is None:
        return None
    text = str(text).strip()
    if not text:
        return None
    if not validate_numeric_input(text):
        return None
    return float(text)


def format_amount(value: float, decimals: int = 4) -> str:
    """
    Format an amount with a fixed number of decimals, rounding half up.

    Args:
        value: Amount to format
        decimals: Number of decimal places (default: 4)

    Returns:
        Formatted string (e.g., 15000 -> "15000.0000")
    """
    quantum = Decimal(1).scaleb(-decimals)
    try:
        return str(Decimal(str(value)).quantize(quantum, rounding=ROUND_HALF_UP))
    except InvalidOperation:
        # Too many digits for the default context; fall back to float formatting
        return f"{value:.{decimals}f}"
