# src/xswap/shared/validators.py
"""
Input Validation Utilities - Data Validation

This module provides input validation functions for configuration values and
console input: currency symbols, numeric amounts and free text.

Files that USE this module:
- xswap.config.settings (uses validation functions in Settings field validators)
- xswap.app (sanitizes console commands)
- xswap.application.conversion (numeric check in parse_amount)

Files that this module USES:
- None (pure utility functions)
"""
import math
import re
from typing import Optional


def validate_currency_symbol(symbol: str) -> bool:
    """
    Validate a currency symbol.
    
    Args:
        symbol: Symbol to validate (e.g., "ETH", "USDT")
        
    Returns:
        True if valid, False otherwise
    """
    if not symbol:
        return False
    
    # Upper-case letters and digits, 1-15 characters (e.g., "1INCH")
    return bool(re.match(r'^[A-Z0-9]{1,15}$', symbol))


def validate_numeric_input(value: str, min_val: Optional[float] = None, 
                          max_val: Optional[float] = None) -> bool:
    """
    Validate numeric input string.
    
    Args:
        value: String value to validate
        min_val: Minimum allowed value
        max_val: Maximum allowed value
        
    Returns:
        True if valid, False otherwise
    """
    if not value:
        return False
    
    try:
        num_val = float(value)
        if not math.isfinite(num_val):
            return False
        if min_val is not None and num_val < min_val:
            return False
        if max_val is not None and num_val > max_val:
            return False
        return True
    except ValueError:
        return False


def sanitize_user_input(text: str, max_length: int = 200) -> str:
    """
    Sanitize user input text.
    
    Args:
        text: Input text to sanitize
        max_length: Maximum allowed length
        
    Returns:
        Sanitized text
    """
    if not text:
        return ""
    
    # Remove control characters
    sanitized = re.sub(r'[\x00-\x1f\x7f]', '', text)
    
    # Limit length
    if len(sanitized) > max_length:
        sanitized = sanitized[:max_length]
    
    return sanitized.strip()
