# src/xswap/adapters/__init__.py
"""
Adapters Layer - External Interfaces

This package contains all adapters for external systems:
- Providers (currency catalog and price sources)
- Formatting (console output)
"""

__all__ = []
