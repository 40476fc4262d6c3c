# src/xswap/__init__.py
"""
XSwap - Asynchronous Currency Conversion and Swap Pipeline

Takes a rapidly-changing amount and currency pair, debounces it, converts it
against a live price table and executes simulated swaps against an in-memory
balance ledger.
"""

__version__ = "1.0.0"
__author__ = "XSwap Developers"
