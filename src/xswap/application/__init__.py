# src/xswap/application/__init__.py
"""
Application Layer - Use Cases and Services

This package contains the swap pipeline services that orchestrate domain logic.
Catalog I/O goes through provider adapters; everything else is in memory.
"""

from xswap.application.catalog_service import CatalogService, build_catalog_provider
from xswap.application.conversion import convert, format_amount, parse_amount
from xswap.application.debounce import Debouncer
from xswap.application.ledger import BalanceLedger
from xswap.application.swap_executor import SimulatedSwapExecutor, SwapExecutor
from xswap.application.swap_form import FormSnapshot, SwapFormController, SwapFormState

__all__ = [
    "CatalogService",
    "build_catalog_provider",
    "convert",
    "format_amount",
    "parse_amount",
    "Debouncer",
    "BalanceLedger",
    "SwapExecutor",
    "SimulatedSwapExecutor",
    "FormSnapshot",
    "SwapFormController",
    "SwapFormState",
]
