# src/xswap/application/ledger.py
"""
Balance Ledger - Authoritative Per-currency Balances

This module holds the in-memory balance store for a session. It is the single
source of truth for affordability checks and is only mutated by a settled
swap through apply(), which moves both legs as one atomic unit.

Files that USE this module:
- xswap.application.swap_form (affordability checks and post-swap mutation)
- xswap.app (creates the session ledger from settings)
- tests.test_ledger (unit tests)

Files that this module USES:
- xswap.domain.errors (InsufficientBalanceError, SameCurrencyError)
"""
from __future__ import annotations

import logging
import threading
from typing import Dict, Mapping, Optional

from xswap.domain.errors import InsufficientBalanceError, SameCurrencyError

logger = logging.getLogger(__name__)


class BalanceLedger:
    """Session balance store with an atomic two-leg update."""

    def __init__(self, seed: Optional[Mapping[str, float]] = None):
        """
        Initialize the ledger from a seed mapping.

        Args:
            seed: Currency -> starting amount (copied, never aliased)
        """
        self._balances: Dict[str, float] = {k: float(v) for k, v in (seed or {}).items()}
        self._lock = threading.Lock()

    def get(self, currency: str) -> float:
        """
        Get the available amount of a currency.

        Returns:
            Balance, or 0.0 for a currency the ledger has never seen
        """
        with self._lock:
            return self._balances.get(currency, 0.0)

    def has(self, currency: str) -> bool:
        with self._lock:
            return currency in self._balances

    def can_afford(self, currency: str, amount: float) -> bool:
        return amount <= self.get(currency)

    def snapshot(self) -> Dict[str, float]:
        """Return a copy of all balances."""
        with self._lock:
            return dict(self._balances)

    def apply(self, from_currency: str, from_amount: float,
              to_currency: str, to_amount: float) -> Dict[str, float]:
        """
        Debit from_currency and credit to_currency as one operation.

        Both legs are computed from the same snapshot of prior balances under
        the ledger lock.

        Args:
            from_currency: Currency to debit
            from_amount: Amount to debit (>= 0)
            to_currency: Currency to credit
            to_amount: Amount to credit (>= 0)

        Returns:
            The two updated balances keyed by currency

        Raises:
            SameCurrencyError: If both legs name the same currency
            InsufficientBalanceError: If the debit would make the balance negative
            ValueError: If an amount is negative
        """
        if from_currency == to_currency:
            raise SameCurrencyError()
        if from_amount < 0 or to_amount < 0:
            raise ValueError("Swap amounts must be non-negative")

        with self._lock:
            from_before = self._balances.get(from_currency, 0.0)
            to_before = self._balances.get(to_currency, 0.0)
            if from_amount > from_before:
                raise InsufficientBalanceError()

            self._balances[from_currency] = from_before - from_amount
            self._balances[to_currency] = to_before + to_amount
            updated = {
                from_currency: self._balances[from_currency],
                to_currency: self._balances[to_currency],
            }

        logger.info(
            "Ledger updated: %s %s -> %s, %s %s -> %s",
            from_currency, from_before, updated[from_currency],
            to_currency, to_before, updated[to_currency],
        )
        return updated
