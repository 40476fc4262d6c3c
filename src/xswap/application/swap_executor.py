# src/xswap/application/swap_executor.py
"""
Swap Executor - Simulated Swap Transactions

This module defines the executor contract used by the swap form and a
simulated implementation with settlement latency and a probabilistic failure
outcome, standing in for a real exchange.

Files that USE this module:
- xswap.application.swap_form (submits swaps through a SwapExecutor)
- xswap.app (creates the SimulatedSwapExecutor from settings)
- tests.test_swap_executor, tests.test_swap_form (unit tests)

Files that this module USES:
- xswap.domain.models (SwapReceipt)
- xswap.domain.errors (SwapFailedError)
- xswap.shared.messages (swap_success_message)
"""
from __future__ import annotations

import asyncio
import logging
import random
from abc import ABC, abstractmethod
from typing import Optional

from xswap.domain.errors import SwapFailedError
from xswap.domain.models import SwapReceipt
from xswap.shared.messages import swap_success_message

logger = logging.getLogger(__name__)


class SwapExecutor(ABC):
    @abstractmethod
    async def execute(self, from_currency: str, to_currency: str, amount: float) -> SwapReceipt:
        """
        Submit a swap and wait for it to settle.

        Returns:
            SwapReceipt with success=True

        Raises:
            SwapFailedError: If the swap did not settle
        """
        raise NotImplementedError


class SimulatedSwapExecutor(SwapExecutor):
    """
    Executor that sleeps for a fixed latency and then succeeds with a fixed
    probability. Pass a seeded random.Random to make outcomes reproducible.
    """

    def __init__(self, latency: float = 1.5, success_rate: float = 0.9,
                 fee_pct: float = 1.0, decimals: int = 4,
                 rng: Optional[random.Random] = None):
        """
        Initialize the simulated executor.
        
        Args:
            latency: Settlement delay in seconds (default: 1.5)
            success_rate: Probability of success in [0, 1] (default: 0.9)
            fee_pct: Fee percentage shown in the success message (default: 1.0)
            decimals: Decimals for the received figure in the message (default: 4)
            rng: Optional random source (defaults to a private Random())
            
        Raises:
            ValueError: If success_rate is outside [0, 1] or latency is negative
        """
        if not 0.0 <= success_rate <= 1.0:
            raise ValueError(f"success_rate must be within [0, 1], got {success_rate}")
        if latency < 0:
            raise ValueError(f"latency must be non-negative, got {latency}")
        self.latency = latency
        self.success_rate = success_rate
        self.fee_pct = fee_pct
        self.decimals = decimals
        self.rng = rng or random.Random()

    async def execute(self, from_currency: str, to_currency: str, amount: float) -> SwapReceipt:
        logger.info("Submitting swap: %s %s -> %s", amount, from_currency, to_currency)
        await asyncio.sleep(self.latency)

        # random() is in [0, 1): success_rate=1.0 always succeeds, 0.0 never does
        if self.rng.random() >= self.success_rate:
            logger.warning("Simulated swap failed: %s %s -> %s", amount, from_currency, to_currency)
            raise SwapFailedError()

        message = swap_success_message(amount, from_currency, to_currency,
                                       fee_pct=self.fee_pct, decimals=self.decimals)
        logger.info("Swap settled: %s", message)
        return SwapReceipt(
            success=True,
            message=message,
            from_currency=from_currency,
            to_currency=to_currency,
            amount=amount,
        )
