"""
Swap Executor Tests - Unit Tests for the Simulated Swap Executor

Files that USE this module:
- pytest (test runner executes these tests)

Files that this module USES:
- xswap.application.swap_executor (SimulatedSwapExecutor under test)
- unittest.mock (Mock random source)
- pytest, pytest-asyncio (testing framework)
"""
import random

import pytest  # Testing framework for writing and running tests

from unittest.mock import Mock  # Mock objects to force the random outcome

from xswap.application.swap_executor import SimulatedSwapExecutor  # Executor to test
from xswap.domain.errors import SwapFailedError  # Expected failure


def _rng(value):
    rng = Mock(spec=random.Random)
    rng.random.return_value = value
    return rng


@pytest.mark.asyncio
async def test_success_branch():
    executor = SimulatedSwapExecutor(latency=0, success_rate=0.9, rng=_rng(0.05))

    receipt = await executor.execute("ETH", "USDT", 5.0)

    assert receipt.success is True
    assert receipt.message == "Successfully swapped 5 ETH for 4.9500 USDT."
    assert (receipt.from_currency, receipt.to_currency, receipt.amount) == ("ETH", "USDT", 5.0)


@pytest.mark.asyncio
async def test_failure_branch():
    executor = SimulatedSwapExecutor(latency=0, success_rate=0.9, rng=_rng(0.95))

    with pytest.raises(SwapFailedError) as exc_info:
        await executor.execute("ETH", "USDT", 5.0)

    assert exc_info.value.user_message == "An unknown error occurred."


@pytest.mark.asyncio
async def test_boundary_value_fails():
    # random() == success_rate is outside the success interval [0, rate)
    executor = SimulatedSwapExecutor(latency=0, success_rate=0.9, rng=_rng(0.9))
    with pytest.raises(SwapFailedError):
        await executor.execute("ETH", "USDT", 1.0)


@pytest.mark.asyncio
async def test_always_and_never():
    always = SimulatedSwapExecutor(latency=0, success_rate=1.0, rng=_rng(0.999999))
    never = SimulatedSwapExecutor(latency=0, success_rate=0.0, rng=_rng(0.0))

    assert (await always.execute("BTC", "ETH", 0.5)).success is True
    with pytest.raises(SwapFailedError):
        await never.execute("BTC", "ETH", 0.5)


@pytest.mark.asyncio
async def test_fee_and_decimals_in_message():
    executor = SimulatedSwapExecutor(latency=0, success_rate=1.0, fee_pct=2.0, decimals=2,
                                     rng=_rng(0.0))
    receipt = await executor.execute("SOL", "BNB", 0.5)
    assert receipt.message == "Successfully swapped 0.5 SOL for 0.49 BNB."


@pytest.mark.asyncio
async def test_seeded_rng_is_reproducible():
    outcomes = []
    for _ in range(2):
        executor = SimulatedSwapExecutor(latency=0, success_rate=0.5, rng=random.Random(1234))
        run = []
        for _ in range(20):
            try:
                await executor.execute("ETH", "USDT", 1.0)
                run.append(True)
            except SwapFailedError:
                run.append(False)
        outcomes.append(run)
    assert outcomes[0] == outcomes[1]


@pytest.mark.parametrize("kwargs", [{"success_rate": 1.5}, {"success_rate": -0.1}, {"latency": -1}])
def test_invalid_parameters(kwargs):
    with pytest.raises(ValueError):
        SimulatedSwapExecutor(**kwargs)
