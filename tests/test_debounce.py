"""
Debounce Tests - Unit Tests for the Debounce Scheduler

Files that USE this module:
- pytest (test runner executes these tests)

Files that this module USES:
- xswap.application.debounce (Debouncer under test)
- pytest, pytest-asyncio (testing framework)
"""
import asyncio
import logging

import pytest  # Testing framework for writing and running tests

from xswap.application.debounce import Debouncer  # Scheduler to test

DELAY = 0.02


@pytest.mark.asyncio
async def test_burst_emits_only_last_value():
    emitted = []
    debouncer = Debouncer(DELAY, emitted.append)

    for value in ["1", "12", "123", "1234"]:
        debouncer.push(value)
        await asyncio.sleep(DELAY / 10)

    await debouncer.wait()
    await asyncio.sleep(DELAY * 3)
    assert emitted == ["1234"]


@pytest.mark.asyncio
async def test_empty_value_is_debounced_too():
    emitted = []
    debouncer = Debouncer(DELAY, emitted.append)

    debouncer.push("5")
    debouncer.push("")
    await debouncer.wait()

    assert emitted == [""]


@pytest.mark.asyncio
async def test_restartable_after_emission():
    emitted = []
    debouncer = Debouncer(DELAY, emitted.append)

    debouncer.push("a")
    await debouncer.wait()
    debouncer.push("b")
    await debouncer.wait()

    assert emitted == ["a", "b"]


@pytest.mark.asyncio
async def test_cancel_drops_pending_value():
    emitted = []
    debouncer = Debouncer(DELAY, emitted.append)

    debouncer.push("x")
    assert debouncer.pending is True
    assert debouncer.cancel() is True
    assert debouncer.pending is False

    await asyncio.sleep(DELAY * 3)
    assert emitted == []
    assert debouncer.cancel() is False


@pytest.mark.asyncio
async def test_wait_without_pending_returns():
    debouncer = Debouncer(DELAY, lambda value: None)
    await debouncer.wait()


@pytest.mark.asyncio
async def test_async_callback_is_awaited():
    emitted = []

    async def callback(value):
        await asyncio.sleep(0)
        emitted.append(value)

    debouncer = Debouncer(DELAY, callback)
    debouncer.push(42)
    await debouncer.wait()

    assert emitted == [42]


@pytest.mark.asyncio
async def test_callback_error_is_logged_not_raised(caplog):
    def callback(value):
        raise RuntimeError("boom")

    debouncer = Debouncer(DELAY, callback, name="failing")
    with caplog.at_level(logging.ERROR, logger="xswap.application.debounce"):
        debouncer.push("v")
        await debouncer.wait()

    assert "failing: callback failed" in caplog.text


@pytest.mark.asyncio
async def test_callback_may_push_to_its_own_stream():
    emitted = []
    debouncer = None

    def callback(value):
        emitted.append(value)
        if value < 2:
            debouncer.push(value + 1)

    debouncer = Debouncer(DELAY, callback)
    debouncer.push(0)
    while debouncer.pending:
        await debouncer.wait()

    assert emitted == [0, 1, 2]
