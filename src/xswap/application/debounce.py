# src/xswap/application/debounce.py
"""
Debounce Scheduler - Coalesce Rapid Updates into a Settled Value

A Debouncer accepts a stream of values and invokes its callback with the most
recent one only after a quiet period with no further pushes. Every push
supersedes (cancels) the emission scheduled by the previous one.

Files that USE this module:
- xswap.application.swap_form (amount debounce and delayed calculation)
- tests.test_debounce (unit tests)

Files that this module USES:
- asyncio (cancellable delayed tasks)
"""
from __future__ import annotations

import asyncio
import logging
from typing import Any, Awaitable, Callable, Generic, Optional, TypeVar, Union

logger = logging.getLogger(__name__)

T = TypeVar("T")

Callback = Callable[[T], Union[None, Awaitable[None]]]


class Debouncer(Generic[T]):
    """
    Restartable debounce scheduler bound to the running event loop.

    At most one emission is pending at any time. The pending task carries a
    token; a fired task whose token is no longer current does nothing, so a
    superseded value can never reach the callback even if cancellation races
    with the timer.
    """

    def __init__(self, delay: float, callback: Callback, name: str = "debounce"):
        """
        Args:
            delay: Quiet period in seconds
            callback: Called with the settled value (sync or async)
            name: Name used in logs and task names
        """
        self.delay = delay
        self.callback = callback
        self.name = name
        self._token = 0
        self._task: Optional[asyncio.Task] = None

    @property
    def pending(self) -> bool:
        """True while an emission is scheduled and not yet delivered."""
        return self._task is not None and not self._task.done()

    def push(self, value: T) -> None:
        """Schedule value for emission, superseding any pending one."""
        self.cancel()
        self._token += 1
        token = self._token
        self._task = asyncio.get_running_loop().create_task(
            self._fire_later(token, value), name=f"{self.name}-{token}"
        )

    def cancel(self) -> bool:
        """
        Cancel the pending emission, if any.

        Returns:
            True if an emission was pending and has been cancelled
        """
        task = self._task
        self._task = None
        # Invalidate the token so a task already past its sleep stays silent
        self._token += 1
        if task is not None and not task.done():
            # A callback cancelling its own stream is already past the token check
            if task is not _current_task():
                task.cancel()
            logger.debug("%s: pending emission superseded", self.name)
            return True
        return False

    async def wait(self) -> None:
        """Wait until the currently pending emission (if any) has been delivered or cancelled."""
        task = self._task
        if task is None:
            return
        try:
            await asyncio.shield(task)
        except asyncio.CancelledError:
            if not task.cancelled():
                raise

    def __repr__(self) -> str:
        return f"Debouncer(name={self.name!r}, delay={self.delay}, pending={self.pending})"

    async def _fire_later(self, token: int, value: Any) -> None:
        await asyncio.sleep(self.delay)
        if token != self._token:
            return
        try:
            result = self.callback(value)
            if asyncio.iscoroutine(result):
                await result
        except Exception:
            # Nobody awaits this task; log here or the error is lost
            logger.exception("%s: callback failed for value %r", self.name, value)


def _current_task() -> Optional[asyncio.Task]:
    try:
        return asyncio.current_task()
    except RuntimeError:
        return None
