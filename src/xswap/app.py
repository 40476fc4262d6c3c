# src/xswap/app.py
"""
Application Entry Point - Session Wiring and Console Front End

This module serves as the composition root for XSwap. It wires the ledger,
catalog service, swap executor and form controller from settings, then runs
a line-oriented console that drives the controller.

Files that USE this module:
- xswap console script (pyproject entry point)
- python -m xswap.app

Files that this module USES:
- xswap.shared.logging_conf (setup_logging for logging configuration)
- xswap.config (settings for configuration management)
- xswap.application.* (controller, ledger, catalog service, executor)
- xswap.adapters.formatting.formatter (console rendering)
"""

from __future__ import annotations  # Enable postponed evaluation of annotations for forward references

import asyncio  # Event loop for timers and the simulated swap
import logging  # Standard library for logging messages and errors
import sys  # System-specific parameters and functions for exit codes
from dataclasses import dataclass  # Bundle of session objects
from typing import Callable, Optional  # Type hints for injected I/O

from xswap.adapters.formatting.formatter import (
    balance_lines,  # All balances, one per line
    catalog_lines,  # Catalog with prices
    form_lines,  # Swap form rendering
    format_message,  # Result message line
)
from xswap.application.catalog_service import CatalogService, build_catalog_provider
from xswap.application.ledger import BalanceLedger
from xswap.application.swap_executor import SimulatedSwapExecutor
from xswap.application.swap_form import FormSnapshot, SwapFormController
from xswap.config.settings import Settings
from xswap.shared.logging_conf import setup_logging  # Configure logging with file rotation
from xswap.shared.messages import MESSAGES
from xswap.shared.validators import sanitize_user_input

logger = logging.getLogger(__name__)

HELP_TEXT = """Commands:
  amount <value>   set the amount to pay
  from <SYMBOL>    select the currency to pay with (clears the amount)
  to <SYMBOL>      select the currency to receive
  reverse          swap the direction of the pair
  max              pay with the full balance
  swap             submit the swap
  show             show the form
  balances         show all balances
  currencies       list tradable currencies
  help             show this text
  quit             leave"""


@dataclass
class Session:
    """Objects living for one console session."""
    controller: SwapFormController
    catalog_service: CatalogService
    ledger: BalanceLedger
    settings: Settings


def build_session(cfg: Settings) -> Session:
    """
    Wire a session from settings.

    The ledger is seeded from cfg.initial_balances; the executor and the
    controller timings come from cfg.
    """
    ledger = BalanceLedger(cfg.initial_balances)
    executor = SimulatedSwapExecutor(
        latency=cfg.swap_latency_seconds,
        success_rate=cfg.swap_success_rate,
        fee_pct=cfg.swap_fee_pct,
        decimals=cfg.amount_decimals,
    )
    controller = SwapFormController(
        ledger,
        executor,
        amount_delay=cfg.amount_debounce_seconds,
        calculation_delay=cfg.calculation_delay_seconds,
        decimals=cfg.amount_decimals,
    )
    service = CatalogService(build_catalog_provider(cfg.catalog_source))
    return Session(controller=controller, catalog_service=service, ledger=ledger, settings=cfg)


class ConsoleFrontEnd:
    """
    Line-oriented driver over a SwapFormController.

    Input is read in a worker thread so debounce and swap timers keep running
    while the prompt waits.
    """

    def __init__(self, session: Session,
                 read_line: Callable[[str], str] = input,
                 write: Callable[[str], None] = print):
        self.session = session
        self.controller = session.controller
        self.read_line = read_line
        self.write = write
        self._last: Optional[FormSnapshot] = None
        self._swap_task: Optional[asyncio.Task] = None
        self.controller.subscribe(self._on_change)

    def _on_change(self, snap: FormSnapshot) -> None:
        last = self._last
        self._last = snap
        if last is None:
            return
        if snap.submitting and not last.submitting:
            self.write(MESSAGES["submitting_status"])
            return
        calculation_done = last.calculating and not snap.calculating and snap.to_amount
        swap_done = last.submitting and not snap.submitting
        new_message = snap.message != last.message and snap.message.text and not snap.submitting
        if calculation_done or swap_done or new_message:
            self.write(form_lines(snap, self.session.settings.balance_decimals))

    def show(self) -> None:
        self.write(form_lines(self.controller.snapshot(), self.session.settings.balance_decimals))

    async def run(self) -> None:
        """Load the catalog, then process commands until quit or end of input."""
        cfg = self.session.settings
        loaded = await self.controller.load_catalog(self.session.catalog_service)
        if not loaded:
            self.write(format_message(self.controller.message))
            self.write("Swaps are disabled for this session.")
        self.show()
        self.write("Type 'help' for commands.")

        while True:
            try:
                raw = await asyncio.to_thread(self.read_line, "> ")
            except EOFError:
                break
            line = sanitize_user_input(raw)
            if not line:
                continue
            if not await self.handle(line):
                break

        if self._swap_task is not None and not self._swap_task.done():
            self.write("Waiting for the swap in flight to settle...")
            await self._swap_task
        self.controller.close()
        logger.info("Console session ended; final balances: %s", self.session.ledger.snapshot())
        self.write(balance_lines(self.session.ledger.snapshot(), cfg.balance_decimals))

    async def handle(self, line: str) -> bool:
        """
        Execute one command line.

        Returns:
            False when the session should end
        """
        command, _, arg = line.partition(" ")
        command = command.lower()
        arg = arg.strip()
        c = self.controller

        if command in ("quit", "exit"):
            return False
        if command == "help":
            self.write(HELP_TEXT)
        elif command == "amount":
            c.set_from_amount(arg)
        elif command == "from":
            if self._check_currency(arg.upper()):
                c.set_from_currency(arg.upper())
                self.show()
        elif command == "to":
            if self._check_currency(arg.upper()):
                c.set_to_currency(arg.upper())
                self.show()
        elif command == "reverse":
            if c.state.submitting:
                self.write("A swap is in flight.")
            else:
                c.reverse()
                self.show()
        elif command == "max":
            c.set_max_amount()
        elif command == "swap":
            self._submit()
        elif command == "show":
            self.show()
        elif command == "balances":
            self.write(balance_lines(self.session.ledger.snapshot(), self.session.settings.balance_decimals))
        elif command == "currencies":
            self.write(catalog_lines(c.catalog))
        else:
            self.write(f"Unknown command: {command}. Type 'help'.")
        return True

    def _check_currency(self, symbol: str) -> bool:
        catalog = self.controller.catalog
        if catalog is None or symbol not in catalog.ids():
            self.write(f"Unknown currency: {symbol or '(empty)'}")
            return False
        return True

    def _submit(self) -> None:
        c = self.controller
        if c.state.submitting:
            self.write("A swap is already in flight.")
            return
        if c.state.calculating:
            self.write("Still calculating, try again in a moment.")
            return
        self._swap_task = asyncio.get_running_loop().create_task(c.submit(), name="swap-submit")


async def run_console(session: Session) -> None:
    await ConsoleFrontEnd(session).run()


def main() -> None:
    """
    Initialize and start a console swap session.

    This function:
    1. Loads settings and sets up logging
    2. Wires ledger, catalog service, executor and controller
    3. Runs the console loop until quit
    """
    # Import settings here so a bad .env is reported through the normal path
    from xswap.config import settings

    setup_logging(
        level=logging.INFO,
        log_file=settings.log_file,
        log_dir=settings.log_dir,
        max_bytes=settings.log_max_bytes,
        backup_count=settings.log_backup_count,
        log_to_stdout=settings.log_stdout,
    )

    logger.info(
        "Starting XSwap session: catalog=%s, debounce=%dms, calculation=%dms, latency=%dms",
        settings.catalog_source,
        settings.amount_debounce_ms,
        settings.calculation_delay_ms,
        settings.swap_latency_ms,
    )

    session = build_session(settings)
    try:
        asyncio.run(run_console(session))
    except KeyboardInterrupt:
        logger.info("Session stopped by user (KeyboardInterrupt)")
        sys.exit(130)
    except Exception as e:
        logger.exception("Unexpected error during session: %s (type: %s)", e, type(e).__name__)
        raise


if __name__ == "__main__":
    main()
