# src/xswap/application/swap_form.py
"""
Swap Form Controller - Orchestration of the Conversion and Swap Flow

This module owns the transient swap form state and sequences the pipeline:
raw amount -> debounce -> delayed calculation -> (on submit) validation ->
swap executor -> ledger. It exposes read-only snapshots to whatever renders
the form and never lets a superseded calculation reach the visible state.

Files that USE this module:
- xswap.app (console front end drives the controller)
- tests.test_swap_form (unit and scenario tests)

Files that this module USES:
- xswap.application.debounce (Debouncer for amount and calculation timers)
- xswap.application.conversion (convert, parse_amount, format_amount)
- xswap.application.ledger (BalanceLedger for balances and post-swap mutation)
- xswap.application.swap_executor (SwapExecutor contract)
- xswap.application.catalog_service (CatalogService for load_catalog)
- xswap.domain (models and errors)
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, List, Optional, Tuple

from xswap.application.catalog_service import CatalogService
from xswap.application.conversion import convert, format_amount, parse_amount
from xswap.application.debounce import Debouncer
from xswap.application.ledger import BalanceLedger
from xswap.application.swap_executor import SwapExecutor
from xswap.domain.errors import (
    CatalogUnavailableError,
    InsufficientBalanceError,
    InvalidAmountError,
    InvalidCurrenciesError,
    SameCurrencyError,
    SwapFailedError,
    SwapValidationError,
)
from xswap.domain.models import Catalog, Message, NO_MESSAGE, SwapPhase
from xswap.shared.messages import MESSAGES

logger = logging.getLogger(__name__)

# (amount, from_currency, to_currency) a pending calculation was scheduled for
CalculationRequest = Tuple[float, str, str]


@dataclass
class SwapFormState:
    """Mutable per-session form state. Only the controller writes to it."""
    from_amount: str = ""
    to_amount: str = ""
    from_currency: str = ""
    to_currency: str = ""
    debounced_from_amount: str = ""
    submitting: bool = False
    calculating: bool = False
    message: Message = NO_MESSAGE
    phase: SwapPhase = SwapPhase.IDLE


@dataclass(frozen=True)
class FormSnapshot:
    """Read-only view of the form handed to listeners and renderers."""
    from_amount: str
    to_amount: str
    from_currency: str
    to_currency: str
    submitting: bool
    calculating: bool
    message: Message
    phase: SwapPhase
    can_submit: bool
    from_balance: Optional[float]
    to_balance: Optional[float]


Listener = Callable[[FormSnapshot], None]


class SwapFormController:
    """
    Orchestrates debounce, calculation and swap submission for one session.

    All methods must be called from the event loop thread; the timers run as
    tasks on that loop.
    """

    def __init__(self, ledger: BalanceLedger, executor: SwapExecutor,
                 catalog: Optional[Catalog] = None,
                 amount_delay: float = 0.5, calculation_delay: float = 0.3,
                 decimals: int = 4):
        """
        Initialize the controller.

        Args:
            ledger: Session balance ledger (shared with the renderer for reads)
            executor: Swap executor used on submit
            catalog: Optional already-loaded catalog; otherwise call load_catalog()
            amount_delay: Quiet period for the raw amount, seconds (default: 0.5)
            calculation_delay: Delay before computing the "to" amount, seconds (default: 0.3)
            decimals: Decimals of the computed "to" amount (default: 4)
        """
        self.ledger = ledger
        self.executor = executor
        self.decimals = decimals
        self.catalog: Optional[Catalog] = None
        self.state = SwapFormState()
        self._listeners: List[Listener] = []
        self._amount_debouncer: Debouncer[str] = Debouncer(
            amount_delay, self._on_amount_settled, name="amount-debounce"
        )
        self._calc_debouncer: Debouncer[CalculationRequest] = Debouncer(
            calculation_delay, self._on_calculation_due, name="calculation"
        )
        if catalog is not None:
            self.reset(catalog)

    # ------------------------------------------------------------------
    # Catalog lifecycle
    # ------------------------------------------------------------------

    async def load_catalog(self, service: CatalogService) -> bool:
        """
        Load the catalog and reset the form to its defaults.

        Returns:
            True if the catalog loaded, False if it was unavailable (the form
            then stays unpopulated and swaps stay disabled)
        """
        try:
            catalog = await service.load()
        except CatalogUnavailableError as e:
            logger.error("Swap form left unpopulated, catalog unavailable: %s", e)
            self.state.message = Message.error(e.user_message)
            self._notify()
            return False
        self.reset(catalog)
        return True

    def reset(self, catalog: Catalog) -> None:
        """Install a catalog and reset all form fields; first two currencies become the default pair."""
        self._amount_debouncer.cancel()
        self._calc_debouncer.cancel()
        self.catalog = catalog
        ids = catalog.ids()
        self.state = SwapFormState(
            from_currency=ids[0] if len(ids) >= 1 else "",
            to_currency=ids[1] if len(ids) >= 2 else "",
        )
        logger.info("Swap form reset: from=%r to=%r (%d currencies)",
                    self.state.from_currency, self.state.to_currency, len(ids))
        self._notify()

    # ------------------------------------------------------------------
    # Read side
    # ------------------------------------------------------------------

    @property
    def catalog_loaded(self) -> bool:
        return self.catalog is not None

    @property
    def to_amount(self) -> str:
        """Computed "to" amount (read-only)."""
        return self.state.to_amount

    @property
    def message(self) -> Message:
        return self.state.message

    @property
    def can_submit(self) -> bool:
        """True when a submission now would pass validation and nothing is in flight."""
        if self.state.submitting or self.state.calculating or not self.catalog_loaded:
            return False
        try:
            self.validate()
        except SwapValidationError:
            return False
        return True

    def snapshot(self) -> FormSnapshot:
        s = self.state
        return FormSnapshot(
            from_amount=s.from_amount,
            to_amount=s.to_amount,
            from_currency=s.from_currency,
            to_currency=s.to_currency,
            submitting=s.submitting,
            calculating=s.calculating,
            message=s.message,
            phase=s.phase,
            can_submit=self.can_submit,
            from_balance=self._balance_or_none(s.from_currency),
            to_balance=self._balance_or_none(s.to_currency),
        )

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """
        Register a listener called with a FormSnapshot after each state change.

        Returns:
            A function that unregisters the listener
        """
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    # ------------------------------------------------------------------
    # User input
    # ------------------------------------------------------------------

    def set_from_amount(self, text: str) -> None:
        """Accept raw amount text; the calculation follows once it settles."""
        self.state.from_amount = text
        self._amount_debouncer.push(text)
        self._notify()

    def set_from_currency(self, currency_id: str) -> None:
        """Select the "from" currency; clears both amounts and the message."""
        self.state.from_currency = currency_id
        self.state.from_amount = ""
        self.state.to_amount = ""
        self.state.debounced_from_amount = ""
        self.state.message = NO_MESSAGE
        # The cleared amount settles through the debounce like any other edit
        self._calc_debouncer.cancel()
        self.state.calculating = False
        self._amount_debouncer.push("")
        self._notify()

    def set_to_currency(self, currency_id: str) -> None:
        self.state.to_currency = currency_id
        self._schedule_calculation()
        self._notify()

    def set_max_amount(self) -> None:
        """Fill the amount with the full balance of the "from" currency."""
        currency = self.state.from_currency
        if not currency or not self.ledger.has(currency):
            return
        balance = self.ledger.get(currency)
        if balance <= 0:
            return
        self.set_from_amount(_amount_text(balance))

    def reverse(self) -> None:
        """
        Swap the direction of the pair.

        Exchanges the two currencies. When both amounts are filled and settled
        they are exchanged too and nothing is recomputed; otherwise the "to"
        amount is cleared and recalculated for the reversed pair.
        """
        s = self.state
        s.from_currency, s.to_currency = s.to_currency, s.from_currency
        # The displayed "to" amount belongs to the current inputs only when nothing is in flight
        settled = not (s.calculating or self._calc_debouncer.pending or self._amount_debouncer.pending)
        # A calculation pending for the old pair must not land on the new one
        self._calc_debouncer.cancel()
        s.calculating = False
        if settled and s.from_amount and s.to_amount:
            s.from_amount, s.to_amount = s.to_amount, s.from_amount
            s.debounced_from_amount = s.from_amount
        else:
            s.to_amount = ""
            # A pending amount debounce schedules the calculation when it settles
            if not self._amount_debouncer.pending:
                self._schedule_calculation()
        logger.debug("Pair reversed: %s -> %s", s.from_currency, s.to_currency)
        self._notify()

    # ------------------------------------------------------------------
    # Validation and submission
    # ------------------------------------------------------------------

    def validate(self) -> float:
        """
        Run the pre-submission checks in order, stopping at the first failure.

        Returns:
            The parsed amount

        Raises:
            InvalidAmountError: Amount empty, unparsable or not > 0
            SameCurrencyError: From and to currencies are equal
            InvalidCurrenciesError: Either currency has no known price
            InsufficientBalanceError: Amount exceeds the "from" balance
        """
        s = self.state
        amount = parse_amount(s.from_amount)
        if amount is None or amount <= 0:
            raise InvalidAmountError()
        if s.from_currency == s.to_currency:
            raise SameCurrencyError()
        if self._price(s.from_currency) is None or self._price(s.to_currency) is None:
            raise InvalidCurrenciesError()
        if not self.ledger.can_afford(s.from_currency, amount):
            raise InsufficientBalanceError()
        return amount

    async def submit(self) -> Message:
        """
        Validate and execute a swap.

        Validation failures and executor failures end the attempt with an
        error message; balances change only after a settled swap.

        Returns:
            The resulting message (also stored on the form)
        """
        s = self.state
        if s.submitting:
            logger.warning("Swap already in flight, submission ignored")
            return s.message

        try:
            amount = self.validate()
        except SwapValidationError as e:
            logger.info("Swap rejected: %s", type(e).__name__)
            s.message = Message.error(e.user_message)
            self._notify()
            return s.message

        from_currency, to_currency = s.from_currency, s.to_currency
        from_price = self._price(from_currency)
        to_price = self._price(to_currency)

        s.submitting = True
        s.phase = SwapPhase.SUBMITTING
        s.message = NO_MESSAGE
        self._notify()

        try:
            receipt = await self.executor.execute(from_currency, to_currency, amount)
            credit = convert(amount, from_price, to_price)
            self.ledger.apply(from_currency, amount, to_currency, credit)
        except SwapFailedError as e:
            self._fail(e.user_message)
        except SwapValidationError as e:
            # The ledger refused the debit after settlement
            logger.error("Ledger rejected settled swap: %s", e)
            self._fail(e.user_message)
        except Exception:
            logger.exception("Unexpected error while executing swap")
            self._fail(MESSAGES["errors"]["swap_failed"])
        else:
            s.phase = SwapPhase.SETTLED
            s.message = Message.success(receipt.message)
            self._clear_amounts()
            self._notify()
        finally:
            s.submitting = False
            s.phase = SwapPhase.IDLE
            self._notify()
        return s.message

    async def drain(self) -> None:
        """Wait until no debounce or calculation timer is pending."""
        while self._amount_debouncer.pending or self._calc_debouncer.pending:
            await self._amount_debouncer.wait()
            await self._calc_debouncer.wait()

    def close(self) -> None:
        """Cancel pending timers and drop listeners (end of session)."""
        self._amount_debouncer.cancel()
        self._calc_debouncer.cancel()
        self.state.calculating = False
        self._listeners.clear()

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _on_amount_settled(self, text: str) -> None:
        self.state.debounced_from_amount = text
        self._schedule_calculation()
        self._notify()

    def _schedule_calculation(self) -> None:
        s = self.state
        self._calc_debouncer.cancel()
        amount = parse_amount(s.debounced_from_amount)
        if amount is None or amount <= 0 or not (s.from_currency and s.to_currency):
            s.to_amount = ""
            s.calculating = False
            return
        if s.from_currency == s.to_currency:
            # Same currency: the input passes through, no price lookup
            s.to_amount = s.debounced_from_amount.strip()
            s.calculating = False
            return
        s.calculating = True
        self._calc_debouncer.push((amount, s.from_currency, s.to_currency))

    def _on_calculation_due(self, request: CalculationRequest) -> None:
        amount, from_currency, to_currency = request
        s = self.state
        if (from_currency, to_currency) != (s.from_currency, s.to_currency):
            logger.debug("Dropping calculation for stale pair %s/%s", from_currency, to_currency)
            return
        from_price = self._price(from_currency)
        to_price = self._price(to_currency)
        if from_price is None or to_price is None:
            s.to_amount = ""
        else:
            s.to_amount = format_amount(convert(amount, from_price, to_price), self.decimals)
        s.calculating = False
        self._notify()

    def _fail(self, text: str) -> None:
        self.state.phase = SwapPhase.FAILED
        self.state.message = Message.error(text)
        self._notify()

    def _clear_amounts(self) -> None:
        self._amount_debouncer.cancel()
        self._calc_debouncer.cancel()
        s = self.state
        s.from_amount = ""
        s.to_amount = ""
        s.debounced_from_amount = ""
        s.calculating = False

    def _price(self, currency_id: str) -> Optional[float]:
        if self.catalog is None or not currency_id:
            return None
        return self.catalog.price_of(currency_id)

    def _balance_or_none(self, currency_id: str) -> Optional[float]:
        if not currency_id or not self.ledger.has(currency_id):
            return None
        return self.ledger.get(currency_id)

    def _notify(self) -> None:
        if not self._listeners:
            return
        snap = self.snapshot()
        for listener in list(self._listeners):
            try:
                listener(snap)
            except Exception:
                logger.exception("Swap form listener failed")


def _amount_text(value: float) -> str:
    # 10.0 -> "10", 0.5 -> "0.5"
    if float(value).is_integer():
        return str(int(value))
    return repr(float(value))
