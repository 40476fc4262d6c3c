# src/xswap/adapters/formatting/formatter.py
"""
Message Formatter - Text Formatting and Presentation

This module renders the swap form, balances and the currency catalog as plain
text lines for the console front end. It only reads snapshots; it never
touches the controller or the ledger.

Files that USE this module:
- xswap.app (console rendering)
- tests.test_formatter (unit tests)

Files that this module USES:
- xswap.application.conversion (format_amount for fixed decimals)
- xswap.application.swap_form (FormSnapshot)
- xswap.domain.models (Catalog, Message, MessageKind)
- xswap.shared.messages (labels)
"""
from __future__ import annotations

from typing import List, Mapping, Optional

from xswap.application.conversion import format_amount
from xswap.application.swap_form import FormSnapshot
from xswap.domain.models import Catalog, Message, MessageKind
from xswap.shared.messages import MESSAGES


def format_balance(balance: Optional[float], decimals: int = 4) -> str:
    """
    Format a balance line.
    
    Args:
        balance: Balance amount, or None when the ledger has no entry
        decimals: Number of decimal places (default: 4)
        
    Returns:
        "Balance: 10.0000", or "" when there is no balance to show
    """
    if balance is None:
        return ""
    return f"{MESSAGES['balance_label']}: {format_amount(balance, decimals)}"


def format_message(message: Message) -> str:
    """
    Format the form's result message.

    Returns:
        "✖ text" for errors, "✔ text" for successes, "" for no message
    """
    if message.kind == MessageKind.ERROR:
        return f"✖ {message.text}"
    if message.kind == MessageKind.SUCCESS:
        return f"✔ {message.text}"
    return ""


def balance_lines(balances: Mapping[str, float], decimals: int = 4) -> str:
    """
    Format all balances, one currency per line, sorted by symbol.
    
    Args:
        balances: Currency -> amount
        decimals: Number of decimal places (default: 4)
    """
    if not balances:
        return "(no balances)"
    width = max(len(symbol) for symbol in balances)
    return "\n".join(
        f"{symbol.ljust(width)}  {format_amount(amount, decimals)}"
        for symbol, amount in sorted(balances.items())
    )


def catalog_lines(catalog: Optional[Catalog], limit: Optional[int] = None) -> str:
    """
    Format the currency catalog with prices.

    Currencies without a price are shown with "N/A".
    """
    if catalog is None:
        return "Catalog not loaded"
    if not catalog.currencies:
        return "(no currencies)"
    currencies = catalog.currencies if limit is None else catalog.currencies[:limit]
    width = max(len(c.id) for c in currencies)
    lines = []
    for c in currencies:
        price = catalog.price_of(c.id)
        price_text = f"${price:,.4f}" if price is not None else "N/A ⚠️"
        lines.append(f"{c.id.ljust(width)}  {price_text}  {c.name}")
    return "\n".join(lines)


def form_lines(snap: FormSnapshot, balance_decimals: int = 4) -> str:
    """
    Render the swap form.

    Args:
        snap: FormSnapshot from the controller
        balance_decimals: Decimals for balance lines (default: 4)

    Returns:
        Multi-line plain text
    """
    lines: List[str] = [f"== {MESSAGES['swap_form_title']} =="]

    message = format_message(snap.message)
    if message:
        lines.append(message)

    lines.append(
        f"{MESSAGES['pay_label']}: {snap.from_amount or '0'} {snap.from_currency or '-'}"
    )
    from_balance = format_balance(snap.from_balance, balance_decimals)
    if from_balance:
        lines.append(f"   {from_balance}")

    receive = MESSAGES["calculating_status"] if snap.calculating else (snap.to_amount or "0")
    lines.append(f"{MESSAGES['receive_label']}: {receive} {snap.to_currency or '-'}")
    to_balance = format_balance(snap.to_balance, balance_decimals)
    if to_balance:
        lines.append(f"   {to_balance}")

    if snap.submitting:
        button = MESSAGES["submitting_status"]
    elif snap.can_submit:
        button = f"[{MESSAGES['swap_button_text']}]"
    else:
        button = f"[{MESSAGES['swap_button_text']}] (disabled)"
    lines.append(button)
    return "\n".join(lines)
