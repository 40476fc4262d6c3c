# src/xswap/shared/messages.py
"""
User-facing Messages - Literal Texts for the Swap Form

All texts shown to the user live here so the domain errors, the controller
and the console front end share one source.

Files that USE this module:
- xswap.domain.errors (default error texts)
- xswap.application.swap_executor (success message)
- xswap.adapters.formatting.formatter (labels)
"""
from typing import Any, Dict

MESSAGES: Dict[str, Any] = {
    "swap_form_title": "Currency Swap",
    "pay_label": "You pay",
    "receive_label": "You receive",
    "swap_button_text": "Swap",
    "calculating_status": "Calculating...",
    "submitting_status": "Swapping...",
    "balance_label": "Balance",
    "errors": {
        "invalid_amount": "Please enter a valid amount to swap.",
        "same_currency": "Cannot swap to the same currency.",
        "invalid_currencies": "Invalid currencies selected.",
        "swap_failed": "An unknown error occurred.",
        "insufficient_balance": "Insufficient balance to perform the swap.",
        "catalog_unavailable": "Unable to load currency prices.",
    },
    "success": {
        "swap_success": "Successfully swapped {amount} {from_currency} for {received} {to_currency}.",
    },
}


def swap_success_message(amount: float, from_currency: str, to_currency: str,
                         fee_pct: float = 1.0, decimals: int = 4) -> str:
    """
    Build the success text shown after a settled swap.

    The received figure applies the display fee to the *input* amount, the
    same figure the form has always shown. It is not the credited amount.
    """
    received = amount * (1 - fee_pct / 100.0)
    return MESSAGES["success"]["swap_success"].format(
        amount=_plain_number(amount),
        from_currency=from_currency,
        received=f"{received:.{decimals}f}",
        to_currency=to_currency,
    )


def _plain_number(value: float) -> str:
    # 5.0 -> "5", 0.25 -> "0.25"
    if float(value).is_integer():
        return str(int(value))
    return repr(float(value))
