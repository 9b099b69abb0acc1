"""
Helper functions for shaping invoice and customer rows.

Extracts the formatting and matching rules shared by several services.
"""
from decimal import Decimal
from typing import Any, Dict, Iterable, Optional

from ..config.constants import CURRENCY_SYMBOL


def format_currency(amount: Any, symbol: Optional[str] = None) -> str:
    """
    Format integer cents as a currency display string.

    Args:
        amount: Amount in cents (int, or a float with no fractional cents)
        symbol: Currency symbol, defaults to CURRENCY_SYMBOL

    Returns:
        str: e.g. 123456 -> "$1,234.56", -500 -> "-$5.00"
    """
    if isinstance(amount, bool) or not isinstance(amount, (int, float, Decimal)):
        raise TypeError(f"amount must be numeric cents, got {type(amount).__name__}")

    symbol = CURRENCY_SYMBOL if symbol is None else symbol
    value = Decimal(str(amount)) / 100
    sign = "-" if value < 0 else ""
    return f"{sign}{symbol}{abs(value):,.2f}"


def cents_to_decimal(amount: Any) -> float:
    """Convert integer cents to a decimal amount (12345 -> 123.45)."""
    if isinstance(amount, bool) or not isinstance(amount, (int, float)):
        raise TypeError(f"amount must be numeric cents, got {type(amount).__name__}")
    return amount / 100


def sum_amounts(rows: Iterable[Dict[str, Any]], status: Optional[str] = None) -> int:
    """Sum the amount of each row, treating missing amounts as 0.

    When status is given only rows with that exact status are counted, so
    unknown statuses fall out of every total.
    """
    total = 0
    for row in rows:
        if status is not None and row.get("status") != status:
            continue
        total += row.get("amount") or 0
    return total


def customer_fields(row: Dict[str, Any]) -> Dict[str, str]:
    """Flatten the embedded customer relation, defaulting each field to ""."""
    customer = row.get("customers") or {}
    return {
        "name": customer.get("name") or "",
        "email": customer.get("email") or "",
        "image_url": customer.get("image_url") or "",
    }


def _as_text(value: Any) -> Optional[str]:
    if value is None:
        return None
    if isinstance(value, float) and value.is_integer():
        value = int(value)
    return str(value)


def _as_lower(value: Any) -> Optional[str]:
    text = _as_text(value)
    return text.lower() if text is not None else None


def invoice_matches(invoice: Dict[str, Any], query: str) -> bool:
    """
    Invoice search predicate used by the invoice table and its page count.

    Case-insensitive substring match of the query against customer name,
    customer email, amount (integer cents as digits), date and status.
    Absent fields never match.
    """
    needle = query.lower()
    customer = invoice.get("customers") or {}
    candidates = (
        _as_lower(customer.get("name")),
        _as_lower(customer.get("email")),
        _as_text(invoice.get("amount")),
        _as_text(invoice.get("date")),
        _as_lower(invoice.get("status")),
    )
    return any(value is not None and needle in value for value in candidates)
