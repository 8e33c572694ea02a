"""Lenient numeric coercion shared by every cost category total."""

from __future__ import annotations

from collections.abc import Mapping
from decimal import Decimal, InvalidOperation
from typing import Any, Iterable

ZERO = Decimal("0")
ONE = Decimal("1")
HUNDRED = Decimal("100")

# magnitudes beyond 10**MAX_EXPONENT (or below its reciprocal) count as non-finite
MAX_EXPONENT = 100


def to_decimal(value: Any) -> Decimal:
    """Coerce loosely typed client input to a finite ``Decimal``.

    Numbers and numeric strings parse; anything else (``None``, booleans,
    blank or non-numeric strings, NaN, infinities, magnitudes beyond
    ``1e100``) becomes zero.
    """

    if value is None or isinstance(value, bool):
        return ZERO
    if isinstance(value, Decimal):
        number = value
    elif isinstance(value, int):
        number = Decimal(value)
    elif isinstance(value, float):
        number = Decimal(str(value))
    elif isinstance(value, str):
        text = value.strip()
        if not text or "_" in text:
            return ZERO
        try:
            number = Decimal(text)
        except InvalidOperation:
            return ZERO
    else:
        return ZERO
    if not number.is_finite() or not number:
        return ZERO
    if abs(number.adjusted()) > MAX_EXPONENT:
        return ZERO
    return number


def _amount_of(item: Any) -> Any:
    if isinstance(item, Mapping):
        return item.get("amount")
    return getattr(item, "amount", None)


def sum_line_items(items: Iterable[Any] | None) -> Decimal:
    """Total the ``amount`` of each line item; a missing sequence totals zero."""

    total = ZERO
    for item in items or ():
        total += to_decimal(_amount_of(item))
    return total


def percent_of(base: Decimal, percent: Decimal) -> Decimal:
    if not percent:
        return ZERO
    return base * percent / HUNDRED
