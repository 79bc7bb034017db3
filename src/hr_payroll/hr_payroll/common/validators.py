from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal, InvalidOperation
from typing import Any

from ..core.constants import MAX_MONEY_AMOUNT, MONEY_PLACES
from ..core.exceptions import InvalidInputError


def round_money(value: Decimal) -> Decimal:
    """Round to kobo, half-up."""
    return value.quantize(MONEY_PLACES, rounding=ROUND_HALF_UP)


def require_money(value: Any, field_name: str) -> Decimal:
    """Convert a boundary value into a non-negative, finite Decimal amount
    no larger than ``MAX_MONEY_AMOUNT``.

    Accepts Decimal, int, float and numeric strings. Floats go through ``str``
    so 0.1 becomes Decimal("0.1") rather than its binary expansion.
    """

    if value is None:
        raise InvalidInputError(f"{field_name} is required")
    if isinstance(value, bool):
        raise InvalidInputError(f"{field_name} must be a number")

    if isinstance(value, Decimal):
        amount = value
    elif isinstance(value, (int, float)):
        amount = Decimal(str(value))
    elif isinstance(value, str):
        try:
            amount = Decimal(value.strip())
        except InvalidOperation:
            raise InvalidInputError(f"{field_name} must be a number, got {value!r}")
    else:
        raise InvalidInputError(f"{field_name} must be a number, got {type(value).__name__}")

    if not amount.is_finite():
        raise InvalidInputError(f"{field_name} must be finite")
    if amount < 0:
        raise InvalidInputError(f"{field_name} cannot be negative")
    if amount > MAX_MONEY_AMOUNT:
        raise InvalidInputError(f"{field_name} exceeds the maximum of {MAX_MONEY_AMOUNT}")
    return amount
