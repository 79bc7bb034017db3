from __future__ import annotations

from decimal import Decimal
from typing import Sequence

from ...core.exceptions import InvalidInputError
from ..model import TaxBracket


def _bracket(lower: str, upper: str | None, rate: str) -> TaxBracket:
    return TaxBracket(Decimal(lower), Decimal(upper) if upper is not None else None, Decimal(rate))


# Nigerian PAYE schedule (2024), annual income in naira.
NIGERIA_PAYE_2024: tuple[TaxBracket, ...] = (
    _bracket("0", "300000", "0.07"),
    _bracket("300000", "600000", "0.11"),
    _bracket("600000", "1100000", "0.15"),
    _bracket("1100000", "1600000", "0.19"),
    _bracket("1600000", "3200000", "0.21"),
    _bracket("3200000", None, "0.24"),
)


def validate_brackets(brackets: Sequence[TaxBracket]) -> tuple[TaxBracket, ...]:
    """Check that a table starts at 0, is contiguous and ends unbounded."""

    table = tuple(brackets)
    if not table:
        raise ValueError("Bracket table is empty")
    if table[0].lower != 0:
        raise ValueError("First bracket must start at 0")

    for prev, cur in zip(table, table[1:]):
        if prev.upper is None:
            raise ValueError("Only the last bracket may be unbounded")
        if cur.lower != prev.upper:
            raise ValueError(f"Brackets are not contiguous at {prev.upper}")

    for b in table:
        if not (0 < b.rate < 1):
            raise ValueError(f"Rate {b.rate} must be between 0 and 1")
        if b.upper is not None and b.upper <= b.lower:
            raise ValueError(f"Bracket upper bound {b.upper} must exceed {b.lower}")

    if table[-1].upper is not None:
        raise ValueError("Last bracket must be unbounded")
    return table


def progressive_tax(income: Decimal, brackets: Sequence[TaxBracket]) -> Decimal:
    """Annual tax on ``income`` by walking the brackets in ascending order.

    Unrounded; callers decide when to round.
    """

    if income < 0:
        raise InvalidInputError("Annual taxable income cannot be negative")

    tax = Decimal("0")
    for b in brackets:
        if income <= b.lower:
            break
        top = income if b.upper is None else min(income, b.upper)
        tax += (top - b.lower) * b.rate
    return tax
