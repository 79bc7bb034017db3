from __future__ import annotations

from decimal import Decimal
from typing import Iterable

from .model import PayrollBreakdown, PayrollTotals

_SUMMED_FIELDS = (
    "gross_pay",
    "paye_tax",
    "pension_contribution",
    "nhf_contribution",
    "nsitf_contribution",
    "itf_contribution",
    "total_deductions",
    "net_pay",
)


def sum_breakdowns(breakdowns: Iterable[PayrollBreakdown]) -> PayrollTotals:
    """Field-wise total of a completed run's breakdowns."""

    sums = {name: Decimal("0") for name in _SUMMED_FIELDS}
    count = 0
    for b in breakdowns:
        count += 1
        for name in _SUMMED_FIELDS:
            sums[name] += getattr(b, name)
    return PayrollTotals(employee_count=count, **sums)
