"""Statutory payroll tax engine.

Pure computation: one call turns a monthly CompensationInput into a
PayrollBreakdown. No I/O and no shared state, so one engine instance can be
used from many threads at once.

Rounding policy: gross pay, PAYE and each flat deduction are rounded to kobo
(half-up) individually; total deductions is the sum of the rounded terms and
net pay is gross minus that total, so ``net_pay + total_deductions ==
gross_pay`` holds exactly. Net pay is never clamped at zero.
"""

from __future__ import annotations

from decimal import Decimal
from typing import Any, Optional

from ..common.validators import round_money
from .calculator.base import PayeCalculator
from .calculator.factory import PayeCalculatorFactory
from .deductions import statutory_deductions
from .model import CompensationInput, PayrollBreakdown


class PayrollTaxEngine:
    def __init__(
        self,
        *,
        apply_consolidated_relief: bool = False,
        paye_calculator: Optional[PayeCalculator] = None,
    ):
        self._paye = paye_calculator or PayeCalculatorFactory().for_policy(
            apply_consolidated_relief=apply_consolidated_relief
        )

    @property
    def paye_calculator(self) -> PayeCalculator:
        return self._paye

    def compute(self, comp: CompensationInput) -> PayrollBreakdown:
        gross = round_money(comp.gross_pay)

        paye = self._paye.assess(gross)
        deductions = statutory_deductions(gross)

        total = paye.monthly_paye + deductions.total
        return PayrollBreakdown(
            gross_pay=gross,
            paye_tax=paye.monthly_paye,
            pension_contribution=deductions.pension,
            nhf_contribution=deductions.nhf,
            nsitf_contribution=deductions.nsitf,
            itf_contribution=deductions.itf,
            total_deductions=total,
            net_pay=gross - total,
            annual_taxable_income=round_money(paye.annual_taxable_income),
            consolidated_relief=round_money(paye.consolidated_relief),
        )


def compute_payroll_breakdown(
    basic_salary: Any,
    allowances: Any = Decimal("0"),
    *,
    apply_consolidated_relief: bool = False,
) -> PayrollBreakdown:
    """Validate raw compensation figures and compute their breakdown.

    Raises InvalidInputError for negative, non-finite or missing values
    before any computation happens.
    """

    comp = CompensationInput(basic_salary=basic_salary, allowances=allowances)
    return PayrollTaxEngine(apply_consolidated_relief=apply_consolidated_relief).compute(comp)
