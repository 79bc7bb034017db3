from __future__ import annotations

from dataclasses import dataclass, fields
from datetime import date, datetime
from decimal import Decimal
from typing import Any, Optional

from ..common.validators import require_money
from ..core.enums import FilingStatus, FilingType, PayrollStatus

ZERO = Decimal("0")


def money_str(value: Decimal) -> str:
    return f"{value:.2f}"


@dataclass(frozen=True)
class CompensationInput:
    """Monthly compensation snapshot for one employee.

    Values are converted to Decimal on construction; anything negative,
    non-finite, missing or too large to store raises InvalidInputError.
    """

    basic_salary: Decimal
    allowances: Decimal = ZERO

    def __post_init__(self) -> None:
        object.__setattr__(self, "basic_salary", require_money(self.basic_salary, "basic_salary"))
        object.__setattr__(self, "allowances", require_money(self.allowances, "allowances"))
        require_money(self.gross_pay, "gross pay")

    @property
    def gross_pay(self) -> Decimal:
        return self.basic_salary + self.allowances


@dataclass(frozen=True)
class TaxBracket:
    """A band of annual taxable income taxed at ``rate``; ``upper=None`` is unbounded."""

    lower: Decimal
    upper: Optional[Decimal]
    rate: Decimal


@dataclass(frozen=True)
class PayrollBreakdown:
    """Per-employee, per-period result of the tax engine."""

    gross_pay: Decimal
    paye_tax: Decimal
    pension_contribution: Decimal
    nhf_contribution: Decimal
    nsitf_contribution: Decimal
    itf_contribution: Decimal
    total_deductions: Decimal
    net_pay: Decimal
    annual_taxable_income: Decimal = ZERO
    consolidated_relief: Decimal = ZERO

    def as_dict(self) -> dict[str, str]:
        return {f.name: money_str(getattr(self, f.name)) for f in fields(self)}


@dataclass(frozen=True)
class PayrollTotals:
    """Field-wise sum of many breakdowns, used for run previews and filings."""

    employee_count: int
    gross_pay: Decimal
    paye_tax: Decimal
    pension_contribution: Decimal
    nhf_contribution: Decimal
    nsitf_contribution: Decimal
    itf_contribution: Decimal
    total_deductions: Decimal
    net_pay: Decimal

    @property
    def total_tax(self) -> Decimal:
        """PAYE plus the employer-remitted levies (NHF, NSITF, ITF)."""
        return self.paye_tax + self.nhf_contribution + self.nsitf_contribution + self.itf_contribution

    def as_dict(self) -> dict[str, Any]:
        out: dict[str, Any] = {"employee_count": self.employee_count}
        for f in fields(self):
            if f.name != "employee_count":
                out[f.name] = money_str(getattr(self, f.name))
        out["total_tax"] = money_str(self.total_tax)
        return out


@dataclass(frozen=True)
class PayrollEntry:
    """A persisted breakdown for one employee and payroll month."""

    employee_id: int
    period: date
    breakdown: PayrollBreakdown
    status: PayrollStatus = PayrollStatus.PROCESSED
    entry_id: Optional[int] = None


@dataclass(frozen=True)
class PayrollRunSummary:
    """Read-model for the payroll history listing."""

    period: date
    employee_count: int
    gross_pay: Decimal
    total_deductions: Decimal
    net_pay: Decimal
    total_tax: Decimal
    status: PayrollStatus


@dataclass(frozen=True)
class PayrollStats:
    net_pay_total: Decimal
    pending_payment_count: int
    tax_liability: Decimal

    def as_dict(self) -> dict[str, Any]:
        return {
            "net_pay_total": money_str(self.net_pay_total),
            "pending_payment_count": self.pending_payment_count,
            "tax_liability": money_str(self.tax_liability),
        }


@dataclass(frozen=True)
class TaxReportRow:
    """Read-model behind the PAYE filing report."""

    employee_id: int
    full_name: str
    tin: Optional[str]
    gross_pay: Decimal
    paye_tax: Decimal
    pension_contribution: Decimal


@dataclass(frozen=True)
class TaxFiling:
    filing_id: int
    filing_type: FilingType
    period_year: int
    period_month: int
    total_amount: Decimal
    status: FilingStatus
    created_at: datetime
