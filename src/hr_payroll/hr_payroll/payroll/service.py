from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import date
from decimal import Decimal
from typing import Any, Optional

from ..common.datetime_utils import format_period, now_local, parse_period, period_for
from ..core.constants import DEFAULT_HISTORY_LIMIT
from ..core.enums import FilingType, PayrollStatus
from ..core.exceptions import (
    InvalidEmployeeRecordError,
    InvalidInputError,
    NotFoundError,
    PayrollAlreadyProcessedError,
)
from ..employees.model import Employee
from ..employees.repository import EmployeeRepository
from .aggregation import sum_breakdowns
from .engine import PayrollTaxEngine, compute_payroll_breakdown
from .model import (
    CompensationInput,
    PayrollBreakdown,
    PayrollEntry,
    PayrollRunSummary,
    PayrollStats,
    PayrollTotals,
    TaxFiling,
    money_str,
)
from .repository import PayrollRepository

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class InvalidRecord:
    employee_id: int
    message: str


@dataclass(frozen=True)
class PayrollPreview:
    period: date
    totals: PayrollTotals
    invalid_records: list[InvalidRecord] = field(default_factory=list)


@dataclass(frozen=True)
class ProcessResult:
    period: date
    processed_count: int
    totals: PayrollTotals


@dataclass(frozen=True)
class TaxReport:
    period: date
    rows: list[dict]
    totals: dict
    filing: Optional[TaxFiling] = None


class PayrollService:
    """Use case: run payroll for the active workforce and report on it.

    The tax engine does the arithmetic; this layer decides what happens to bad
    records (preview reports them, processing halts) and talks to storage.
    """

    def __init__(
        self,
        employees: EmployeeRepository,
        payroll: PayrollRepository,
        *,
        engine: Optional[PayrollTaxEngine] = None,
        apply_consolidated_relief: bool = False,
    ):
        self._employees = employees
        self._payroll = payroll
        self._apply_cra = apply_consolidated_relief
        self._engine = engine or PayrollTaxEngine(apply_consolidated_relief=apply_consolidated_relief)

    def calculate(self, basic_salary: Any, allowances: Any = Decimal("0")) -> PayrollBreakdown:
        return compute_payroll_breakdown(
            basic_salary,
            allowances,
            apply_consolidated_relief=self._apply_cra,
        )

    def _compute_for(self, employee: Employee) -> PayrollBreakdown:
        try:
            comp = CompensationInput(basic_salary=employee.basic_salary, allowances=employee.allowances)
        except InvalidInputError as e:
            raise InvalidEmployeeRecordError(employee.employee_id, str(e)) from e
        return self._engine.compute(comp)

    def breakdown_for_employee(self, employee_id: int) -> tuple[Employee, PayrollBreakdown]:
        employee = self._employees.get_by_id(int(employee_id))
        if not employee:
            raise NotFoundError(f"Employee {employee_id} not found")
        return employee, self._compute_for(employee)

    def preview(self, period: str) -> PayrollPreview:
        period_date = parse_period(period)

        breakdowns: list[PayrollBreakdown] = []
        invalid: list[InvalidRecord] = []
        for employee in self._employees.list_active():
            try:
                breakdowns.append(self._compute_for(employee))
            except InvalidEmployeeRecordError as e:
                logger.warning("Payroll preview %s skipped employee %s: %s", period, e.employee_id, e.reason)
                invalid.append(InvalidRecord(employee_id=e.employee_id, message=e.reason))

        return PayrollPreview(period=period_date, totals=sum_breakdowns(breakdowns), invalid_records=invalid)

    def process(self, period: str) -> ProcessResult:
        period_date = parse_period(period)
        if self._payroll.exists_for_period(period_date):
            raise PayrollAlreadyProcessedError(f"Payroll already processed for {format_period(period_date)}")

        # Compute the whole run before writing anything: one bad record halts it.
        entries = [
            PayrollEntry(
                employee_id=employee.employee_id,
                period=period_date,
                breakdown=self._compute_for(employee),
                status=PayrollStatus.PROCESSED,
            )
            for employee in self._employees.list_active()
        ]

        written = self._payroll.save_entries(entries)
        totals = sum_breakdowns(e.breakdown for e in entries)
        logger.info(
            "Processed payroll %s: %d employees, net %s",
            format_period(period_date),
            written,
            money_str(totals.net_pay),
        )
        return ProcessResult(period=period_date, processed_count=written, totals=totals)

    def history(self, *, limit: int = DEFAULT_HISTORY_LIMIT) -> list[PayrollRunSummary]:
        return list(self._payroll.list_history(limit=limit))

    def stats(self, period: str) -> PayrollStats:
        return self._payroll.get_period_stats(parse_period(period))

    def tax_report(self, *, year: int, month: int, record_filing: bool = True) -> TaxReport:
        """PAYE filing report for one month; records a filing unless told not to."""

        period_date = period_for(year, month)
        report_rows = self._payroll.get_tax_report_rows(period_date)

        gross = sum((r.gross_pay for r in report_rows), Decimal("0"))
        paye = sum((r.paye_tax for r in report_rows), Decimal("0"))
        pension = sum((r.pension_contribution for r in report_rows), Decimal("0"))

        filing = None
        if record_filing:
            filing = self._payroll.record_tax_filing(
                filing_type=FilingType.PAYE,
                period_year=period_date.year,
                period_month=period_date.month,
                total_amount=paye,
                created_at=now_local(),
            )
            logger.info(
                "Generated PAYE filing %s for %s (total %s)",
                filing.filing_id,
                format_period(period_date),
                money_str(paye),
            )

        rows = [
            {
                "employee_id": r.employee_id,
                "full_name": r.full_name,
                "tin": r.tin or "-",
                "gross_pay": money_str(r.gross_pay),
                "paye_tax": money_str(r.paye_tax),
                "pension_contribution": money_str(r.pension_contribution),
            }
            for r in report_rows
        ]
        totals = {
            "employee_count": len(report_rows),
            "gross_pay": money_str(gross),
            "paye_tax": money_str(paye),
            "pension_contribution": money_str(pension),
        }
        return TaxReport(period=period_date, rows=rows, totals=totals, filing=filing)
