from __future__ import annotations

from datetime import date
from decimal import Decimal

import pytest

from src.hr_payroll.hr_payroll.core.enums import EmployeeStatus, FilingStatus, PayrollStatus
from src.hr_payroll.hr_payroll.employees.model import Employee
from src.hr_payroll.hr_payroll.payroll.model import (
    PayrollRunSummary,
    PayrollStats,
    TaxFiling,
    TaxReportRow,
)
from src.hr_payroll.hr_payroll.payroll.service import PayrollService


class FakeEmployeesRepo:
    def __init__(self, employees):
        self._employees = {e.employee_id: e for e in employees}

    def get_by_id(self, employee_id):
        return self._employees.get(int(employee_id))

    def list_active(self):
        return [e for e in self._employees.values() if e.status == EmployeeStatus.ACTIVE]


class FakePayrollRepo:
    def __init__(self):
        self.saved = []
        self.filings = []
        self.report_rows = []
        self.history_rows = []
        self.last_history_limit = None

    def exists_for_period(self, period: date) -> bool:
        return any(e.period == period for e in self.saved)

    def save_entries(self, entries):
        self.saved.extend(entries)
        return len(entries)

    def list_history(self, *, limit):
        self.last_history_limit = limit
        return self.history_rows[:limit]

    def get_period_stats(self, period):
        rows = [e for e in self.saved if e.period == period]
        return PayrollStats(
            net_pay_total=sum((e.breakdown.net_pay for e in rows), Decimal("0")),
            pending_payment_count=sum(1 for e in self.saved if e.status == PayrollStatus.PROCESSED),
            tax_liability=sum(
                (
                    e.breakdown.paye_tax
                    + e.breakdown.nhf_contribution
                    + e.breakdown.nsitf_contribution
                    + e.breakdown.itf_contribution
                    for e in rows
                ),
                Decimal("0"),
            ),
        )

    def get_tax_report_rows(self, period):
        self.last_report_period = period
        return self.report_rows

    def record_tax_filing(self, *, filing_type, period_year, period_month, total_amount, created_at):
        filing = TaxFiling(
            filing_id=len(self.filings) + 1,
            filing_type=filing_type,
            period_year=period_year,
            period_month=period_month,
            total_amount=total_amount,
            status=FilingStatus.GENERATED,
            created_at=created_at,
        )
        self.filings.append(filing)
        return filing


def employee(employee_id, basic, allowances=0, *, full_name=None, tin=None, status=EmployeeStatus.ACTIVE):
    return Employee(
        employee_id=employee_id,
        full_name=full_name or f"Employee {employee_id}",
        tin=tin,
        basic_salary=basic,
        allowances=allowances,
        status=status,
    )


@pytest.fixture
def make_employee():
    return employee


@pytest.fixture
def make_employees_repo():
    return FakeEmployeesRepo


@pytest.fixture
def payroll_repo():
    return FakePayrollRepo()


@pytest.fixture
def employees_repo():
    return FakeEmployeesRepo(
        [
            employee(1, Decimal("300000"), Decimal("50000"), full_name="Ada Obi", tin="TIN-001"),
            employee(2, Decimal("100000"), Decimal("0"), full_name="Bola Ade"),
        ]
    )


@pytest.fixture
def service(employees_repo, payroll_repo):
    return PayrollService(employees_repo, payroll_repo)


@pytest.fixture
def report_rows():
    return [
        TaxReportRow(
            employee_id=1,
            full_name="Ada Obi",
            tin="TIN-001",
            gross_pay=Decimal("350000.00"),
            paye_tax=Decimal("66666.67"),
            pension_contribution=Decimal("28000.00"),
        ),
        TaxReportRow(
            employee_id=2,
            full_name="Bola Ade",
            tin=None,
            gross_pay=Decimal("100000.00"),
            paye_tax=Decimal("12333.33"),
            pension_contribution=Decimal("8000.00"),
        ),
    ]


@pytest.fixture
def history_rows():
    return [
        PayrollRunSummary(
            period=date(2024, 5, 1),
            employee_count=2,
            gross_pay=Decimal("450000.00"),
            total_deductions=Decimal("140000.00"),
            net_pay=Decimal("310000.00"),
            total_tax=Decimal("99000.00"),
            status=PayrollStatus.PROCESSED,
        )
    ]
