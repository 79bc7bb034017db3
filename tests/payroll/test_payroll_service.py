from __future__ import annotations

from datetime import date
from decimal import Decimal

import pytest

from src.hr_payroll.hr_payroll.core.enums import EmployeeStatus, FilingType, PayrollStatus
from src.hr_payroll.hr_payroll.core.exceptions import (
    InvalidEmployeeRecordError,
    InvalidInputError,
    NotFoundError,
    PayrollAlreadyProcessedError,
    ValidationError,
)
from src.hr_payroll.hr_payroll.payroll.service import PayrollService


def test_calculate_uses_configured_relief_policy(employees_repo, payroll_repo):
    standard = PayrollService(employees_repo, payroll_repo)
    relieved = PayrollService(employees_repo, payroll_repo, apply_consolidated_relief=True)

    assert standard.calculate(300000, 50000).paye_tax == Decimal("66666.67")
    assert relieved.calculate(300000, 50000).paye_tax == Decimal("45966.67")


def test_calculate_rejects_negative_salary(service):
    with pytest.raises(InvalidInputError):
        service.calculate(-1, 0)


def test_breakdown_for_employee(service):
    employee, breakdown = service.breakdown_for_employee(2)

    assert employee.full_name == "Bola Ade"
    assert breakdown.paye_tax == Decimal("12333.33")
    assert breakdown.net_pay == Decimal("75166.67")


def test_breakdown_for_unknown_employee(service):
    with pytest.raises(NotFoundError):
        service.breakdown_for_employee(99)


def test_preview_totals_active_employees(service):
    preview = service.preview("2024-05")

    assert preview.period == date(2024, 5, 1)
    assert preview.totals.employee_count == 2
    assert preview.totals.gross_pay == Decimal("450000.00")
    assert preview.totals.paye_tax == Decimal("79000.00")
    assert preview.totals.net_pay == Decimal("314750.00")
    assert preview.invalid_records == []


def test_preview_reports_invalid_records_and_skips_them(payroll_repo, make_employee, make_employees_repo):
    repo = make_employees_repo(
        [
            make_employee(1, Decimal("300000"), Decimal("50000")),
            make_employee(2, Decimal("-5")),
            make_employee(3, None),
        ]
    )
    preview = PayrollService(repo, payroll_repo).preview("2024-05")

    assert preview.totals.employee_count == 1
    assert [r.employee_id for r in preview.invalid_records] == [2, 3]
    assert "negative" in preview.invalid_records[0].message


def test_preview_ignores_inactive_employees(payroll_repo, make_employee, make_employees_repo):
    repo = make_employees_repo(
        [
            make_employee(1, Decimal("300000"), Decimal("50000")),
            make_employee(2, Decimal("100000"), status=EmployeeStatus.INACTIVE),
        ]
    )
    preview = PayrollService(repo, payroll_repo).preview("2024-05")

    assert preview.totals.employee_count == 1


def test_preview_rejects_bad_month(service):
    with pytest.raises(ValidationError):
        service.preview("2024/05")


def test_process_persists_every_active_employee(service, payroll_repo):
    result = service.process("2024-05")

    assert result.processed_count == 2
    assert result.totals.net_pay == Decimal("314750.00")
    assert [e.employee_id for e in payroll_repo.saved] == [1, 2]
    assert all(e.period == date(2024, 5, 1) for e in payroll_repo.saved)
    assert all(e.status == PayrollStatus.PROCESSED for e in payroll_repo.saved)


def test_process_twice_for_same_month_is_refused(service, payroll_repo):
    service.process("2024-05")

    with pytest.raises(PayrollAlreadyProcessedError):
        service.process("2024-05")
    assert len(payroll_repo.saved) == 2


def test_process_halts_on_invalid_record_without_saving(payroll_repo, make_employee, make_employees_repo):
    repo = make_employees_repo(
        [
            make_employee(1, Decimal("300000"), Decimal("50000")),
            make_employee(7, Decimal("100000"), "lots"),
        ]
    )

    with pytest.raises(InvalidEmployeeRecordError) as exc:
        PayrollService(repo, payroll_repo).process("2024-05")

    assert exc.value.employee_id == 7
    assert payroll_repo.saved == []


def test_history_passes_limit(service, payroll_repo, history_rows):
    payroll_repo.history_rows = history_rows

    runs = service.history(limit=5)

    assert payroll_repo.last_history_limit == 5
    assert runs[0].period == date(2024, 5, 1)


def test_stats_for_processed_month(service):
    service.process("2024-05")

    stats = service.stats("2024-05")

    assert stats.net_pay_total == Decimal("314750.00")
    assert stats.pending_payment_count == 2
    # PAYE 79,000 + NHF 11,250 + NSITF 4,500 + ITF 4,500
    assert stats.tax_liability == Decimal("99250.00")


def test_tax_report_totals_and_records_filing(service, payroll_repo, report_rows):
    payroll_repo.report_rows = report_rows

    report = service.tax_report(year=2024, month=5)

    assert payroll_repo.last_report_period == date(2024, 5, 1)
    assert report.totals == {
        "employee_count": 2,
        "gross_pay": "450000.00",
        "paye_tax": "79000.00",
        "pension_contribution": "36000.00",
    }
    assert report.rows[1]["tin"] == "-"
    assert report.filing.filing_type == FilingType.PAYE
    assert report.filing.total_amount == Decimal("79000.00")
    assert len(payroll_repo.filings) == 1


def test_tax_report_without_filing(service, payroll_repo, report_rows):
    payroll_repo.report_rows = report_rows

    report = service.tax_report(year=2024, month=5, record_filing=False)

    assert report.filing is None
    assert payroll_repo.filings == []


def test_tax_report_rejects_bad_month(service):
    with pytest.raises(ValidationError):
        service.tax_report(year=2024, month=13)
