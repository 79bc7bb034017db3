from __future__ import annotations

from datetime import date, datetime
from decimal import Decimal
from typing import Sequence

from mysql.connector import errorcode
from mysql.connector.errors import IntegrityError

from ..common.datetime_utils import format_period
from ..core.enums import FilingStatus, FilingType, PayrollStatus
from ..core.exceptions import PayrollAlreadyProcessedError
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone, to_decimal
from .model import PayrollEntry, PayrollRunSummary, PayrollStats, TaxFiling, TaxReportRow
from .repository import PayrollRepository


class MySQLPayrollRepository(PayrollRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def exists_for_period(self, period: date) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("SELECT 1 AS found FROM payroll_entries WHERE period=%s LIMIT 1", (period,))
            return fetchone(cur) is not None

    def save_entries(self, entries: Sequence[PayrollEntry]) -> int:
        if not entries:
            return 0
        rows = [
            (
                e.employee_id,
                e.period,
                e.breakdown.gross_pay,
                e.breakdown.paye_tax,
                e.breakdown.pension_contribution,
                e.breakdown.nhf_contribution,
                e.breakdown.nsitf_contribution,
                e.breakdown.itf_contribution,
                e.breakdown.total_deductions,
                e.breakdown.net_pay,
                e.status.value,
            )
            for e in entries
        ]
        try:
            with db_cursor(self._conn_factory) as (_, cur):
                cur.executemany(
                    """
                    INSERT INTO payroll_entries(
                        employee_id, period, gross_pay, paye_tax, pension_contribution, nhf_contribution,
                        nsitf_contribution, itf_contribution, total_deductions, net_pay, status
                    )
                    VALUES(%s,%s,%s,%s,%s,%s,%s,%s,%s,%s,%s)
                    """,
                    rows,
                )
        except IntegrityError as e:
            if e.errno != errorcode.ER_DUP_ENTRY:
                raise
            # UNIQUE(employee_id, period): a concurrent run got there first.
            raise PayrollAlreadyProcessedError(
                f"Payroll already processed for {format_period(entries[0].period)}"
            ) from e
        return len(rows)

    def list_history(self, *, limit: int) -> Sequence[PayrollRunSummary]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT
                    period,
                    status,
                    COUNT(DISTINCT employee_id) AS employee_count,
                    SUM(gross_pay) AS gross_pay,
                    SUM(total_deductions) AS total_deductions,
                    SUM(net_pay) AS net_pay,
                    SUM(paye_tax + nhf_contribution + nsitf_contribution + itf_contribution) AS total_tax
                FROM payroll_entries
                GROUP BY period, status
                ORDER BY period DESC
                LIMIT %s
                """,
                (int(limit),),
            )
            return [
                PayrollRunSummary(
                    period=r["period"],
                    employee_count=int(r["employee_count"]),
                    gross_pay=to_decimal(r["gross_pay"]),
                    total_deductions=to_decimal(r["total_deductions"]),
                    net_pay=to_decimal(r["net_pay"]),
                    total_tax=to_decimal(r["total_tax"]),
                    status=PayrollStatus(r["status"]),
                )
                for r in fetchall(cur)
            ]

    def get_period_stats(self, period: date) -> PayrollStats:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT
                    SUM(net_pay) AS net_pay_total,
                    SUM(paye_tax + nhf_contribution + nsitf_contribution + itf_contribution) AS tax_liability
                FROM payroll_entries
                WHERE period=%s
                """,
                (period,),
            )
            totals = fetchone(cur) or {}

            cur.execute(
                "SELECT COUNT(*) AS pending FROM payroll_entries WHERE status=%s",
                (PayrollStatus.PROCESSED.value,),
            )
            pending = fetchone(cur) or {}

        return PayrollStats(
            net_pay_total=to_decimal(totals.get("net_pay_total")),
            pending_payment_count=int(pending.get("pending") or 0),
            tax_liability=to_decimal(totals.get("tax_liability")),
        )

    def get_tax_report_rows(self, period: date) -> Sequence[TaxReportRow]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT e.employee_id, e.full_name, e.tin, p.gross_pay, p.paye_tax, p.pension_contribution
                FROM payroll_entries p
                JOIN employees e ON e.employee_id = p.employee_id
                WHERE p.period=%s
                ORDER BY e.full_name
                """,
                (period,),
            )
            return [
                TaxReportRow(
                    employee_id=int(r["employee_id"]),
                    full_name=r["full_name"],
                    tin=r.get("tin"),
                    gross_pay=to_decimal(r["gross_pay"]),
                    paye_tax=to_decimal(r["paye_tax"]),
                    pension_contribution=to_decimal(r["pension_contribution"]),
                )
                for r in fetchall(cur)
            ]

    def record_tax_filing(
        self,
        *,
        filing_type: FilingType,
        period_year: int,
        period_month: int,
        total_amount: Decimal,
        created_at: datetime,
    ) -> TaxFiling:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO tax_filings(filing_type, period_year, period_month, total_amount, status, created_at)
                VALUES(%s,%s,%s,%s,%s,%s)
                """,
                (
                    filing_type.value,
                    int(period_year),
                    int(period_month),
                    total_amount,
                    FilingStatus.GENERATED.value,
                    created_at,
                ),
            )
            filing_id = int(cur.lastrowid)

        return TaxFiling(
            filing_id=filing_id,
            filing_type=filing_type,
            period_year=int(period_year),
            period_month=int(period_month),
            total_amount=total_amount,
            status=FilingStatus.GENERATED,
            created_at=created_at,
        )
