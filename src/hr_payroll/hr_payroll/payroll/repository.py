from __future__ import annotations

from datetime import date, datetime
from decimal import Decimal
from typing import Protocol, Sequence

from ..core.enums import FilingType
from .model import PayrollEntry, PayrollRunSummary, PayrollStats, TaxFiling, TaxReportRow


class PayrollRepository(Protocol):
    def exists_for_period(self, period: date) -> bool:
        raise NotImplementedError

    def save_entries(self, entries: Sequence[PayrollEntry]) -> int:
        """Persist a whole run in one transaction; returns rows written."""

        raise NotImplementedError

    def list_history(self, *, limit: int) -> Sequence[PayrollRunSummary]:
        raise NotImplementedError

    def get_period_stats(self, period: date) -> PayrollStats:
        raise NotImplementedError

    def get_tax_report_rows(self, period: date) -> Sequence[TaxReportRow]:
        raise NotImplementedError

    def record_tax_filing(
        self,
        *,
        filing_type: FilingType,
        period_year: int,
        period_month: int,
        total_amount: Decimal,
        created_at: datetime,
    ) -> TaxFiling:
        raise NotImplementedError
