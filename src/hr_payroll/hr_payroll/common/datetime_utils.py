from __future__ import annotations

from datetime import date, datetime

from ..core.exceptions import ValidationError


def parse_period(value: str) -> date:
    """Parse a YYYY-MM payroll month into the first day of that month."""
    try:
        return datetime.strptime((value or "").strip(), "%Y-%m").date()
    except ValueError:
        raise ValidationError("Payroll month must be in YYYY-MM format")


def period_for(year: int, month: int) -> date:
    try:
        return date(int(year), int(month), 1)
    except (TypeError, ValueError):
        raise ValidationError("Invalid report year/month")


def format_period(period: date) -> str:
    return period.strftime("%Y-%m")


def now_local() -> datetime:
    """Current local time.

    Note: Wrapped so tests can patch/mocked easier.
    """
    return datetime.now()
