from __future__ import annotations

from enum import Enum


class EmployeeStatus(str, Enum):
    """Employment status; only active employees enter a payroll run."""

    ACTIVE = "active"
    INACTIVE = "inactive"


class PayrollStatus(str, Enum):
    """Lifecycle of a persisted payroll entry."""

    PROCESSED = "processed"
    PAID = "paid"


class FilingType(str, Enum):
    PAYE = "PAYE"


class FilingStatus(str, Enum):
    GENERATED = "generated"
