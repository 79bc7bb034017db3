from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from typing import Any, Optional

from ..core.enums import EmployeeStatus


@dataclass(frozen=True)
class Employee:
    """Domain entity: an employee with the compensation fields payroll reads.

    Note: ``basic_salary``/``allowances`` are kept exactly as stored so that a
    bad record is reported by the payroll run instead of crashing the read.
    """

    employee_id: int
    full_name: str
    tin: Optional[str]
    basic_salary: Any
    allowances: Any = Decimal("0")
    status: EmployeeStatus = EmployeeStatus.ACTIVE
