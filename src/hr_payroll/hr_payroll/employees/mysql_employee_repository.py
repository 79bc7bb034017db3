from __future__ import annotations

from typing import Any, Dict, Optional, Sequence

from ..core.enums import EmployeeStatus
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone
from .model import Employee
from .repository import EmployeeRepository

_COLUMNS = "employee_id, full_name, tin, basic_salary, allowances, status"


def _to_employee(r: Dict[str, Any]) -> Employee:
    return Employee(
        employee_id=int(r["employee_id"]),
        full_name=r["full_name"],
        tin=r.get("tin"),
        basic_salary=r.get("basic_salary"),
        allowances=r.get("allowances") if r.get("allowances") is not None else 0,
        status=EmployeeStatus(r["status"]),
    )


class MySQLEmployeeRepository(EmployeeRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_by_id(self, employee_id: int) -> Optional[Employee]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM employees WHERE employee_id=%s", (int(employee_id),))
            r = fetchone(cur)
            return _to_employee(r) if r else None

    def list_active(self) -> Sequence[Employee]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"SELECT {_COLUMNS} FROM employees WHERE status=%s ORDER BY employee_id",
                (EmployeeStatus.ACTIVE.value,),
            )
            return [_to_employee(r) for r in fetchall(cur)]
