from __future__ import annotations

from dataclasses import dataclass

from .database.connection import DBConfig, DatabaseConnection
from .employees.mysql_employee_repository import MySQLEmployeeRepository
from .payroll.engine import PayrollTaxEngine
from .payroll.mysql_payroll_repository import MySQLPayrollRepository
from .payroll.service import PayrollService


@dataclass(frozen=True)
class Container:
    conn: DatabaseConnection

    employees_repo: MySQLEmployeeRepository
    payroll_repo: MySQLPayrollRepository

    tax_engine: PayrollTaxEngine
    payroll_service: PayrollService


def build_container(*, db_config: dict, apply_consolidated_relief: bool = False) -> Container:
    conn = DatabaseConnection.get_instance(DBConfig.from_mapping(db_config))

    employees_repo = MySQLEmployeeRepository(conn)
    payroll_repo = MySQLPayrollRepository(conn)

    tax_engine = PayrollTaxEngine(apply_consolidated_relief=apply_consolidated_relief)
    payroll_service = PayrollService(
        employees_repo,
        payroll_repo,
        engine=tax_engine,
        apply_consolidated_relief=apply_consolidated_relief,
    )

    return Container(
        conn=conn,
        employees_repo=employees_repo,
        payroll_repo=payroll_repo,
        tax_engine=tax_engine,
        payroll_service=payroll_service,
    )
