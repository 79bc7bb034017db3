"""HR Payroll package.

This package is organized by feature modules (employees, payroll) with a thin
Flask controller layer over service/repository layers. The statutory tax
engine in ``payroll.engine`` is pure and has no dependency on the rest.
"""
