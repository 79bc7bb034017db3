"""Example: compute payslips with the tax engine directly (no Flask, no database).

Usage: python -m examples.example_usage 300000 50000 [--cra]
"""

import argparse

from src.hr_payroll.hr_payroll.core.exceptions import InvalidInputError
from src.hr_payroll.hr_payroll.payroll.engine import compute_payroll_breakdown


def main() -> None:
    parser = argparse.ArgumentParser(description="Nigerian statutory payroll breakdown")
    parser.add_argument("basic_salary")
    parser.add_argument("allowances", nargs="?", default="0")
    parser.add_argument("--cra", action="store_true", help="apply the consolidated relief allowance")
    args = parser.parse_args()

    try:
        breakdown = compute_payroll_breakdown(
            args.basic_salary,
            args.allowances,
            apply_consolidated_relief=args.cra,
        )
    except InvalidInputError as e:
        raise SystemExit(f"Invalid compensation: {e}")

    for name, value in breakdown.as_dict().items():
        print(f"{name:<24}{value:>16}")


if __name__ == "__main__":
    main()
