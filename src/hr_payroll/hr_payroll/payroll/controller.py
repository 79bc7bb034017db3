from __future__ import annotations

import csv
import io
from datetime import date

from flask import Flask, jsonify, request

from ..common.datetime_utils import format_period
from ..core.exceptions import DomainError, NotFoundError, PayrollAlreadyProcessedError, ValidationError
from ..container import Container
from .model import money_str

REPORT_FIELDS = ["employee_id", "full_name", "tin", "gross_pay", "paye_tax", "pension_contribution"]


def register(app: Flask, container: Container) -> None:
    def _fail(message: str, status: int):
        return jsonify({"success": False, "message": message}), status

    def _domain_error(e: DomainError):
        if isinstance(e, NotFoundError):
            return _fail(str(e), 404)
        if isinstance(e, PayrollAlreadyProcessedError):
            return _fail(str(e), 409)
        return _fail(str(e), 400)

    def _system_error(action: str):
        app.logger.exception("Error %s", action)
        return _fail("Internal server error", 500)

    def _current_month() -> str:
        return format_period(date.today().replace(day=1))

    def _json_body() -> dict:
        data = request.get_json(silent=True)
        return data if isinstance(data, dict) else {}

    @app.route("/api/payroll/calculate", methods=["POST"], endpoint="payroll_calculate")
    def payroll_calculate():
        data = _json_body()
        try:
            breakdown = container.payroll_service.calculate(data.get("basic_salary"), data.get("allowances", 0))
            return jsonify({"success": True, "breakdown": breakdown.as_dict()})
        except ValidationError as e:
            return _fail(str(e), 400)
        except Exception:
            return _system_error("calculating payroll breakdown")

    @app.route("/api/payroll/employees/<int:employee_id>/breakdown", endpoint="payroll_employee_breakdown")
    def payroll_employee_breakdown(employee_id: int):
        try:
            employee, breakdown = container.payroll_service.breakdown_for_employee(employee_id)
            return jsonify(
                {
                    "success": True,
                    "employee": {"employee_id": employee.employee_id, "full_name": employee.full_name},
                    "breakdown": breakdown.as_dict(),
                }
            )
        except DomainError as e:
            return _domain_error(e)
        except Exception:
            return _system_error("computing employee breakdown")

    @app.route("/api/payroll/preview", endpoint="payroll_preview")
    def payroll_preview():
        month = request.args.get("month") or _current_month()
        try:
            preview = container.payroll_service.preview(month)
            return jsonify(
                {
                    "success": True,
                    "period": format_period(preview.period),
                    "totals": preview.totals.as_dict(),
                    "invalid_records": [
                        {"employee_id": r.employee_id, "message": r.message} for r in preview.invalid_records
                    ],
                }
            )
        except DomainError as e:
            return _domain_error(e)
        except Exception:
            return _system_error("calculating payroll preview")

    @app.route("/api/payroll/process", methods=["POST"], endpoint="payroll_process")
    def payroll_process():
        month = _json_body().get("month") or _current_month()
        try:
            result = container.payroll_service.process(month)
            return jsonify(
                {
                    "success": True,
                    "message": "Payroll processed successfully",
                    "period": format_period(result.period),
                    "processed_count": result.processed_count,
                    "totals": result.totals.as_dict(),
                }
            )
        except DomainError as e:
            return _domain_error(e)
        except Exception:
            return _system_error("processing payroll")

    @app.route("/api/payroll/history", endpoint="payroll_history")
    def payroll_history():
        try:
            runs = container.payroll_service.history()
            return jsonify(
                {
                    "success": True,
                    "history": [
                        {
                            "period": format_period(r.period),
                            "employee_count": r.employee_count,
                            "gross_pay": money_str(r.gross_pay),
                            "total_deductions": money_str(r.total_deductions),
                            "net_pay": money_str(r.net_pay),
                            "total_tax": money_str(r.total_tax),
                            "status": r.status.value,
                        }
                        for r in runs
                    ],
                }
            )
        except Exception:
            return _system_error("fetching payroll history")

    @app.route("/api/payroll/stats", endpoint="payroll_stats")
    def payroll_stats():
        month = request.args.get("month") or _current_month()
        try:
            stats = container.payroll_service.stats(month)
            return jsonify({"success": True, "period": month, "stats": stats.as_dict()})
        except DomainError as e:
            return _domain_error(e)
        except Exception:
            return _system_error("fetching payroll stats")

    def _report_period(source) -> tuple[int, int]:
        today = date.today()
        year, month = source.get("year"), source.get("month")
        try:
            return (
                today.year if year is None else int(year),
                today.month if month is None else int(month),
            )
        except (TypeError, ValueError):
            raise ValidationError("Invalid report year/month")

    @app.route("/api/payroll/tax-report", methods=["POST"], endpoint="payroll_tax_report")
    def payroll_tax_report():
        try:
            year, month = _report_period(_json_body())
            report = container.payroll_service.tax_report(year=year, month=month)
            return jsonify(
                {
                    "success": True,
                    "message": "Tax report generated successfully",
                    "period": format_period(report.period),
                    "employees": report.rows,
                    "totals": report.totals,
                    "filing_id": report.filing.filing_id if report.filing else None,
                }
            )
        except DomainError as e:
            return _domain_error(e)
        except Exception:
            return _system_error("generating tax report")

    @app.route("/api/payroll/tax-report.csv", endpoint="payroll_tax_report_csv")
    def payroll_tax_report_csv():
        try:
            year, month = _report_period(request.args)
            report = container.payroll_service.tax_report(year=year, month=month, record_filing=False)
        except DomainError as e:
            return _domain_error(e)
        except Exception:
            return _system_error("exporting tax report")

        out = io.StringIO()
        writer = csv.DictWriter(out, fieldnames=REPORT_FIELDS)
        writer.writeheader()
        for row in report.rows:
            writer.writerow(row)

        filename = f"paye_{format_period(report.period)}.csv"
        return app.response_class(
            out.getvalue().encode("utf-8-sig"),
            mimetype="text/csv",
            headers={"Content-Disposition": f"attachment; filename={filename}"},
        )
