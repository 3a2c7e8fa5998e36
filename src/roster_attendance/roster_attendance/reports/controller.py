from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.auth import admin_required, login_required
from ..common.datetime_utils import now_utc, require_month
from ..core.exceptions import ValidationError
from ..container import Container
from .model import ReportFilters


def _int_arg(name: str, default: int) -> int:
    raw = request.args.get(name)
    if raw is None or raw == "":
        return default
    try:
        return int(raw)
    except ValueError as exc:
        raise ValidationError(f"{name} must be an integer") from exc


def _report_args() -> tuple[int, int, ReportFilters]:
    today = now_utc()
    year = _int_arg("year", today.year)
    month = _int_arg("month", today.month)
    require_month(year, month)

    filters = ReportFilters(
        location=request.args.get("location"),
        project=request.args.get("project"),
        employee_type=request.args.get("employee_type"),
    )
    return year, month, filters


def register(app: Flask, container: Container) -> None:
    @app.route("/api/reports/monthly", methods=["GET"], endpoint="monthly_report")
    @login_required
    def monthly_report():
        year, month, filters = _report_args()
        rows = container.report_service.build_monthly_report(year=year, month=month, filters=filters)
        return jsonify({"success": True, "year": year, "month": month, "rows": [r.as_dict() for r in rows]})

    @app.route("/api/reports/monthly.csv", methods=["GET"], endpoint="monthly_report_csv")
    @admin_required
    def monthly_report_csv():
        year, month, filters = _report_args()
        export = container.report_service.export_csv(year=year, month=month, filters=filters)
        return app.response_class(
            export.data,
            mimetype="text/csv",
            headers={"Content-Disposition": f"attachment; filename={export.filename}"},
        )

    @app.route("/api/reports/projects", methods=["GET"], endpoint="report_projects")
    @login_required
    def report_projects():
        return jsonify({"success": True, "projects": container.report_service.list_projects()})
