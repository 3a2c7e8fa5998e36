from __future__ import annotations

from datetime import date
from typing import Optional

from flask import Flask, jsonify, request

from ..common.auth import login_required, writer_required
from ..common.datetime_utils import format_clock, parse_clock_time, parse_iso_date
from ..core.enums import WorkingStatus
from ..core.exceptions import InvalidTime, NotFound, ValidationError
from ..container import Container
from .model import AttendancePatch, AttendanceRecord


def record_to_dict(record: Optional[AttendanceRecord], work_date: date) -> dict:
    if record is None:
        return {"date": work_date.isoformat(), "working_status": None, "check_in": None, "check_out": None}
    return {
        "employee_id": record.employee_id,
        "date": record.work_date.isoformat(),
        "working_status": record.working_status.value,
        "check_in": record.check_in,
        "check_out": record.check_out,
        "check_in_time": format_clock(record.check_in) if record.check_in is not None else "-",
        "check_out_time": format_clock(record.check_out) if record.check_out is not None else "-",
    }


def _parse_instant(value, work_date: date, field_name: str) -> Optional[int]:
    """Accept integer nanoseconds or an HH:MM clock time on ``work_date``."""
    if value is None or value == "":
        return None
    if isinstance(value, bool):
        raise InvalidTime(f"{field_name} must be HH:MM or a nanosecond timestamp")
    if isinstance(value, int):
        return value
    if isinstance(value, str) and value.strip().lstrip("-").isdigit():
        return int(value.strip())
    if isinstance(value, str):
        return parse_clock_time(work_date, value)
    raise InvalidTime(f"{field_name} must be HH:MM or a nanosecond timestamp")


def _parse_status(value) -> Optional[WorkingStatus]:
    if value is None or value == "":
        return None
    try:
        return WorkingStatus(value)
    except ValueError as exc:
        raise ValidationError(f"Unknown working status: {value!r}") from exc


def register(app: Flask, container: Container) -> None:
    @app.route("/api/attendance/<employee_id>/<iso_date>", methods=["GET"], endpoint="attendance_get")
    @login_required
    def attendance_get(employee_id: str, iso_date: str):
        work_date = parse_iso_date(iso_date)
        record = container.attendance_service.get(employee_id, work_date)
        if record is None:
            raise NotFound(f"No attendance recorded for {employee_id} on {work_date.isoformat()}")
        return jsonify({"success": True, "record": record_to_dict(record, work_date)})

    @app.route("/api/attendance/<employee_id>/<iso_date>", methods=["PUT", "POST"], endpoint="attendance_upsert")
    @writer_required
    def attendance_upsert(employee_id: str, iso_date: str):
        work_date = parse_iso_date(iso_date)
        data = request.get_json(silent=True) or {}

        patch = AttendancePatch(
            working_status=_parse_status(data.get("working_status")),
            check_in=_parse_instant(data.get("check_in"), work_date, "check_in"),
            check_out=_parse_instant(data.get("check_out"), work_date, "check_out"),
        )
        record = container.attendance_service.upsert(employee_id, work_date, patch)
        return jsonify({"success": True, "record": record_to_dict(record, work_date)})

    @app.route(
        "/api/attendance/<employee_id>/month/<int:year>/<int:month>",
        methods=["GET"],
        endpoint="attendance_month",
    )
    @login_required
    def attendance_month(employee_id: str, year: int, month: int):
        slots = container.attendance_service.list_month(employee_id, year, month)
        days = [date(year, month, i + 1) for i in range(len(slots))]
        return jsonify(
            {
                "success": True,
                "employee_id": employee_id,
                "days": [record_to_dict(r, d) for r, d in zip(slots, days)],
            }
        )
