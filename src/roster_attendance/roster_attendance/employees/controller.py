from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.auth import login_required
from ..container import Container
from ..reports.model import ReportFilters
from .model import Employee


def employee_to_dict(employee: Employee) -> dict:
    return {
        "employee_id": employee.employee_id,
        "name": employee.name,
        "employee_type": employee.employee_type.value,
        "employee_type_label": employee.employee_type.label,
        "location": employee.location.value,
        "location_label": employee.location.label,
        "project": employee.project,
        "designation": employee.designation.value if employee.designation else None,
        "designation_label": employee.designation.label if employee.designation else None,
    }


def register(app: Flask, container: Container) -> None:
    @app.route("/api/employees", methods=["GET"], endpoint="employees_list")
    @login_required
    def employees_list():
        filters = ReportFilters(
            location=request.args.get("location"),
            project=request.args.get("project"),
            employee_type=request.args.get("employee_type"),
        )
        employees = container.employee_service.list_employees(filters)
        return jsonify({"success": True, "employees": [employee_to_dict(e) for e in employees]})

    @app.route("/api/employees/<employee_id>", methods=["GET"], endpoint="employees_get")
    @login_required
    def employees_get(employee_id: str):
        employee = container.employee_service.get_employee(employee_id)
        return jsonify({"success": True, "employee": employee_to_dict(employee)})
