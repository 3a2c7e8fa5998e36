from __future__ import annotations

from typing import Optional

from ..common.validators import require_non_empty
from ..core.exceptions import NotFound
from ..reports.model import ReportFilters
from .model import Employee
from .repository import EmployeeRepository


class EmployeeQueryService:
    """Use case: read the roster (list with filters, look up one employee)."""

    def __init__(self, employees: EmployeeRepository):
        self._employees = employees

    def list_employees(self, filters: Optional[ReportFilters] = None) -> list[Employee]:
        filters = filters or ReportFilters()
        return [e for e in self._employees.list_all() if filters.matches(e)]

    def get_employee(self, employee_id: str) -> Employee:
        employee_id = require_non_empty(employee_id, "employee_id")
        employee = self._employees.get_by_id(employee_id)
        if employee is None:
            raise NotFound(f"Employee {employee_id!r} does not exist")
        return employee
