"""Load a roster from a CSV file for the in-memory storage backend.

Columns: ``employee_id, name, employee_type, location, project, designation``.
Enum columns take either the stored value (``supplier``) or the display label
(``Supplier``); ``project`` and ``designation`` may be empty.
"""

from __future__ import annotations

import csv
import logging
from pathlib import Path
from typing import Iterable

from ..common.validators import require_non_empty
from ..core.enums import Designation, EmployeeType, Location
from ..core.exceptions import ValidationError
from .model import Employee

logger = logging.getLogger(__name__)

COLUMNS = ["employee_id", "name", "employee_type", "location", "project", "designation"]


def _enum(enum_cls, raw: str, line_no: int):
    text = (raw or "").strip()
    for member in enum_cls:
        if text in (member.value, member.label):
            return member
    raise ValidationError(f"Roster line {line_no}: unknown {enum_cls.__name__} {text!r}")


def parse_roster(lines: Iterable[str]) -> list[Employee]:
    reader = csv.DictReader(lines)
    missing = [c for c in COLUMNS if c not in (reader.fieldnames or [])]
    if missing:
        raise ValidationError(f"Roster is missing columns: {', '.join(missing)}")

    employees: dict[str, Employee] = {}
    for line_no, row in enumerate(reader, start=2):
        employee_id = require_non_empty(row["employee_id"], f"employee_id (line {line_no})")
        if employee_id in employees:
            raise ValidationError(f"Roster line {line_no}: duplicate employee_id {employee_id!r}")
        employees[employee_id] = Employee(
            employee_id=employee_id,
            name=require_non_empty(row["name"], f"name (line {line_no})"),
            employee_type=_enum(EmployeeType, row["employee_type"], line_no),
            location=_enum(Location, row["location"], line_no),
            project=(row["project"] or "").strip() or None,
            designation=_enum(Designation, row["designation"], line_no) if (row["designation"] or "").strip() else None,
        )
    return list(employees.values())


def load_roster(path: str | Path) -> list[Employee]:
    path = Path(path)
    with path.open(encoding="utf-8-sig", newline="") as f:
        employees = parse_roster(f)
    logger.info("loaded %d employees from %s", len(employees), path)
    return employees
