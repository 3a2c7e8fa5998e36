from __future__ import annotations

import math
from dataclasses import asdict, dataclass
from fractions import Fraction
from typing import Optional

from ..core.enums import EmployeeType, Location
from ..core.exceptions import ValidationError
from ..employees.model import Employee

ALL = "all"


def round_hours(value: Fraction) -> Fraction:
    """Round to one decimal place, halves up (0.25 -> 0.3)."""
    return Fraction(math.floor(Fraction(value) * 10 + Fraction(1, 2)), 10)


@dataclass(frozen=True)
class MonthlyReportRow:
    """Read-model: one employee's month. Hour quantities are exact fractions."""

    employee_id: str
    name: str
    employee_type: EmployeeType
    location: Location
    project: Optional[str]
    expected_working_days: int
    expected_hours: Fraction
    working_days: int
    absent_days: int
    absent_hours: Fraction
    total_worked_hours: Fraction
    normal_hours: Optional[Fraction]
    overtime_hours: Optional[Fraction]

    def as_dict(self) -> dict:
        data = asdict(self)
        data["employee_type"] = self.employee_type.value
        data["location"] = self.location.value
        for key, value in data.items():
            if isinstance(value, Fraction):
                data[key] = float(round_hours(value))
        return data


def _optional_enum(enum_cls, value, field_name: str):
    if value is None or isinstance(value, enum_cls):
        return value
    text = str(value).strip()
    if not text or text.lower() == ALL:
        return None
    try:
        return enum_cls(text)
    except ValueError as exc:
        raise ValidationError(f"Unknown {field_name}: {text!r}") from exc


@dataclass(frozen=True)
class ReportFilters:
    """Report filters; ``None``, ``""`` or ``"all"`` mean no constraint."""

    location: Optional[Location] = None
    project: Optional[str] = None
    employee_type: Optional[EmployeeType] = None

    def __post_init__(self):
        object.__setattr__(self, "location", _optional_enum(Location, self.location, "location"))
        object.__setattr__(self, "employee_type", _optional_enum(EmployeeType, self.employee_type, "employee type"))
        project = (self.project or "").strip()
        object.__setattr__(self, "project", None if not project or project.lower() == ALL else project)

    def matches(self, employee: Employee) -> bool:
        if self.location is not None and employee.location != self.location:
            return False
        if self.employee_type is not None and employee.employee_type != self.employee_type:
            return False
        if self.project is not None:
            # Equality or substring, case-insensitive.
            if not employee.project or self.project.casefold() not in employee.project.casefold():
                return False
        return True
