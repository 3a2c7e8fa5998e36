from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from ..core.enums import Designation, EmployeeType, Location


@dataclass(frozen=True)
class Employee:
    """Roster entry. Read-only reference data for the attendance core."""

    employee_id: str
    name: str
    employee_type: EmployeeType
    location: Location
    project: Optional[str] = None
    designation: Optional[Designation] = None
