from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Optional

from ..core.enums import WorkingStatus


@dataclass(frozen=True)
class AttendanceRecord:
    """Domain entity: one employee's attendance for one calendar day.

    ``check_in``/``check_out`` are UTC instants in nanoseconds since the epoch.
    """

    employee_id: str
    work_date: date
    working_status: WorkingStatus
    check_in: Optional[int] = None
    check_out: Optional[int] = None

    @property
    def key(self) -> tuple[str, date]:
        return self.employee_id, self.work_date

    @property
    def has_times(self) -> bool:
        return self.check_in is not None and self.check_out is not None


@dataclass(frozen=True)
class AttendancePatch:
    """Partial update merged into a day's record by ``AttendanceService.upsert``."""

    working_status: Optional[WorkingStatus] = None
    check_in: Optional[int] = None
    check_out: Optional[int] = None

    @property
    def is_empty(self) -> bool:
        return self.working_status is None and self.check_in is None and self.check_out is None
