from __future__ import annotations

import logging
import threading
from contextlib import contextmanager
from datetime import date
from typing import Iterable, Iterator, Optional, Sequence

from ..common.datetime_utils import hours_between, month_days, timestamp_date
from ..common.validators import require_non_empty
from ..core.enums import WorkingStatus
from ..core.exceptions import InvalidTime, NoCheckIn, NotFound, StatusConflict, ValidationError
from ..employees.repository import EmployeeRepository
from .model import AttendancePatch, AttendanceRecord
from .repository import AttendanceRepository

logger = logging.getLogger(__name__)


def _require_timestamp(value, field_name: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidTime(f"{field_name} must be an integer nanosecond timestamp")
    return value


def merge_patch(
    current: Optional[AttendanceRecord],
    patch: AttendancePatch,
    *,
    employee_id: str,
    work_date: date,
) -> AttendanceRecord:
    """Apply ``patch`` to the stored record of one day and return the new record.

    Rules, in order:
      1. an off status (absent/holiday/vacation) clears every timestamp,
         including ones sent in the same patch;
      2. a check-in against an off day raises StatusConflict;
      3. a check-out without any check-in raises NoCheckIn;
      4. check-out must be strictly after check-in (InvalidRange).
    """
    if patch.is_empty:
        raise ValidationError("Nothing to update")

    if patch.working_status is not None and patch.working_status.is_off:
        return AttendanceRecord(employee_id=employee_id, work_date=work_date, working_status=patch.working_status)

    status = patch.working_status or (current.working_status if current else WorkingStatus.FULLWORK)
    check_in = current.check_in if current else None
    check_out = current.check_out if current else None

    if patch.check_in is not None:
        if status.is_off:
            raise StatusConflict(
                f"Cannot record a check-in on a day marked {status.value}; set a working status first"
            )
        check_in = _require_timestamp(patch.check_in, "check_in")

    if patch.check_out is not None:
        if check_in is None:
            raise NoCheckIn("Cannot record a check-out before a check-in")
        check_out = _require_timestamp(patch.check_out, "check_out")

    if check_in is not None and check_out is not None:
        hours_between(check_in, check_out)

    return AttendanceRecord(
        employee_id=employee_id,
        work_date=work_date,
        working_status=status,
        check_in=check_in,
        check_out=check_out,
    )


class AttendanceService:
    """Attendance record store: one record per (employee, day), upsert-merge writes.

    Writes to the same day are serialized by a per-key lock; writes to
    different days never wait on each other.
    """

    def __init__(self, attendance: AttendanceRepository, employees: EmployeeRepository | None = None):
        self._attendance = attendance
        self._employees = employees
        # key -> [lock, number of writers holding or waiting on it]
        self._locks: dict[tuple[str, date], list] = {}
        self._locks_guard = threading.Lock()

    @contextmanager
    def _key_lock(self, key: tuple[str, date]) -> Iterator[None]:
        with self._locks_guard:
            entry = self._locks.get(key)
            if entry is None:
                entry = self._locks[key] = [threading.Lock(), 0]
            entry[1] += 1
        try:
            with entry[0]:
                yield
        finally:
            with self._locks_guard:
                entry[1] -= 1
                if entry[1] == 0:
                    del self._locks[key]

    def _require_employee(self, employee_id: str) -> str:
        employee_id = require_non_empty(employee_id, "employee_id")
        if self._employees is not None and self._employees.get_by_id(employee_id) is None:
            raise NotFound(f"Employee {employee_id!r} does not exist")
        return employee_id

    def upsert(self, employee_id: str, work_date: date, patch: AttendancePatch) -> AttendanceRecord:
        employee_id = self._require_employee(employee_id)

        with self._key_lock((employee_id, work_date)):
            current = self._attendance.get(employee_id, work_date)
            record = merge_patch(current, patch, employee_id=employee_id, work_date=work_date)
            if record != current:
                self._attendance.save(record)
                logger.info(
                    "attendance %s %s -> %s (in=%s out=%s)",
                    employee_id,
                    work_date.isoformat(),
                    record.working_status.value,
                    record.check_in,
                    record.check_out,
                )
            return record

    def get(self, employee_id: str, work_date: date) -> Optional[AttendanceRecord]:
        employee_id = self._require_employee(employee_id)
        return self._attendance.get(employee_id, work_date)

    def list_month(self, employee_id: str, year: int, month: int) -> list[Optional[AttendanceRecord]]:
        """One slot per calendar day of the month; ``None`` where nothing was recorded."""
        employee_id = self._require_employee(employee_id)
        return self.records_for_month([employee_id], year, month)[employee_id]

    def records_for_month(
        self, employee_ids: Iterable[str], year: int, month: int
    ) -> dict[str, list[Optional[AttendanceRecord]]]:
        days = month_days(year, month)
        ids: Sequence[str] = list(employee_ids)
        found = self._attendance.list_range(start_date=days[0], end_date=days[-1], employee_ids=ids)

        by_key = {r.key: r for r in found}
        return {eid: [by_key.get((eid, d)) for d in days] for eid in ids}

    def set_working_status(self, employee_id: str, work_date: date, status: WorkingStatus) -> AttendanceRecord:
        return self.upsert(employee_id, work_date, AttendancePatch(working_status=WorkingStatus(status)))

    def get_working_status(self, employee_id: str, work_date: date) -> WorkingStatus:
        record = self.get(employee_id, work_date)
        if record is None:
            raise NotFound(f"No attendance recorded for {employee_id} on {work_date.isoformat()}")
        return record.working_status

    def record_check_in(
        self,
        employee_id: str,
        check_in: int,
        working_status: WorkingStatus = WorkingStatus.FULLWORK,
        *,
        work_date: date | None = None,
    ) -> AttendanceRecord:
        """Check-in with its working status; the day defaults to the UTC date of ``check_in``."""
        status = WorkingStatus(working_status)
        if status.is_off:
            raise StatusConflict(f"Cannot check in with status {status.value}")
        check_in = _require_timestamp(check_in, "check_in")
        day = work_date or timestamp_date(check_in)
        return self.upsert(employee_id, day, AttendancePatch(working_status=status, check_in=check_in))

    def record_check_out(self, employee_id: str, check_out: int, *, work_date: date | None = None) -> AttendanceRecord:
        check_out = _require_timestamp(check_out, "check_out")
        day = work_date or timestamp_date(check_out)
        return self.upsert(employee_id, day, AttendancePatch(check_out=check_out))
