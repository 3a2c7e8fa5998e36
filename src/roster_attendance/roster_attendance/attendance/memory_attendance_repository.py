from __future__ import annotations

import threading
from datetime import date
from typing import Optional, Sequence

from .model import AttendanceRecord
from .repository import AttendanceRepository


class InMemoryAttendanceRepository(AttendanceRepository):
    def __init__(self):
        self._by_key: dict[tuple[str, date], AttendanceRecord] = {}
        self._lock = threading.Lock()

    def get(self, employee_id: str, work_date: date) -> Optional[AttendanceRecord]:
        with self._lock:
            return self._by_key.get((employee_id, work_date))

    def save(self, record: AttendanceRecord) -> None:
        with self._lock:
            self._by_key[record.key] = record

    def list_range(
        self,
        *,
        start_date: date,
        end_date: date,
        employee_ids: Optional[Sequence[str]] = None,
    ) -> Sequence[AttendanceRecord]:
        wanted = set(employee_ids) if employee_ids is not None else None
        with self._lock:
            snapshot = list(self._by_key.values())
        items = [
            r
            for r in snapshot
            if start_date <= r.work_date <= end_date and (wanted is None or r.employee_id in wanted)
        ]
        items.sort(key=lambda r: r.key)
        return items
