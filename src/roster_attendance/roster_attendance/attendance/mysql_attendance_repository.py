from __future__ import annotations

from datetime import date
from typing import Optional, Sequence

from ..core.enums import WorkingStatus
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone
from .model import AttendanceRecord
from .repository import AttendanceRepository


def _to_record(r: dict) -> AttendanceRecord:
    return AttendanceRecord(
        employee_id=str(r["employee_id"]),
        work_date=r["work_date"],
        working_status=WorkingStatus(r["working_status"]),
        check_in=int(r["check_in"]) if r.get("check_in") is not None else None,
        check_out=int(r["check_out"]) if r.get("check_out") is not None else None,
    )


class MySQLAttendanceRepository(AttendanceRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get(self, employee_id: str, work_date: date) -> Optional[AttendanceRecord]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT employee_id, work_date, working_status, check_in, check_out
                FROM attendance_records
                WHERE employee_id=%s AND work_date=%s
                """,
                (employee_id, work_date),
            )
            r = fetchone(cur)
            return _to_record(r) if r else None

    def save(self, record: AttendanceRecord) -> None:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO attendance_records(employee_id, work_date, working_status, check_in, check_out)
                VALUES(%s,%s,%s,%s,%s)
                ON DUPLICATE KEY UPDATE
                    working_status=VALUES(working_status),
                    check_in=VALUES(check_in),
                    check_out=VALUES(check_out)
                """,
                (
                    record.employee_id,
                    record.work_date,
                    record.working_status.value,
                    record.check_in,
                    record.check_out,
                ),
            )

    def list_range(
        self,
        *,
        start_date: date,
        end_date: date,
        employee_ids: Optional[Sequence[str]] = None,
    ) -> Sequence[AttendanceRecord]:
        clauses = ["work_date BETWEEN %s AND %s"]
        params: list[object] = [start_date, end_date]
        if employee_ids is not None:
            if not employee_ids:
                return []
            clauses.append(f"employee_id IN ({', '.join(['%s'] * len(employee_ids))})")
            params.extend(employee_ids)

        where = " AND ".join(clauses)

        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT employee_id, work_date, working_status, check_in, check_out
                FROM attendance_records
                WHERE {where}
                ORDER BY employee_id ASC, work_date ASC
                """,
                tuple(params),
            )
            return [_to_record(r) for r in fetchall(cur)]
