from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Iterable, Optional

from .attendance.memory_attendance_repository import InMemoryAttendanceRepository
from .attendance.mysql_attendance_repository import MySQLAttendanceRepository
from .attendance.repository import AttendanceRepository
from .attendance.service import AttendanceService
from .core.constants import DEFAULT_OVERTIME_THRESHOLD
from .core.exceptions import ValidationError
from .database.connection import DatabaseConnection, DBConfig
from .employees.memory_employee_repository import InMemoryEmployeeRepository
from .employees.model import Employee
from .employees.mysql_employee_repository import MySQLEmployeeRepository
from .employees.repository import EmployeeRepository
from .employees.service import EmployeeQueryService
from .reports.aggregator import MonthlyAggregator
from .reports.service import MonthlyReportService
from .settings.memory_settings_repository import InMemorySettingsRepository
from .settings.mysql_settings_repository import MySQLSettingsRepository
from .settings.repository import SettingsRepository
from .settings.service import OvertimeSettingsService

STORAGE_MYSQL = "mysql"
STORAGE_MEMORY = "memory"


@dataclass(frozen=True)
class Container:
    conn: Optional[DatabaseConnection]

    employees_repo: EmployeeRepository
    attendance_repo: AttendanceRepository
    settings_repo: SettingsRepository

    employee_service: EmployeeQueryService
    attendance_service: AttendanceService
    settings_service: OvertimeSettingsService
    report_service: MonthlyReportService


def build_container(
    *,
    storage: str = STORAGE_MYSQL,
    db_config: Optional[dict] = None,
    employees: Iterable[Employee] = (),
    default_threshold: int = DEFAULT_OVERTIME_THRESHOLD,
    weekend_days: Iterable[int] = (),
    holidays: Iterable[date] = (),
) -> Container:
    """Wire repositories and services.

    ``employees`` seeds the roster of the in-memory backend; the MySQL backend
    reads the ``employees`` table instead.
    """
    conn: Optional[DatabaseConnection] = None
    if storage == STORAGE_MYSQL:
        if not db_config:
            raise ValidationError("db_config is required for the mysql storage backend")
        conn = DatabaseConnection(DBConfig.from_dict(db_config))
        employees_repo = MySQLEmployeeRepository(conn)
        attendance_repo = MySQLAttendanceRepository(conn)
        settings_repo = MySQLSettingsRepository(conn)
    elif storage == STORAGE_MEMORY:
        employees_repo = InMemoryEmployeeRepository(employees)
        attendance_repo = InMemoryAttendanceRepository()
        settings_repo = InMemorySettingsRepository()
    else:
        raise ValidationError(f"Unknown storage backend: {storage!r}")

    employee_service = EmployeeQueryService(employees_repo)
    attendance_service = AttendanceService(attendance_repo, employees_repo)
    settings_service = OvertimeSettingsService(settings_repo, default_threshold=default_threshold)
    report_service = MonthlyReportService(
        employees_repo,
        attendance_service,
        settings_service,
        aggregator=MonthlyAggregator(weekend_days=weekend_days, holidays=holidays),
    )

    return Container(
        conn=conn,
        employees_repo=employees_repo,
        attendance_repo=attendance_repo,
        settings_repo=settings_repo,
        employee_service=employee_service,
        attendance_service=attendance_service,
        settings_service=settings_service,
        report_service=report_service,
    )
