"""Example: drive the service layer directly (no Flask), on in-memory storage."""

from datetime import date

from src.roster_attendance.roster_attendance.attendance.model import AttendancePatch
from src.roster_attendance.roster_attendance.common.datetime_utils import parse_clock_time
from src.roster_attendance.roster_attendance.container import STORAGE_MEMORY, build_container
from src.roster_attendance.roster_attendance.core.enums import EmployeeType, Location, WorkingStatus
from src.roster_attendance.roster_attendance.employees.model import Employee


def main():
    container = build_container(
        storage=STORAGE_MEMORY,
        employees=[
            Employee("E1", "Ahmed Ali", EmployeeType.COMPANY, Location.KUWAIT, project="Tower A"),
            Employee("E2", "Bilal Khan", EmployeeType.SUPPLIER, Location.SAUDI),
        ],
    )

    day = date(2024, 3, 1)
    for employee_id in ("E1", "E2"):
        container.attendance_service.upsert(
            employee_id,
            day,
            AttendancePatch(
                working_status=WorkingStatus.FULLWORK,
                check_in=parse_clock_time(day, "08:00"),
                check_out=parse_clock_time(day, "18:00"),
            ),
        )

    export = container.report_service.export_csv(year=2024, month=3)
    print(export.filename)
    print(export.content)


if __name__ == "__main__":
    main()
