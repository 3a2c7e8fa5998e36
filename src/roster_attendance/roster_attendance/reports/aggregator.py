from __future__ import annotations

import logging
from datetime import date
from fractions import Fraction
from typing import Iterable, Mapping, Optional, Sequence

from ..attendance.model import AttendanceRecord
from ..common.datetime_utils import expected_working_days, month_days
from ..core.constants import DEFAULT_OVERTIME_THRESHOLD
from ..core.enums import EmployeeType, WorkingStatus
from ..core.exceptions import DomainError
from ..employees.model import Employee
from ..hours.calculator.base import ZERO, HoursCalculator
from ..hours.calculator.standard_calculator import StandardHoursCalculator
from .model import MonthlyReportRow, ReportFilters

logger = logging.getLogger(__name__)


def _is_timestamp(value) -> bool:
    return value is None or (isinstance(value, int) and not isinstance(value, bool))


class MonthlyAggregator:
    """Fold a month of per-day records into one summary row per employee.

    Pure: no state is kept between calls and inputs are never mutated.
    A day without a record counts as absent, and so does a record that cannot
    be evaluated, so one corrupt day never blocks the whole report.
    """

    def __init__(
        self,
        calculator: Optional[HoursCalculator] = None,
        *,
        weekend_days: Iterable[int] = (),
        holidays: Iterable[date] = (),
    ):
        self._calculator = calculator or StandardHoursCalculator()
        self._weekend_days = tuple(weekend_days)
        self._holidays = frozenset(holidays)

    def aggregate(
        self,
        employees: Iterable[Employee],
        records_by_employee: Mapping[str, Iterable[Optional[AttendanceRecord]]],
        year: int,
        month: int,
        filters: Optional[ReportFilters] = None,
        threshold: int = DEFAULT_OVERTIME_THRESHOLD,
    ) -> list[MonthlyReportRow]:
        filters = filters or ReportFilters()
        days = month_days(year, month)
        expected_days = expected_working_days(
            year, month, weekend_days=self._weekend_days, holidays=self._holidays
        )
        expected_hours = Fraction(expected_days * threshold)

        selected = sorted((e for e in employees if filters.matches(e)), key=lambda e: e.employee_id)
        return [
            self._summarize(
                employee,
                records_by_employee.get(employee.employee_id) or (),
                days,
                threshold=threshold,
                expected_days=expected_days,
                expected_hours=expected_hours,
            )
            for employee in selected
        ]

    def _index_by_day(
        self, employee: Employee, records: Iterable[Optional[AttendanceRecord]], days: Sequence[date]
    ) -> dict[date, AttendanceRecord]:
        in_month = set(days)
        by_day: dict[date, AttendanceRecord] = {}
        for record in records:
            if record is None:
                continue
            if not isinstance(record, AttendanceRecord) or record.employee_id != employee.employee_id:
                logger.warning("skipping foreign record in %s's month: %r", employee.employee_id, record)
                continue
            if record.work_date not in in_month:
                logger.warning("skipping %s record outside the month: %s", employee.employee_id, record.work_date)
                continue
            if not isinstance(record.working_status, WorkingStatus):
                logger.warning("skipping %s record with unknown status %r", employee.employee_id, record.working_status)
                continue
            if not (_is_timestamp(record.check_in) and _is_timestamp(record.check_out)):
                logger.warning(
                    "skipping %s record on %s with non-integer timestamps (in=%r out=%r)",
                    employee.employee_id,
                    record.work_date,
                    record.check_in,
                    record.check_out,
                )
                continue
            by_day[record.work_date] = record
        return by_day

    def _summarize(
        self,
        employee: Employee,
        records: Iterable[Optional[AttendanceRecord]],
        days: Sequence[date],
        *,
        threshold: int,
        expected_days: int,
        expected_hours: Fraction,
    ) -> MonthlyReportRow:
        by_day = self._index_by_day(employee, records, days)

        working_days = 0
        absent_days = 0
        total = normal = overtime = ZERO

        for day in days:
            record = by_day.get(day)
            if record is None:
                absent_days += 1
                continue

            try:
                hours = self._calculator.daily_hours(record, threshold)
            except DomainError as exc:
                logger.warning(
                    "treating malformed record %s %s as absent: %s", employee.employee_id, day.isoformat(), exc
                )
                absent_days += 1
                continue

            status = record.working_status
            if status.is_working:
                working_days += 1
                total += hours.worked
                normal += hours.normal
                overtime += hours.overtime
            elif status is WorkingStatus.ABSENT:
                absent_days += 1
            # Holiday and vacation days are neutral.

        has_breakdown = employee.employee_type is EmployeeType.COMPANY
        return MonthlyReportRow(
            employee_id=employee.employee_id,
            name=employee.name,
            employee_type=employee.employee_type,
            location=employee.location,
            project=employee.project,
            expected_working_days=expected_days,
            expected_hours=expected_hours,
            working_days=working_days,
            absent_days=absent_days,
            absent_hours=Fraction(absent_days * threshold),
            total_worked_hours=total,
            normal_hours=normal if has_breakdown else None,
            overtime_hours=overtime if has_breakdown else None,
        )
