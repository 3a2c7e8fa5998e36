from datetime import date
from fractions import Fraction

import pytest

from src.roster_attendance.roster_attendance.attendance.model import AttendanceRecord
from src.roster_attendance.roster_attendance.common.datetime_utils import parse_clock_time
from src.roster_attendance.roster_attendance.core.constants import NANOS_PER_HOUR
from src.roster_attendance.roster_attendance.core.enums import WorkingStatus
from src.roster_attendance.roster_attendance.core.exceptions import InvalidRange
from src.roster_attendance.roster_attendance.hours.calculator.standard_calculator import (
    StandardHoursCalculator,
    daily_hours,
)

DAY = date(2024, 3, 1)


def timed(check_in: str, check_out: str, status=WorkingStatus.FULLWORK) -> AttendanceRecord:
    return AttendanceRecord(
        employee_id="E1",
        work_date=DAY,
        working_status=status,
        check_in=parse_clock_time(DAY, check_in),
        check_out=parse_clock_time(DAY, check_out),
    )


def test_ten_hour_day_splits_at_threshold():
    hours = StandardHoursCalculator().daily_hours(timed("08:00", "18:00"), 8)

    assert hours.worked == 10
    assert hours.normal == 8
    assert hours.overtime == 2


def test_short_day_has_no_overtime():
    hours = daily_hours(timed("08:00", "12:30", WorkingStatus.PARTIAL_WORK), 8)

    assert hours.worked == Fraction(9, 2)
    assert hours.normal == Fraction(9, 2)
    assert hours.overtime == 0


@pytest.mark.parametrize("threshold", [0, 1, 7, 8, 9, 12, 24])
@pytest.mark.parametrize(
    "check_in,check_out",
    [("00:00", "23:59"), ("08:00", "08:01"), ("08:00", "16:00"), ("06:15", "19:45"), ("13:07", "13:08")],
)
def test_worked_is_normal_plus_overtime(threshold, check_in, check_out):
    hours = daily_hours(timed(check_in, check_out), threshold)

    assert hours.worked == hours.normal + hours.overtime
    assert hours.overtime == max(0, hours.worked - threshold)
    assert hours.normal == min(hours.worked, threshold)


@pytest.mark.parametrize("status", [WorkingStatus.ABSENT, WorkingStatus.HOLIDAY, WorkingStatus.VACATION])
def test_off_days_are_all_zero(status):
    record = AttendanceRecord(employee_id="E1", work_date=DAY, working_status=status)
    hours = daily_hours(record, 8)
    assert (hours.worked, hours.normal, hours.overtime) == (0, 0, 0)


def test_off_day_ignores_stray_timestamps():
    record = timed("08:00", "18:00", WorkingStatus.HOLIDAY)
    assert daily_hours(record, 8).worked == 0


@pytest.mark.parametrize("status", [WorkingStatus.FULLWORK, WorkingStatus.FULLWORK_OVERTIME])
def test_full_work_without_times_counts_threshold(status):
    record = AttendanceRecord(employee_id="E1", work_date=DAY, working_status=status)
    hours = daily_hours(record, 8)
    assert (hours.worked, hours.normal, hours.overtime) == (8, 8, 0)


def test_partial_work_without_times_counts_nothing():
    record = AttendanceRecord(employee_id="E1", work_date=DAY, working_status=WorkingStatus.PARTIAL_WORK)
    hours = daily_hours(record, 8)
    assert (hours.worked, hours.normal, hours.overtime) == (0, 0, 0)


def test_check_in_only_counts_as_untimed_day():
    record = AttendanceRecord(
        employee_id="E1", work_date=DAY, working_status=WorkingStatus.FULLWORK, check_in=parse_clock_time(DAY, "08:00")
    )
    assert daily_hours(record, 9).worked == 9


def test_one_nanosecond_day_is_just_above_zero():
    start = parse_clock_time(DAY, "08:00")
    record = AttendanceRecord("E1", DAY, WorkingStatus.PARTIAL_WORK, check_in=start, check_out=start + 1)

    hours = daily_hours(record, 8)
    assert hours.worked == Fraction(1, NANOS_PER_HOUR)
    assert hours.overtime == 0


def test_zero_length_day_is_invalid_range():
    start = parse_clock_time(DAY, "08:00")
    record = AttendanceRecord("E1", DAY, WorkingStatus.FULLWORK, check_in=start, check_out=start)
    with pytest.raises(InvalidRange):
        daily_hours(record, 8)


def test_zero_threshold_makes_everything_overtime():
    hours = daily_hours(timed("08:00", "17:00"), 0)
    assert (hours.worked, hours.normal, hours.overtime) == (9, 0, 9)
