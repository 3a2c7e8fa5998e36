from __future__ import annotations

from datetime import date

import pytest

from src.roster_attendance.roster_attendance.attendance.memory_attendance_repository import InMemoryAttendanceRepository
from src.roster_attendance.roster_attendance.attendance.model import AttendancePatch, AttendanceRecord
from src.roster_attendance.roster_attendance.attendance.service import AttendanceService
from src.roster_attendance.roster_attendance.common.datetime_utils import parse_clock_time
from src.roster_attendance.roster_attendance.core.enums import EmployeeType, Location, WorkingStatus
from src.roster_attendance.roster_attendance.core.exceptions import (
    InvalidRange,
    InvalidTime,
    NoCheckIn,
    NotFound,
    StatusConflict,
    ValidationError,
)
from src.roster_attendance.roster_attendance.employees.memory_employee_repository import InMemoryEmployeeRepository
from src.roster_attendance.roster_attendance.employees.model import Employee

DAY = date(2024, 3, 1)


def at(clock: str, day: date = DAY) -> int:
    return parse_clock_time(day, clock)


@pytest.fixture
def repo():
    return InMemoryAttendanceRepository()


@pytest.fixture
def svc(repo):
    roster = InMemoryEmployeeRepository(
        [
            Employee("E1", "A", EmployeeType.COMPANY, Location.KUWAIT),
            Employee("E2", "B", EmployeeType.SUPPLIER, Location.SAUDI),
        ]
    )
    return AttendanceService(repo, roster)


def test_first_check_in_creates_record(svc):
    rec = svc.upsert("E1", DAY, AttendancePatch(working_status=WorkingStatus.FULLWORK, check_in=at("08:00")))

    assert rec == AttendanceRecord("E1", DAY, WorkingStatus.FULLWORK, check_in=at("08:00"))
    assert svc.get("E1", DAY) == rec


def test_check_in_without_status_defaults_to_fullwork(svc):
    rec = svc.upsert("E1", DAY, AttendancePatch(check_in=at("08:00")))
    assert rec.working_status == WorkingStatus.FULLWORK


def test_check_out_merges_into_existing_record(svc):
    svc.upsert("E1", DAY, AttendancePatch(working_status=WorkingStatus.PARTIAL_WORK, check_in=at("08:00")))
    rec = svc.upsert("E1", DAY, AttendancePatch(check_out=at("12:30")))

    assert rec.working_status == WorkingStatus.PARTIAL_WORK
    assert rec.check_in == at("08:00")
    assert rec.check_out == at("12:30")


def test_upsert_is_idempotent(svc, repo):
    patch = AttendancePatch(working_status=WorkingStatus.FULLWORK, check_in=at("08:00"), check_out=at("18:00"))

    once = svc.upsert("E1", DAY, patch)
    twice = svc.upsert("E1", DAY, patch)

    assert once == twice
    assert repo.get("E1", DAY) == once


def test_off_status_clears_existing_timestamps(svc):
    svc.upsert("E1", DAY, AttendancePatch(working_status=WorkingStatus.FULLWORK, check_in=at("08:00")))
    svc.upsert("E1", DAY, AttendancePatch(check_out=at("17:00")))

    svc.set_working_status("E1", DAY, WorkingStatus.ABSENT)

    rec = svc.get("E1", DAY)
    assert rec.working_status == WorkingStatus.ABSENT
    assert rec.check_in is None
    assert rec.check_out is None


@pytest.mark.parametrize("status", [WorkingStatus.ABSENT, WorkingStatus.HOLIDAY, WorkingStatus.VACATION])
def test_off_status_ignores_timestamps_in_same_patch(svc, status):
    rec = svc.upsert("E1", DAY, AttendancePatch(working_status=status, check_in=at("08:00"), check_out=at("17:00")))

    assert rec.working_status == status
    assert rec.check_in is None and rec.check_out is None


@pytest.mark.parametrize("status", [WorkingStatus.ABSENT, WorkingStatus.HOLIDAY, WorkingStatus.VACATION])
def test_check_in_on_off_day_is_a_status_conflict(svc, status):
    svc.set_working_status("E1", DAY, status)

    with pytest.raises(StatusConflict):
        svc.upsert("E1", DAY, AttendancePatch(check_in=at("08:00")))

    assert svc.get("E1", DAY).working_status == status


def test_setting_working_status_first_allows_check_in(svc):
    svc.set_working_status("E1", DAY, WorkingStatus.HOLIDAY)

    rec = svc.upsert("E1", DAY, AttendancePatch(working_status=WorkingStatus.FULLWORK_OVERTIME, check_in=at("07:00")))

    assert rec.working_status == WorkingStatus.FULLWORK_OVERTIME
    assert rec.check_in == at("07:00")


def test_check_out_without_check_in_fails(svc):
    with pytest.raises(NoCheckIn):
        svc.upsert("E1", DAY, AttendancePatch(check_out=at("17:00")))
    assert svc.get("E1", DAY) is None

    svc.set_working_status("E1", DAY, WorkingStatus.FULLWORK)
    with pytest.raises(NoCheckIn):
        svc.upsert("E1", DAY, AttendancePatch(check_out=at("17:00")))


def test_check_out_equal_to_check_in_fails(svc):
    svc.upsert("E1", DAY, AttendancePatch(check_in=at("08:00")))
    with pytest.raises(InvalidRange):
        svc.upsert("E1", DAY, AttendancePatch(check_out=at("08:00")))


def test_check_out_before_check_in_fails_and_keeps_record(svc):
    before = svc.upsert("E1", DAY, AttendancePatch(check_in=at("08:00")))
    with pytest.raises(InvalidRange):
        svc.upsert("E1", DAY, AttendancePatch(check_out=at("07:59")))
    assert svc.get("E1", DAY) == before


def test_check_out_one_nanosecond_after_check_in_succeeds(svc):
    svc.upsert("E1", DAY, AttendancePatch(check_in=at("08:00")))
    rec = svc.upsert("E1", DAY, AttendancePatch(check_out=at("08:00") + 1))
    assert rec.check_out - rec.check_in == 1


def test_new_check_in_after_stored_check_out_fails(svc):
    svc.upsert("E1", DAY, AttendancePatch(check_in=at("08:00"), check_out=at("17:00")))
    with pytest.raises(InvalidRange):
        svc.upsert("E1", DAY, AttendancePatch(check_in=at("18:00")))


def test_empty_patch_is_rejected(svc):
    with pytest.raises(ValidationError):
        svc.upsert("E1", DAY, AttendancePatch())


def test_non_integer_timestamp_is_invalid_time(svc):
    with pytest.raises(InvalidTime):
        svc.upsert("E1", DAY, AttendancePatch(check_in="08:00"))


def test_unknown_employee_is_not_found(svc):
    with pytest.raises(NotFound):
        svc.upsert("NOPE", DAY, AttendancePatch(working_status=WorkingStatus.FULLWORK))
    with pytest.raises(NotFound):
        svc.list_month("NOPE", 2024, 3)


def test_get_missing_record_returns_none(svc):
    assert svc.get("E1", DAY) is None


def test_get_working_status(svc):
    with pytest.raises(NotFound):
        svc.get_working_status("E1", DAY)
    svc.set_working_status("E1", DAY, WorkingStatus.VACATION)
    assert svc.get_working_status("E1", DAY) == WorkingStatus.VACATION


def test_list_month_has_one_slot_per_day(svc):
    svc.set_working_status("E1", date(2024, 2, 29), WorkingStatus.FULLWORK)
    svc.set_working_status("E1", date(2024, 3, 1), WorkingStatus.FULLWORK)
    svc.set_working_status("E1", date(2024, 3, 15), WorkingStatus.ABSENT)
    svc.set_working_status("E2", date(2024, 3, 2), WorkingStatus.HOLIDAY)

    slots = svc.list_month("E1", 2024, 3)

    assert len(slots) == 31
    assert slots[0].work_date == date(2024, 3, 1)
    assert slots[14].working_status == WorkingStatus.ABSENT
    assert sum(1 for s in slots if s is not None) == 2
    assert slots[1] is None


def test_record_check_in_and_out_derive_the_day(svc):
    svc.record_check_in("E1", at("06:00"), WorkingStatus.FULLWORK_OVERTIME)
    rec = svc.record_check_out("E1", at("19:00"))

    assert rec.work_date == DAY
    assert rec.working_status == WorkingStatus.FULLWORK_OVERTIME


def test_record_check_out_for_overnight_shift_uses_explicit_day(svc):
    svc.record_check_in("E1", at("22:00"))
    rec = svc.record_check_out("E1", at("06:00", date(2024, 3, 2)), work_date=DAY)

    assert rec.work_date == DAY
    assert rec.check_out == at("06:00", date(2024, 3, 2))


def test_record_check_in_with_off_status_is_rejected(svc):
    with pytest.raises(StatusConflict):
        svc.record_check_in("E1", at("08:00"), WorkingStatus.ABSENT)
