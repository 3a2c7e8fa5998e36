from __future__ import annotations

from fractions import Fraction

from ...attendance.model import AttendanceRecord
from ...common.datetime_utils import hours_between
from ...core.enums import WorkingStatus
from .base import ZERO, DailyHours, HoursCalculator


class StandardHoursCalculator(HoursCalculator):
    """Standard rule: worked = out - in, split at the daily overtime threshold.

    A working day without both timestamps counts the full threshold for
    full-work statuses and nothing for partial work.
    """

    def daily_hours(self, record: AttendanceRecord, threshold: int) -> DailyHours:
        limit = Fraction(threshold)
        status = record.working_status

        if status.is_off:
            return DailyHours()

        if record.has_times:
            worked = hours_between(record.check_in, record.check_out)
        elif status in (WorkingStatus.FULLWORK, WorkingStatus.FULLWORK_OVERTIME):
            worked = limit
        else:
            worked = ZERO

        return DailyHours(
            worked=worked,
            normal=min(worked, limit),
            overtime=max(ZERO, worked - limit),
        )


def daily_hours(record: AttendanceRecord, threshold: int) -> DailyHours:
    return StandardHoursCalculator().daily_hours(record, threshold)
