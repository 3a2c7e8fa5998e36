from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from fractions import Fraction

from ...attendance.model import AttendanceRecord

ZERO = Fraction(0)


@dataclass(frozen=True)
class DailyHours:
    """Exact hour quantities for one day; ``worked == normal + overtime``."""

    worked: Fraction = ZERO
    normal: Fraction = ZERO
    overtime: Fraction = ZERO


class HoursCalculator(ABC):
    """Calculator interface (Strategy Pattern for daily hours)."""

    @abstractmethod
    def daily_hours(self, record: AttendanceRecord, threshold: int) -> DailyHours:
        raise NotImplementedError
