from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

from ..attendance.service import AttendanceService
from ..employees.repository import EmployeeRepository
from ..settings.service import OvertimeSettingsService
from .aggregator import MonthlyAggregator
from .csv_formatter import report_filename, to_csv
from .model import MonthlyReportRow, ReportFilters

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CsvExport:
    filename: str
    content: str

    @property
    def data(self) -> bytes:
        return self.content.encode("utf-8")


class MonthlyReportService:
    def __init__(
        self,
        employees: EmployeeRepository,
        attendance: AttendanceService,
        settings: OvertimeSettingsService,
        *,
        aggregator: Optional[MonthlyAggregator] = None,
    ):
        self._employees = employees
        self._attendance = attendance
        self._settings = settings
        self._aggregator = aggregator or MonthlyAggregator()

    def build_monthly_report(
        self,
        *,
        year: int,
        month: int,
        filters: Optional[ReportFilters] = None,
    ) -> list[MonthlyReportRow]:
        filters = filters or ReportFilters()
        threshold = self._settings.get_threshold()

        employees = [e for e in self._employees.list_all() if filters.matches(e)]
        records = self._attendance.records_for_month([e.employee_id for e in employees], year, month)

        rows = self._aggregator.aggregate(employees, records, year, month, filters, threshold)
        logger.debug("monthly report %04d-%02d: %d rows (threshold=%dh)", year, month, len(rows), threshold)
        return rows

    def export_csv(
        self,
        *,
        year: int,
        month: int,
        filters: Optional[ReportFilters] = None,
    ) -> CsvExport:
        rows = self.build_monthly_report(year=year, month=month, filters=filters)
        logger.info("exporting monthly report %04d-%02d (%d rows)", year, month, len(rows))
        return CsvExport(filename=report_filename(year, month), content=to_csv(rows))

    def list_projects(self) -> list[str]:
        return sorted({e.project for e in self._employees.list_all() if e.project})
