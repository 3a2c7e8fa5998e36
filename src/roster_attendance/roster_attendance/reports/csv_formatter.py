from __future__ import annotations

import calendar
import csv
import io
from fractions import Fraction
from typing import Iterable, Optional

from ..core.constants import MISSING_VALUE
from ..core.enums import EmployeeType, Location
from ..core.exceptions import ValidationError
from .model import MonthlyReportRow, round_hours

BOM = "\ufeff"

HEADER = [
    "Employee ID",
    "Name",
    "Type",
    "Location",
    "Project",
    "Expected Days",
    "Expected Hours",
    "Working Days",
    "Absent Days",
    "Absent Hours",
    "Total Hours",
    "Normal Hours",
    "Overtime Hours",
]


def format_hours(value: Optional[Fraction]) -> str:
    """One decimal place; missing values render as a dash."""
    if value is None:
        return MISSING_VALUE
    return f"{float(round_hours(value)):.1f}"


def _row_cells(row: MonthlyReportRow) -> list[str]:
    return [
        row.employee_id,
        row.name,
        row.employee_type.label,
        row.location.label,
        row.project or MISSING_VALUE,
        str(int(row.expected_working_days)),
        format_hours(row.expected_hours),
        str(int(row.working_days)),
        str(int(row.absent_days)),
        format_hours(row.absent_hours),
        format_hours(row.total_worked_hours),
        format_hours(row.normal_hours),
        format_hours(row.overtime_hours),
    ]


def to_csv(rows: Iterable[MonthlyReportRow]) -> str:
    """Render report rows as CSV text, prefixed with a UTF-8 byte-order mark.

    The BOM makes spreadsheet tools pick UTF-8, so non-ASCII employee names
    display correctly.
    """
    out = io.StringIO()
    out.write(BOM)
    writer = csv.writer(out)
    writer.writerow(HEADER)
    for row in rows:
        writer.writerow(_row_cells(row))
    return out.getvalue()


def to_csv_bytes(rows: Iterable[MonthlyReportRow]) -> bytes:
    return to_csv(rows).encode("utf-8")


def _parse_hours(value: str) -> Optional[Fraction]:
    return None if value == MISSING_VALUE else Fraction(value)


def _by_label(enum_cls, label: str):
    for member in enum_cls:
        if member.label == label or member.value == label:
            return member
    raise ValidationError(f"Unknown {enum_cls.__name__} label: {label!r}")


def read_csv(text: str) -> list[MonthlyReportRow]:
    """Parse text produced by ``to_csv`` back into rows (hours at one-decimal precision)."""
    if text.startswith(BOM):
        text = text[len(BOM):]

    reader = csv.reader(io.StringIO(text))
    header = next(reader, None)
    if header != HEADER:
        raise ValidationError("Not a monthly report CSV: unexpected header")

    rows: list[MonthlyReportRow] = []
    for cells in reader:
        if not cells:
            continue
        if len(cells) != len(HEADER):
            raise ValidationError(f"Expected {len(HEADER)} columns, got {len(cells)}")
        rows.append(
            MonthlyReportRow(
                employee_id=cells[0],
                name=cells[1],
                employee_type=_by_label(EmployeeType, cells[2]),
                location=_by_label(Location, cells[3]),
                project=None if cells[4] == MISSING_VALUE else cells[4],
                expected_working_days=int(cells[5]),
                expected_hours=Fraction(cells[6]),
                working_days=int(cells[7]),
                absent_days=int(cells[8]),
                absent_hours=Fraction(cells[9]),
                total_worked_hours=Fraction(cells[10]),
                normal_hours=_parse_hours(cells[11]),
                overtime_hours=_parse_hours(cells[12]),
            )
        )
    return rows


def report_filename(year: int, month: int) -> str:
    return f"monthly-report-{int(year)}-{int(month):02d}-{calendar.month_name[int(month)]}.csv"
