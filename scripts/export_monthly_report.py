"""Export the monthly attendance summary as CSV.

Example:
    python scripts/export_monthly_report.py --year 2024 --month 3 --location kuwait -o march.csv
"""

from __future__ import annotations

import argparse
import importlib
import sys
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from config import get_settings_module

from src.roster_attendance.roster_attendance.common.datetime_utils import now_utc, parse_iso_date
from src.roster_attendance.roster_attendance.container import STORAGE_MEMORY, build_container
from src.roster_attendance.roster_attendance.core.exceptions import DomainError
from src.roster_attendance.roster_attendance.employees.roster_file import load_roster
from src.roster_attendance.roster_attendance.reports.model import ReportFilters


def parse_args(argv=None) -> argparse.Namespace:
    today = now_utc()
    parser = argparse.ArgumentParser(description="Export the monthly attendance report as CSV")
    parser.add_argument("--year", type=int, default=today.year)
    parser.add_argument("--month", type=int, default=today.month)
    parser.add_argument("--location", default="all", help="kuwait, saudi or all")
    parser.add_argument("--project", default="all", help="project name (substring match) or all")
    parser.add_argument("--employee-type", default="all", help="company, supplier or all")
    parser.add_argument("-o", "--output", help="output file (default: the report's standard filename)")
    return parser.parse_args(argv)


def main(argv=None) -> None:
    args = parse_args(argv)
    settings = importlib.import_module(get_settings_module())

    storage = getattr(settings, "STORAGE_BACKEND", "mysql")
    roster_file = getattr(settings, "ROSTER_FILE", "")

    container = build_container(
        storage=storage,
        employees=load_roster(roster_file) if storage == STORAGE_MEMORY and roster_file else (),
        db_config=dict(settings.DB_CONFIG),
        default_threshold=int(getattr(settings, "DEFAULT_OVERTIME_THRESHOLD", 8)),
        weekend_days=getattr(settings, "WEEKEND_DAYS", ()),
        holidays=[parse_iso_date(d) for d in getattr(settings, "HOLIDAYS", ())],
    )

    try:
        filters = ReportFilters(location=args.location, project=args.project, employee_type=args.employee_type)
        export = container.report_service.export_csv(year=args.year, month=args.month, filters=filters)
    except DomainError as e:
        raise SystemExit(f"Error: {e}")

    out_file = Path(args.output or export.filename)
    out_file.write_bytes(export.data)
    print(f"OK: Report written: {out_file}")


if __name__ == "__main__":
    main()
