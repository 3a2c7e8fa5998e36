from __future__ import annotations

import pytest

from src.roster_attendance.roster_attendance.core.enums import Designation, EmployeeType, Location
from src.roster_attendance.roster_attendance.core.exceptions import NotFound, ValidationError
from src.roster_attendance.roster_attendance.employees.memory_employee_repository import InMemoryEmployeeRepository
from src.roster_attendance.roster_attendance.employees.roster_file import load_roster, parse_roster
from src.roster_attendance.roster_attendance.employees.service import EmployeeQueryService
from src.roster_attendance.roster_attendance.reports.model import ReportFilters

HEADER = "employee_id,name,employee_type,location,project,designation\n"


def test_parse_roster_accepts_values_and_labels():
    employees = parse_roster(
        [
            HEADER,
            "E1,Ahmed Ali,company,kuwait,Tower A,siteTimekeeper\n",
            'E2,"Khan, Bilal",Supplier,Saudi Arabia,,\n',
        ]
    )

    e1, e2 = employees
    assert e1.designation is Designation.SITE_TIMEKEEPER
    assert e1.project == "Tower A"
    assert e2.name == "Khan, Bilal"
    assert (e2.employee_type, e2.location) == (EmployeeType.SUPPLIER, Location.SAUDI)
    assert e2.project is None
    assert e2.designation is None


@pytest.mark.parametrize(
    "lines",
    [
        ["employee_id,name\n", "E1,A\n"],
        [HEADER, "E1,A,company,kuwait,,\n", "E1,B,company,kuwait,,\n"],
        [HEADER, "E1,A,contractor,kuwait,,\n"],
        [HEADER, "E1,A,company,kuwait,,astronaut\n"],
        [HEADER, ",A,company,kuwait,,\n"],
    ],
)
def test_parse_roster_rejects_bad_input(lines):
    with pytest.raises(ValidationError):
        parse_roster(lines)


def test_load_roster_reads_utf8_file_with_bom(tmp_path):
    path = tmp_path / "roster.csv"
    path.write_text("\ufeff" + HEADER + "E7,محمد العلي,company,kuwait,Tower A,cook\n", encoding="utf-8")

    (employee,) = load_roster(path)

    assert employee.employee_id == "E7"
    assert employee.name == "محمد العلي"
    assert employee.designation.label == "Cook"


def test_query_service_lists_and_gets(employees):
    svc = EmployeeQueryService(InMemoryEmployeeRepository(employees))

    assert [e.employee_id for e in svc.list_employees()] == ["E1", "E2", "E3"]
    assert [e.employee_id for e in svc.list_employees(ReportFilters(employee_type="supplier"))] == ["E2"]
    assert svc.get_employee("E3").location is Location.SAUDI


def test_query_service_unknown_employee_is_not_found(employees):
    with pytest.raises(NotFound):
        EmployeeQueryService(InMemoryEmployeeRepository(employees)).get_employee("E9")
