from __future__ import annotations

import pytest

from src.roster_attendance.roster_attendance.container import STORAGE_MEMORY, build_container
from src.roster_attendance.roster_attendance.core.enums import Designation, EmployeeType, Location
from src.roster_attendance.roster_attendance.employees.model import Employee


@pytest.fixture
def employees():
    return [
        Employee(
            "E1", "Ahmed Ali", EmployeeType.COMPANY, Location.KUWAIT,
            project="Tower A", designation=Designation.SITE_TIMEKEEPER,
        ),
        Employee("E2", "Bilal Khan", EmployeeType.SUPPLIER, Location.KUWAIT, project="Tower A"),
        Employee("E3", "Chandra Rao", EmployeeType.COMPANY, Location.SAUDI, project="Riyadh Metro"),
    ]


@pytest.fixture
def container(employees):
    return build_container(storage=STORAGE_MEMORY, employees=employees)


@pytest.fixture
def app(monkeypatch, container):
    monkeypatch.setenv("APP_ENV", "testing")
    from src.roster_attendance.roster_attendance.main import create_app

    return create_app(container)


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def admin_client(client):
    with client.session_transaction() as sess:
        sess["user_id"] = 1
        sess["role"] = "admin"
    return client
