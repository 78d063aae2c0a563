from __future__ import annotations

from dataclasses import replace
from datetime import date
from decimal import Decimal
from typing import Dict, List, Optional

import pytest

from src.personnel_system.personnel_system.attachments.model import UploadedFile
from src.personnel_system.personnel_system.common.datetime_utils import parse_local_datetime
from src.personnel_system.personnel_system.container import assemble
from src.personnel_system.personnel_system.core.enums import AttachmentCategory
from src.personnel_system.personnel_system.core.exceptions import AttachmentStoreError
from src.personnel_system.personnel_system.employees.model import Employee, EmployeeInput
from src.personnel_system.personnel_system.timesheets.model import Timesheet

FIXED_TODAY = date(2026, 10, 19)


class InMemoryEmployees:
    def __init__(self):
        self._rows: Dict[int, Employee] = {}
        self._next_id = 1

    def get_by_id(self, employee_id: int) -> Optional[Employee]:
        return self._rows.get(int(employee_id))

    def list_all(self) -> List[Employee]:
        return [self._rows[k] for k in sorted(self._rows)]

    def _build(self, employee_id, data: EmployeeInput, photo_path, document_path) -> Employee:
        return Employee(
            employee_id=employee_id,
            full_name=data.full_name,
            email=data.email,
            phone=data.phone,
            date_of_birth=data.date_of_birth,
            job_title=data.job_title,
            department=data.department,
            salary=data.salary,
            start_date=data.start_date,
            end_date=data.end_date,
            photo_path=photo_path,
            document_path=document_path,
        )

    def create(self, data, *, photo_path, document_path) -> int:
        employee_id = self._next_id
        self._next_id += 1
        self._rows[employee_id] = self._build(employee_id, data, photo_path, document_path)
        return employee_id

    def update(self, employee_id, data, *, photo_path, document_path) -> bool:
        if int(employee_id) not in self._rows:
            return False
        self._rows[int(employee_id)] = self._build(int(employee_id), data, photo_path, document_path)
        return True

    def delete_by_id(self, employee_id: int) -> bool:
        return self._rows.pop(int(employee_id), None) is not None


class InMemoryTimesheets:
    """Stores the normalized strings it receives, like the real table does."""

    def __init__(self, employees: InMemoryEmployees):
        self._employees = employees
        self.rows: Dict[int, dict] = {}
        self._next_id = 1

    def _to_model(self, timesheet_id: int, row: dict) -> Timesheet:
        employee = self._employees.get_by_id(row["employee_id"])
        return Timesheet(
            timesheet_id=timesheet_id,
            employee_id=row["employee_id"],
            start_time=parse_local_datetime(row["start_time"]),
            end_time=parse_local_datetime(row["end_time"]),
            summary=row["summary"],
            full_name=employee.full_name if employee else None,
        )

    def get_by_id(self, timesheet_id: int) -> Optional[Timesheet]:
        row = self.rows.get(int(timesheet_id))
        return self._to_model(int(timesheet_id), row) if row else None

    def list_with_employee(self) -> List[Timesheet]:
        return [self._to_model(k, self.rows[k]) for k in sorted(self.rows)]

    def create(self, *, employee_id, start_time, end_time, summary) -> int:
        timesheet_id = self._next_id
        self._next_id += 1
        self.rows[timesheet_id] = {
            "employee_id": int(employee_id),
            "start_time": start_time,
            "end_time": end_time,
            "summary": summary,
        }
        return timesheet_id

    def update(self, timesheet_id, *, employee_id, start_time, end_time, summary) -> bool:
        if int(timesheet_id) not in self.rows:
            return False
        self.rows[int(timesheet_id)] = {
            "employee_id": int(employee_id),
            "start_time": start_time,
            "end_time": end_time,
            "summary": summary,
        }
        return True

    def delete_by_id(self, timesheet_id: int) -> bool:
        return self.rows.pop(int(timesheet_id), None) is not None


class RecordingAttachments:
    def __init__(self, *, fail: bool = False):
        self.fail = fail
        self.calls: List[tuple] = []

    def store(self, upload: Optional[UploadedFile], category: AttachmentCategory) -> Optional[str]:
        if upload is None or upload.is_empty:
            return None
        self.calls.append((upload.filename, AttachmentCategory(category)))
        if self.fail:
            raise AttachmentStoreError("disk full")
        folder = "photos" if category == AttachmentCategory.PHOTO else "docs"
        return f"/uploads/{folder}/{len(self.calls)}_{upload.filename}"


def employee_input(**overrides) -> EmployeeInput:
    base = EmployeeInput(
        full_name="John Doe",
        email="john.doe@example.com",
        phone="1234567890",
        date_of_birth=date(1990, 1, 1),
        job_title="Software Engineer",
        department="Engineering",
        salary=Decimal("6000"),
        start_date=date(2020, 1, 1),
        end_date=None,
    )
    return replace(base, **overrides)


@pytest.fixture
def make_employee_input():
    return employee_input


@pytest.fixture
def fixed_today() -> date:
    return FIXED_TODAY


@pytest.fixture
def employees_repo() -> InMemoryEmployees:
    return InMemoryEmployees()


@pytest.fixture
def timesheets_repo(employees_repo) -> InMemoryTimesheets:
    return InMemoryTimesheets(employees_repo)


@pytest.fixture
def attachments() -> RecordingAttachments:
    return RecordingAttachments()


@pytest.fixture
def container(employees_repo, timesheets_repo, attachments):
    return assemble(employees_repo=employees_repo, timesheets_repo=timesheets_repo, attachments=attachments)


@pytest.fixture
def app(container):
    from src.personnel_system.personnel_system.main import create_app

    app = create_app(container=container, settings_module="config.testing")
    app.config["TESTING"] = True
    return app


@pytest.fixture
def client(app):
    return app.test_client()
