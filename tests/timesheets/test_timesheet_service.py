from __future__ import annotations

from datetime import datetime

import pytest

from src.personnel_system.personnel_system.core.exceptions import MissingFieldsError, NotFoundError, ValidationError
from src.personnel_system.personnel_system.timesheets.model import TimesheetInput
from src.personnel_system.personnel_system.timesheets.service import TimesheetService


@pytest.fixture
def employee_id(employees_repo, make_employee_input):
    return employees_repo.create(make_employee_input(), photo_path=None, document_path=None)


@pytest.fixture
def service(timesheets_repo, employees_repo):
    return TimesheetService(timesheets_repo, employees_repo)


def entry(employee_id, start="2025-06-23T09:00", end="2025-06-23T17:00", summary=None):
    return TimesheetInput(
        employee_id=employee_id,
        start_time=datetime.strptime(start, "%Y-%m-%dT%H:%M"),
        end_time=datetime.strptime(end, "%Y-%m-%dT%H:%M"),
        summary=summary,
    )


def test_create_normalizes_to_storage_form(service, timesheets_repo, employee_id):
    timesheet_id = service.create(entry(employee_id, summary="Sprint work"))

    row = timesheets_repo.rows[timesheet_id]
    assert row["start_time"] == "2025-06-23 09:00:00"
    assert row["end_time"] == "2025-06-23 17:00:00"
    assert row["summary"] == "Sprint work"


def test_identical_start_and_end_rejected(service, timesheets_repo, employee_id):
    with pytest.raises(ValidationError) as exc:
        service.create(entry(employee_id, "2025-06-23T09:00", "2025-06-23T09:00"))

    assert exc.value.errors == {"time_validation": "Start time must be before end time"}
    assert timesheets_repo.rows == {}


def test_end_before_start_rejected(service, employee_id):
    with pytest.raises(ValidationError):
        service.create(entry(employee_id, "2025-06-23T17:00", "2025-06-23T09:00"))


def test_unknown_employee_rejected(service, timesheets_repo):
    with pytest.raises(ValidationError) as exc:
        service.create(entry(42))
    assert exc.value.field == "employee_id"
    assert timesheets_repo.rows == {}


def test_missing_times_reported_together(service, employee_id):
    with pytest.raises(MissingFieldsError) as exc:
        service.create(TimesheetInput(employee_id=employee_id))
    assert exc.value.fields == ["start_time", "end_time"]


def test_overnight_shift_is_allowed(service, employee_id):
    service.create(entry(employee_id, "2025-06-24T22:00", "2025-06-25T06:00"))


def test_update_replaces_all_fields(service, employees_repo, make_employee_input, employee_id):
    other = employees_repo.create(make_employee_input(full_name="Jane"), photo_path=None, document_path=None)
    timesheet_id = service.create(entry(employee_id, summary="first"))

    service.update(timesheet_id, entry(other, "2025-06-24T08:00", "2025-06-24T12:00"))

    updated = service.get(timesheet_id)
    assert updated.employee_id == other
    assert updated.full_name == "Jane"
    assert updated.start_time == datetime(2025, 6, 24, 8, 0)
    assert updated.summary is None


def test_update_validates_time_range(service, employee_id):
    timesheet_id = service.create(entry(employee_id))
    with pytest.raises(ValidationError):
        service.update(timesheet_id, entry(employee_id, "2025-06-23T10:00", "2025-06-23T10:00"))
    assert service.get(timesheet_id).start_time == datetime(2025, 6, 23, 9, 0)


def test_update_unknown_timesheet(service, employee_id):
    with pytest.raises(NotFoundError):
        service.update(5, entry(employee_id))


def test_delete(service, employee_id):
    timesheet_id = service.create(entry(employee_id))
    service.delete(timesheet_id)
    with pytest.raises(NotFoundError):
        service.get(timesheet_id)


def test_list_joins_employee_name(service, employees_repo, employee_id):
    service.create(entry(employee_id))
    employees_repo.delete_by_id(employee_id)
    service_rows = service.list_with_employee()

    assert len(service_rows) == 1
    assert service_rows[0].employee_name == "Unknown employee"
