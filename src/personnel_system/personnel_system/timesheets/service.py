from __future__ import annotations

import logging
from typing import Sequence

from ..common.datetime_utils import to_storage_datetime
from ..common.validators import validate_required_fields, validate_time_range
from ..core.exceptions import NotFoundError, ValidationError
from ..employees.repository import EmployeeRepository
from .model import Timesheet, TimesheetInput
from .repository import TimesheetRepository

logger = logging.getLogger(__name__)

REQUIRED_FIELDS = ("employee_id", "start_time", "end_time")


class TimesheetService:
    def __init__(self, timesheets: TimesheetRepository, employees: EmployeeRepository):
        self._timesheets = timesheets
        self._employees = employees

    def _validate(self, data: TimesheetInput) -> None:
        validate_required_fields(data.as_fields(), REQUIRED_FIELDS)
        validate_time_range(data.start_time, data.end_time)
        # Soft foreign key: only checked here, at write time.
        if not self._employees.get_by_id(int(data.employee_id)):
            raise ValidationError("Employee does not exist", field="employee_id")

    def get(self, timesheet_id: int) -> Timesheet:
        timesheet = self._timesheets.get_by_id(int(timesheet_id))
        if not timesheet:
            raise NotFoundError("Timesheet not found")
        return timesheet

    def list_with_employee(self) -> Sequence[Timesheet]:
        return self._timesheets.list_with_employee()

    def create(self, data: TimesheetInput) -> int:
        self._validate(data)
        timesheet_id = self._timesheets.create(
            employee_id=int(data.employee_id),
            start_time=to_storage_datetime(data.start_time),
            end_time=to_storage_datetime(data.end_time),
            summary=data.summary,
        )
        logger.info("Created timesheet %s for employee %s", timesheet_id, data.employee_id)
        return timesheet_id

    def update(self, timesheet_id: int, data: TimesheetInput) -> None:
        existing = self.get(timesheet_id)
        self._validate(data)
        self._timesheets.update(
            existing.timesheet_id,
            employee_id=int(data.employee_id),
            start_time=to_storage_datetime(data.start_time),
            end_time=to_storage_datetime(data.end_time),
            summary=data.summary,
        )
        logger.info("Updated timesheet %s", existing.timesheet_id)

    def delete(self, timesheet_id: int) -> None:
        if self._timesheets.delete_by_id(int(timesheet_id)):
            logger.info("Deleted timesheet %s", timesheet_id)
