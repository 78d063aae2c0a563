from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import Timesheet


class TimesheetRepository(Protocol):
    """Start/end times cross this interface already normalized to
    ``YYYY-MM-DD HH:MM:SS`` strings."""

    def get_by_id(self, timesheet_id: int) -> Optional[Timesheet]:
        raise NotImplementedError

    def list_with_employee(self) -> Sequence[Timesheet]:
        """All timesheets joined with the employee name (UI table/calendar)."""

        raise NotImplementedError

    def create(self, *, employee_id: int, start_time: str, end_time: str, summary: Optional[str]) -> int:
        raise NotImplementedError

    def update(
        self,
        timesheet_id: int,
        *,
        employee_id: int,
        start_time: str,
        end_time: str,
        summary: Optional[str],
    ) -> bool:
        raise NotImplementedError

    def delete_by_id(self, timesheet_id: int) -> bool:
        raise NotImplementedError
