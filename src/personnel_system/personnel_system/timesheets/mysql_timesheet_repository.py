from __future__ import annotations

from datetime import datetime
from typing import Any, Dict, Optional, Sequence

from ..common.datetime_utils import parse_local_datetime
from ..database.mysql_base import StorageAdapter
from .model import Timesheet
from .repository import TimesheetRepository

# LEFT JOIN: timesheets of a deleted employee stay listed.
_SELECT_JOINED = """
    SELECT t.id, t.employee_id, t.start_time, t.end_time, t.summary, e.full_name
    FROM timesheets t
    LEFT JOIN employees e ON e.id = t.employee_id
"""


def _as_datetime(value: Any) -> datetime:
    if isinstance(value, datetime):
        return value
    return parse_local_datetime(str(value))


def _row_to_timesheet(row: Dict[str, Any]) -> Timesheet:
    return Timesheet(
        timesheet_id=int(row["id"]),
        employee_id=int(row["employee_id"]),
        start_time=_as_datetime(row["start_time"]),
        end_time=_as_datetime(row["end_time"]),
        summary=row.get("summary"),
        full_name=row.get("full_name"),
    )


class MySQLTimesheetRepository(TimesheetRepository):
    def __init__(self, storage: StorageAdapter):
        self._storage = storage

    def get_by_id(self, timesheet_id: int) -> Optional[Timesheet]:
        row = self._storage.get(_SELECT_JOINED + " WHERE t.id=%s", (int(timesheet_id),))
        return _row_to_timesheet(row) if row else None

    def list_with_employee(self) -> Sequence[Timesheet]:
        rows = self._storage.all(_SELECT_JOINED + " ORDER BY t.start_time ASC, t.id ASC")
        return [_row_to_timesheet(r) for r in rows]

    def create(self, *, employee_id: int, start_time: str, end_time: str, summary: Optional[str]) -> int:
        result = self._storage.run(
            "INSERT INTO timesheets(employee_id, start_time, end_time, summary) VALUES(%s,%s,%s,%s)",
            (int(employee_id), start_time, end_time, summary),
        )
        return int(result.lastrowid or 0)

    def update(
        self,
        timesheet_id: int,
        *,
        employee_id: int,
        start_time: str,
        end_time: str,
        summary: Optional[str],
    ) -> bool:
        result = self._storage.run(
            """
            UPDATE timesheets
            SET employee_id=%s, start_time=%s, end_time=%s, summary=%s
            WHERE id=%s
            """,
            (int(employee_id), start_time, end_time, summary, int(timesheet_id)),
        )
        return result.rowcount > 0

    def delete_by_id(self, timesheet_id: int) -> bool:
        result = self._storage.run("DELETE FROM timesheets WHERE id=%s", (int(timesheet_id),))
        return result.rowcount > 0
