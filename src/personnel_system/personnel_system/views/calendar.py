from __future__ import annotations

from typing import Iterable, List

from ..core.constants import CALENDAR_DATETIME_FORMAT
from ..timesheets.model import Timesheet


def to_calendar_events(timesheets: Iterable[Timesheet]) -> List[dict]:
    """Events in the shape the calendar widget expects."""

    return [
        {
            "id": str(t.timesheet_id),
            "title": f"{t.employee_name} - {t.summary or 'No summary'}",
            "start": t.start_time.strftime(CALENDAR_DATETIME_FORMAT),
            "end": t.end_time.strftime(CALENDAR_DATETIME_FORMAT),
        }
        for t in timesheets
    ]
