from datetime import datetime

from src.personnel_system.personnel_system.timesheets.model import Timesheet
from src.personnel_system.personnel_system.views.calendar import to_calendar_events


def test_events_shape():
    events = to_calendar_events(
        [
            Timesheet(1, 1, datetime(2025, 6, 23, 8, 0), datetime(2025, 6, 23, 17, 0), "Feature work", "John Doe"),
            Timesheet(2, 7, datetime(2025, 6, 24, 17, 0, 30), datetime(2025, 6, 24, 22, 0), None, None),
        ]
    )

    assert events == [
        {"id": "1", "title": "John Doe - Feature work", "start": "2025-06-23 08:00", "end": "2025-06-23 17:00"},
        {"id": "2", "title": "Unknown employee - No summary", "start": "2025-06-24 17:00", "end": "2025-06-24 22:00"},
    ]
