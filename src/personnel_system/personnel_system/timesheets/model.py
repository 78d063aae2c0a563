from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Any, Dict, Mapping, Optional

from ..common.datetime_utils import parse_local_datetime, to_input_datetime, to_storage_datetime
from ..core.exceptions import ValidationError

UNKNOWN_EMPLOYEE = "Unknown employee"


@dataclass(frozen=True)
class Timesheet:
    """Read-model: timesheet joined with its employee's display name.

    ``full_name`` is ``None`` when the referenced employee no longer exists.
    """

    timesheet_id: int
    employee_id: int
    start_time: datetime
    end_time: datetime
    summary: Optional[str] = None
    full_name: Optional[str] = None

    @property
    def employee_name(self) -> str:
        return self.full_name or UNKNOWN_EMPLOYEE

    def to_row(self) -> Dict[str, Any]:
        return {
            "id": self.timesheet_id,
            "employee_id": self.employee_id,
            "full_name": self.employee_name,
            "start_time": to_storage_datetime(self.start_time),
            "end_time": to_storage_datetime(self.end_time),
            "start_input": to_input_datetime(self.start_time),
            "end_input": to_input_datetime(self.end_time),
            "summary": self.summary,
        }


def _datetime(form: Mapping[str, Any], name: str) -> Optional[datetime]:
    raw = form.get(name)
    if raw is None or not str(raw).strip():
        return None
    try:
        return parse_local_datetime(str(raw))
    except ValueError:
        raise ValidationError("Invalid date-time, expected YYYY-MM-DDTHH:MM", field=name) from None


def _employee_id(form: Mapping[str, Any]) -> Optional[int]:
    raw = str(form.get("employee_id") or "").strip()
    if not raw:
        return None
    if not raw.isdecimal():
        raise ValidationError("Employee is not valid", field="employee_id")
    return int(raw)


@dataclass(frozen=True)
class TimesheetInput:
    employee_id: Optional[int] = None
    start_time: Optional[datetime] = None
    end_time: Optional[datetime] = None
    summary: Optional[str] = None

    @classmethod
    def from_form(cls, form: Mapping[str, Any]) -> "TimesheetInput":
        summary = str(form.get("summary") or "").strip()
        return cls(
            employee_id=_employee_id(form),
            start_time=_datetime(form, "start_time"),
            end_time=_datetime(form, "end_time"),
            summary=summary or None,
        )

    def as_fields(self) -> Dict[str, Any]:
        return {
            "employee_id": self.employee_id,
            "start_time": self.start_time,
            "end_time": self.end_time,
        }
