from __future__ import annotations

from dataclasses import asdict, dataclass
from datetime import date
from decimal import Decimal, InvalidOperation
from typing import Any, Dict, Mapping, Optional

from ..common.datetime_utils import parse_optional_date
from ..core.exceptions import ValidationError


@dataclass(frozen=True)
class Employee:
    """Thực thể miền (domain): Employee.

    Lưu ý: Đây là đối tượng dữ liệu thuần (không chứa code truy cập DB).
    """

    employee_id: int
    full_name: str
    email: str
    phone: str
    date_of_birth: Optional[date]
    job_title: str
    department: str
    salary: Optional[Decimal]
    start_date: Optional[date]
    end_date: Optional[date] = None
    photo_path: Optional[str] = None
    document_path: Optional[str] = None

    @property
    def is_current(self) -> bool:
        return self.end_date is None

    def to_row(self) -> Dict[str, Any]:
        """Flat dict for templates and the list view composer."""
        row = asdict(self)
        row["id"] = self.employee_id
        return row


def _text(form: Mapping[str, Any], name: str) -> str:
    value = form.get(name)
    return str(value).strip() if value is not None else ""


def _date(form: Mapping[str, Any], name: str) -> Optional[date]:
    try:
        return parse_optional_date(form.get(name))
    except ValueError:
        raise ValidationError("Invalid date, expected YYYY-MM-DD", field=name) from None


def _salary(form: Mapping[str, Any]) -> Optional[Decimal]:
    raw = _text(form, "salary")
    if not raw:
        return None
    try:
        value = Decimal(raw)
    except InvalidOperation:
        raise ValidationError("Salary must be a number", field="salary") from None
    if not value.is_finite():
        raise ValidationError("Salary must be a number", field="salary")
    return value


@dataclass(frozen=True)
class EmployeeInput:
    """Typed field set submitted by the create/update employee forms.

    Blank inputs become ``""`` (text) or ``None`` (dates, salary); presence is
    checked later by the service so all missing fields are reported together.
    """

    full_name: str = ""
    email: str = ""
    phone: str = ""
    date_of_birth: Optional[date] = None
    job_title: str = ""
    department: str = ""
    salary: Optional[Decimal] = None
    start_date: Optional[date] = None
    end_date: Optional[date] = None

    @classmethod
    def from_form(cls, form: Mapping[str, Any]) -> "EmployeeInput":
        return cls(
            full_name=_text(form, "full_name"),
            email=_text(form, "email"),
            phone=_text(form, "phone"),
            date_of_birth=_date(form, "date_of_birth"),
            job_title=_text(form, "job_title"),
            department=_text(form, "department"),
            salary=_salary(form),
            start_date=_date(form, "start_date"),
            end_date=_date(form, "end_date"),
        )

    def as_fields(self) -> Dict[str, Any]:
        return asdict(self)
