"""Domain validation rules for employee and timesheet field sets.

Every validator returns normally when the input is acceptable and raises a
:class:`ValidationError` (or :class:`MissingFieldsError`) otherwise. None of
them touch storage or files.
"""

from __future__ import annotations

from datetime import date, datetime
from decimal import Decimal
from typing import Any, Iterable, List, Mapping, Optional, Union

from ..core.constants import MINIMUM_EMPLOYEE_AGE
from ..core.exceptions import MissingFieldsError, ValidationError

AGE_ERROR = "Employee must be at least 18 years old."
DATE_RANGE_ERROR = "Start date must be before or equal to end date"
TIME_RANGE_ERROR = "Start time must be before end time"


def age_on(date_of_birth: date, reference_date: date) -> int:
    """Whole years between ``date_of_birth`` and ``reference_date``."""
    age = reference_date.year - date_of_birth.year
    if (reference_date.month, reference_date.day) < (date_of_birth.month, date_of_birth.day):
        age -= 1
    return age


def validate_age(
    date_of_birth: date,
    reference_date: date,
    *,
    minimum_age: int = MINIMUM_EMPLOYEE_AGE,
) -> None:
    # Birthday later this year does not count yet.
    if age_on(date_of_birth, reference_date) < minimum_age:
        raise ValidationError(AGE_ERROR, field="date_of_birth")


def validate_date_range(start: Optional[date], end: Optional[date]) -> None:
    if start is None or end is None:
        return
    if start > end:
        raise ValidationError(DATE_RANGE_ERROR, field="date_range")


def validate_time_range(start_time: datetime, end_time: datetime) -> None:
    if not start_time < end_time:
        raise ValidationError(TIME_RANGE_ERROR, field="time_validation")


def validate_non_negative(value: Optional[Union[int, float, Decimal]], field_name: str) -> None:
    if value is not None and value < 0:
        raise ValidationError(f"{field_name} must not be negative", field=field_name)


def _is_blank(value: Any) -> bool:
    if value is None:
        return True
    return not str(value).strip()


def validate_required_fields(fields: Mapping[str, Any], required: Iterable[str]) -> None:
    missing: List[str] = [name for name in required if _is_blank(fields.get(name))]
    if missing:
        raise MissingFieldsError(missing)
