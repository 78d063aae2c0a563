from __future__ import annotations

from datetime import date, datetime
from typing import Optional

from ..core.constants import STORAGE_DATETIME_FORMAT

_LOCAL_DATETIME_FORMATS = (
    "%Y-%m-%dT%H:%M",
    "%Y-%m-%dT%H:%M:%S",
    "%Y-%m-%d %H:%M",
    "%Y-%m-%d %H:%M:%S",
)


def parse_iso_date(value: str) -> date:
    """Parse YYYY-MM-DD string into date."""
    return datetime.strptime(value, "%Y-%m-%d").date()


def parse_optional_date(value: Optional[str]) -> Optional[date]:
    if value is None or not str(value).strip():
        return None
    return parse_iso_date(str(value).strip())


def parse_local_datetime(value: str) -> datetime:
    """Parse the value of an ``<input type="datetime-local">``.

    Browsers send ``YYYY-MM-DDTHH:MM``; stored rows come back with a space and
    seconds, so both shapes are accepted.
    """
    value = value.strip()
    for fmt in _LOCAL_DATETIME_FORMATS:
        try:
            return datetime.strptime(value, fmt)
        except ValueError:
            continue
    raise ValueError(f"Invalid date-time string: {value!r}")


def to_storage_datetime(value: datetime) -> str:
    return value.strftime(STORAGE_DATETIME_FORMAT)


def to_input_datetime(value) -> str:
    """Format a stored value for a datetime-local input (``YYYY-MM-DDTHH:MM``)."""
    if value is None:
        return ""
    if isinstance(value, datetime):
        return value.strftime("%Y-%m-%dT%H:%M")
    return str(value).replace(" ", "T")[:16]


def today_local() -> date:
    """Current local date.

    Note: Wrapped so tests can patch/mocked easier.
    """
    return datetime.now().date()
