"""Filter, sort and paginate an in-memory record set for list pages.

Records are plain mappings (``Employee.to_row()`` / ``Timesheet.to_row()``).
Filters are combined with AND. Sorting is stable and puts missing values
last whatever the direction.
"""

from __future__ import annotations

import math
import numbers
from dataclasses import dataclass, field, replace
from decimal import Decimal, InvalidOperation
from itertools import islice
from typing import Any, Iterable, List, Mapping, Optional, Sequence, Tuple

from ..core.constants import DEFAULT_PAGE_SIZE
from ..core.enums import SortOrder

Record = Mapping[str, Any]


@dataclass(frozen=True)
class ViewQuery:
    search_term: str = ""
    search_field: str = "full_name"
    department: str = ""
    salary_ceiling: Optional[Decimal] = None
    employee_name: str = ""
    sort_field: Optional[str] = None
    sort_order: SortOrder = SortOrder.ASC
    page_size: int = DEFAULT_PAGE_SIZE
    page: int = 1

    @classmethod
    def from_args(
        cls,
        args: Mapping[str, Any],
        *,
        page_size: int = DEFAULT_PAGE_SIZE,
        default_salary_ceiling: Optional[Decimal] = None,
        sort_fields: Sequence[str] = (),
    ) -> "ViewQuery":
        """Build a query from request args; unusable values fall back to defaults."""

        sort_field = (args.get("sort") or "").strip() or None
        if sort_field and sort_fields and sort_field not in sort_fields:
            sort_field = None

        try:
            order = SortOrder((args.get("order") or "asc").lower())
        except ValueError:
            order = SortOrder.ASC

        return cls(
            search_term=(args.get("q") or "").strip(),
            department=(args.get("department") or "").strip(),
            salary_ceiling=_decimal_or(args.get("salary_max"), default_salary_ceiling),
            employee_name=(args.get("employee") or "").strip(),
            sort_field=sort_field,
            sort_order=order,
            page_size=max(1, page_size),
            page=_int_or(args.get("page"), 1),
        )

    def with_page(self, page: int) -> "ViewQuery":
        return replace(self, page=page)


@dataclass(frozen=True)
class Page:
    items: List[Record]
    page: int
    page_size: int
    total: int
    total_pages: int
    query: ViewQuery = field(default_factory=ViewQuery)

    @property
    def has_prev(self) -> bool:
        return self.page > 1

    @property
    def has_next(self) -> bool:
        return self.page < self.total_pages


def _int_or(value: Any, default: int) -> int:
    try:
        return int(value)
    except (TypeError, ValueError):
        return default


def _decimal_or(value: Any, default: Optional[Decimal]) -> Optional[Decimal]:
    if value is None or not str(value).strip():
        return default
    try:
        parsed = Decimal(str(value).strip())
    except InvalidOperation:
        return default
    return parsed if parsed.is_finite() else default


def _is_missing(value: Any) -> bool:
    return value is None or (isinstance(value, str) and not value.strip())


def matches(record: Record, query: ViewQuery) -> bool:
    if query.search_term:
        haystack = str(record.get(query.search_field) or "").lower()
        if query.search_term.lower() not in haystack:
            return False

    if query.department and record.get("department") != query.department:
        return False

    if query.salary_ceiling is not None:
        salary = record.get("salary")
        # Employees without a salary are never hidden by the ceiling.
        if salary is not None and Decimal(str(salary)) > query.salary_ceiling:
            return False

    if query.employee_name and record.get("full_name") != query.employee_name:
        return False

    return True


def _sort_key(value: Any) -> Tuple[int, Any]:
    if isinstance(value, numbers.Number) and not isinstance(value, bool):
        return (0, value)
    return (1, str(value))


def sort_records(records: Iterable[Record], sort_field: Optional[str], order: SortOrder) -> List[Record]:
    records = list(records)
    if not sort_field:
        return records

    present = [r for r in records if not _is_missing(r.get(sort_field))]
    missing = [r for r in records if _is_missing(r.get(sort_field))]
    present.sort(key=lambda r: _sort_key(r.get(sort_field)), reverse=order == SortOrder.DESC)
    return present + missing


def compose(records: Iterable[Record], query: ViewQuery) -> Page:
    filtered = [r for r in records if matches(r, query)]
    ordered = sort_records(filtered, query.sort_field, query.sort_order)

    total = len(ordered)
    total_pages = max(1, math.ceil(total / query.page_size))
    page = min(max(1, query.page), total_pages)
    start = (page - 1) * query.page_size

    return Page(
        items=list(islice(ordered, start, start + query.page_size)),
        page=page,
        page_size=query.page_size,
        total=total,
        total_pages=total_pages,
        query=query.with_page(page),
    )
