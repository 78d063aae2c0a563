from __future__ import annotations

from decimal import Decimal
from typing import Any, Dict, Optional, Sequence

from ..database.mysql_base import StorageAdapter
from .model import Employee, EmployeeInput
from .repository import EmployeeRepository

_COLUMNS = """
    id, full_name, email, phone, date_of_birth, job_title, department,
    salary, start_date, end_date, photo_path, document_path
"""


def _row_to_employee(row: Dict[str, Any]) -> Employee:
    salary = row.get("salary")
    return Employee(
        employee_id=int(row["id"]),
        full_name=row["full_name"],
        email=row["email"],
        phone=row["phone"],
        date_of_birth=row.get("date_of_birth"),
        job_title=row["job_title"],
        department=row["department"],
        salary=Decimal(str(salary)) if salary is not None else None,
        start_date=row.get("start_date"),
        end_date=row.get("end_date"),
        photo_path=row.get("photo_path"),
        document_path=row.get("document_path"),
    )


def _params(data: EmployeeInput, photo_path: Optional[str], document_path: Optional[str]) -> tuple:
    return (
        data.full_name,
        data.email,
        data.phone,
        data.date_of_birth,
        data.job_title,
        data.department,
        data.salary,
        data.start_date,
        data.end_date,
        photo_path,
        document_path,
    )


class MySQLEmployeeRepository(EmployeeRepository):
    def __init__(self, storage: StorageAdapter):
        self._storage = storage

    def get_by_id(self, employee_id: int) -> Optional[Employee]:
        row = self._storage.get(f"SELECT {_COLUMNS} FROM employees WHERE id=%s", (int(employee_id),))
        return _row_to_employee(row) if row else None

    def list_all(self) -> Sequence[Employee]:
        rows = self._storage.all(f"SELECT {_COLUMNS} FROM employees ORDER BY id ASC")
        return [_row_to_employee(r) for r in rows]

    def create(
        self,
        data: EmployeeInput,
        *,
        photo_path: Optional[str],
        document_path: Optional[str],
    ) -> int:
        result = self._storage.run(
            """
            INSERT INTO employees(
                full_name, email, phone, date_of_birth, job_title, department,
                salary, start_date, end_date, photo_path, document_path
            )
            VALUES(%s,%s,%s,%s,%s,%s,%s,%s,%s,%s,%s)
            """,
            _params(data, photo_path, document_path),
        )
        return int(result.lastrowid or 0)

    def update(
        self,
        employee_id: int,
        data: EmployeeInput,
        *,
        photo_path: Optional[str],
        document_path: Optional[str],
    ) -> bool:
        result = self._storage.run(
            """
            UPDATE employees
            SET full_name=%s, email=%s, phone=%s, date_of_birth=%s, job_title=%s, department=%s,
                salary=%s, start_date=%s, end_date=%s, photo_path=%s, document_path=%s
            WHERE id=%s
            """,
            _params(data, photo_path, document_path) + (int(employee_id),),
        )
        return result.rowcount > 0

    def delete_by_id(self, employee_id: int) -> bool:
        result = self._storage.run("DELETE FROM employees WHERE id=%s", (int(employee_id),))
        return result.rowcount > 0
