from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import Employee, EmployeeInput


class EmployeeRepository(Protocol):
    """Giao diện repository cho Employee.

    Lưu ý (DIP): tầng service phụ thuộc vào interface này, không phụ thuộc trực tiếp DB cụ thể.
    """

    def get_by_id(self, employee_id: int) -> Optional[Employee]:
        raise NotImplementedError

    def list_all(self) -> Sequence[Employee]:
        raise NotImplementedError

    def create(
        self,
        data: EmployeeInput,
        *,
        photo_path: Optional[str],
        document_path: Optional[str],
    ) -> int:
        raise NotImplementedError

    def update(
        self,
        employee_id: int,
        data: EmployeeInput,
        *,
        photo_path: Optional[str],
        document_path: Optional[str],
    ) -> bool:
        """Replace every mutable column of the employee."""

        raise NotImplementedError

    def delete_by_id(self, employee_id: int) -> bool:
        raise NotImplementedError
