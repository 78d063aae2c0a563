from __future__ import annotations

import logging
from datetime import date
from typing import Callable, List, Optional, Sequence, Tuple

from ..attachments.model import UploadedFile
from ..attachments.store import AttachmentStore
from ..common.datetime_utils import today_local
from ..common.validators import (
    validate_age,
    validate_date_range,
    validate_non_negative,
    validate_required_fields,
)
from ..core.constants import EMPLOYEE_REQUIRED_FIELDS
from ..core.enums import AttachmentCategory
from ..core.exceptions import NotFoundError
from .model import Employee, EmployeeInput
from .repository import EmployeeRepository

logger = logging.getLogger(__name__)


class EmployeeService:
    """Use case: create, update and delete employee records.

    Validation always runs before any file is written or uploaded, so a
    rejected form never leaves attachments behind.
    """

    def __init__(
        self,
        employees: EmployeeRepository,
        attachments: AttachmentStore,
        *,
        today: Callable[[], date] = today_local,
    ):
        self._employees = employees
        self._attachments = attachments
        self._today = today

    def _validate(self, data: EmployeeInput) -> None:
        if data.date_of_birth is not None:
            validate_age(data.date_of_birth, self._today())
        validate_date_range(data.start_date, data.end_date)
        validate_non_negative(data.salary, "salary")
        validate_required_fields(data.as_fields(), EMPLOYEE_REQUIRED_FIELDS)

    def _store_attachments(
        self,
        photo: Optional[UploadedFile],
        document: Optional[UploadedFile],
    ) -> Tuple[Optional[str], Optional[str]]:
        photo_path = self._attachments.store(photo, AttachmentCategory.PHOTO)
        document_path = self._attachments.store(document, AttachmentCategory.DOCUMENT)
        return photo_path, document_path

    def get(self, employee_id: int) -> Employee:
        employee = self._employees.get_by_id(int(employee_id))
        if not employee:
            raise NotFoundError("Employee not found")
        return employee

    def list_all(self) -> Sequence[Employee]:
        return self._employees.list_all()

    def list_choices(self) -> List[dict]:
        """(id, name) pairs for the employee select list on timesheet forms."""
        return [{"id": e.employee_id, "full_name": e.full_name} for e in self._employees.list_all()]

    def list_departments(self) -> List[str]:
        return sorted({e.department for e in self._employees.list_all() if e.department})

    def create(
        self,
        data: EmployeeInput,
        *,
        photo: Optional[UploadedFile] = None,
        document: Optional[UploadedFile] = None,
    ) -> int:
        self._validate(data)
        photo_path, document_path = self._store_attachments(photo, document)

        employee_id = self._employees.create(data, photo_path=photo_path, document_path=document_path)
        logger.info("Created employee %s (%s)", employee_id, data.full_name)
        return employee_id

    def update(
        self,
        employee_id: int,
        data: EmployeeInput,
        *,
        photo: Optional[UploadedFile] = None,
        document: Optional[UploadedFile] = None,
    ) -> None:
        existing = self.get(employee_id)
        self._validate(data)

        new_photo, new_document = self._store_attachments(photo, document)
        self._employees.update(
            existing.employee_id,
            data,
            photo_path=new_photo or existing.photo_path,
            document_path=new_document or existing.document_path,
        )
        logger.info("Updated employee %s", existing.employee_id)

    def delete(self, employee_id: int) -> None:
        # Timesheets keep their employee_id; the link is not enforced.
        if not self._employees.delete_by_id(int(employee_id)):
            logger.info("Delete of employee %s matched no row", employee_id)
        else:
            logger.info("Deleted employee %s", employee_id)
