from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping

from .attachments.factory import build_attachment_store
from .attachments.store import AttachmentStore
from .core.constants import DEFAULT_UPLOAD_TIMEOUT
from .database.connection import DBConfig, DatabaseConnection
from .database.mysql_base import StorageAdapter
from .employees.mysql_employee_repository import MySQLEmployeeRepository
from .employees.repository import EmployeeRepository
from .employees.service import EmployeeService
from .timesheets.mysql_timesheet_repository import MySQLTimesheetRepository
from .timesheets.repository import TimesheetRepository
from .timesheets.service import TimesheetService


@dataclass(frozen=True)
class Container:
    attachments: AttachmentStore

    employees_repo: EmployeeRepository
    timesheets_repo: TimesheetRepository

    employee_service: EmployeeService
    timesheet_service: TimesheetService


def assemble(
    *,
    employees_repo: EmployeeRepository,
    timesheets_repo: TimesheetRepository,
    attachments: AttachmentStore,
) -> Container:
    """Wire services around already-built repositories (also used by tests)."""

    return Container(
        attachments=attachments,
        employees_repo=employees_repo,
        timesheets_repo=timesheets_repo,
        employee_service=EmployeeService(employees_repo, attachments),
        timesheet_service=TimesheetService(timesheets_repo, employees_repo),
    )


def build_container(*, db_config: Mapping[str, Any], attachment_config: Mapping[str, Any]) -> Container:
    conn = DatabaseConnection(DBConfig.from_mapping(db_config))
    storage = StorageAdapter(conn)

    attachments = build_attachment_store(
        attachment_config.get("mode", "local"),
        upload_folder=attachment_config.get("upload_folder"),
        image_client_id=str(attachment_config.get("image_client_id") or ""),
        timeout=attachment_config.get("timeout", DEFAULT_UPLOAD_TIMEOUT),
    )

    return assemble(
        employees_repo=MySQLEmployeeRepository(storage),
        timesheets_repo=MySQLTimesheetRepository(storage),
        attachments=attachments,
    )
