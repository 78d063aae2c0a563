from __future__ import annotations

from enum import Enum


class AttachmentCategory(str, Enum):
    """Loại tệp đính kèm của nhân viên."""

    PHOTO = "photo"
    DOCUMENT = "document"


class AttachmentMode(str, Enum):
    """Where attachments end up: local disk (dev) or a third-party host (prod)."""

    LOCAL = "local"
    HOSTED = "hosted"


class SortOrder(str, Enum):
    ASC = "asc"
    DESC = "desc"
