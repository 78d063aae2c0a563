from __future__ import annotations

from typing import Optional, Protocol

from ..core.enums import AttachmentCategory
from .model import UploadedFile


class AttachmentStore(Protocol):
    """Persist an uploaded file and hand back an opaque reference.

    The reference is a path or URL the templates can link to. Returns ``None``
    when there is nothing to store (no file, or a file part without a name).
    Raises ``AttachmentStoreError`` on any I/O or network failure.
    """

    def store(self, upload: Optional[UploadedFile], category: AttachmentCategory) -> Optional[str]:
        raise NotImplementedError
