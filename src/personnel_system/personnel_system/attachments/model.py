from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from werkzeug.datastructures import FileStorage


@dataclass(frozen=True)
class UploadedFile:
    """A file received from a form, detached from the request stream."""

    filename: str
    content: bytes
    content_type: Optional[str] = None

    @property
    def is_empty(self) -> bool:
        # Browsers submit an unnamed part when the file input is left blank.
        return not self.filename

    @classmethod
    def from_file_storage(cls, storage: Optional[FileStorage]) -> Optional["UploadedFile"]:
        if storage is None or not storage.filename:
            return None
        return cls(
            filename=storage.filename,
            content=storage.read(),
            content_type=storage.mimetype or None,
        )
