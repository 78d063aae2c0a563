from __future__ import annotations

import logging
import time
from pathlib import Path
from typing import Callable, Optional, Union

from werkzeug.utils import secure_filename

from ..core.enums import AttachmentCategory
from ..core.exceptions import AttachmentStoreError
from .model import UploadedFile
from .store import AttachmentStore

logger = logging.getLogger(__name__)

CATEGORY_DIRS = {
    AttachmentCategory.PHOTO: "photos",
    AttachmentCategory.DOCUMENT: "docs",
}


class LocalAttachmentStore(AttachmentStore):
    """Write attachments under ``root_dir/<photos|docs>/``."""

    def __init__(
        self,
        root_dir: Union[str, Path],
        *,
        url_prefix: str = "/uploads",
        clock: Callable[[], float] = time.time,
    ):
        self._root = Path(root_dir)
        self._url_prefix = url_prefix.rstrip("/")
        self._clock = clock

    def _file_name(self, original: str) -> str:
        safe = secure_filename(original)
        suffix = secure_filename(Path(original).suffix.lstrip("."))
        if suffix and not safe.endswith(f".{suffix}"):
            # Only the bare extension survived, e.g. a non-ASCII stem.
            safe = f"upload.{suffix}"
        return f"{int(self._clock() * 1000)}_{safe or 'upload'}"

    def store(self, upload: Optional[UploadedFile], category: AttachmentCategory) -> Optional[str]:
        if upload is None or upload.is_empty:
            return None

        category = AttachmentCategory(category)
        sub_dir = CATEGORY_DIRS[category]
        name = self._file_name(upload.filename)
        target_dir = self._root / sub_dir
        try:
            target_dir.mkdir(parents=True, exist_ok=True)
            (target_dir / name).write_bytes(upload.content)
        except OSError as e:
            logger.exception("Writing %s to %s failed", upload.filename, target_dir)
            raise AttachmentStoreError(f"Could not save {upload.filename}") from e

        logger.info("Stored %s attachment %s", category.value, name)
        return f"{self._url_prefix}/{sub_dir}/{name}"
