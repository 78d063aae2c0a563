from __future__ import annotations

from pathlib import Path
from typing import Optional, Union

import requests

from ..core.constants import DEFAULT_UPLOAD_TIMEOUT
from ..core.enums import AttachmentMode
from .hosted_store import HostedAttachmentStore
from .local_store import LocalAttachmentStore
from .store import AttachmentStore


def build_attachment_store(
    mode: Union[AttachmentMode, str],
    *,
    upload_folder: Union[str, Path, None] = None,
    image_client_id: str = "",
    timeout: Optional[float] = DEFAULT_UPLOAD_TIMEOUT,
    session: Optional[requests.Session] = None,
) -> AttachmentStore:
    """Pick the attachment backend for the deployment mode."""

    try:
        mode = AttachmentMode(str(getattr(mode, "value", mode)).lower())
    except ValueError:
        raise ValueError(f"Unknown attachment mode: {mode!r}") from None

    if mode == AttachmentMode.LOCAL:
        if upload_folder is None:
            raise ValueError("upload_folder is required for local attachments")
        return LocalAttachmentStore(upload_folder)

    return HostedAttachmentStore(image_client_id=image_client_id, session=session, timeout=timeout)
