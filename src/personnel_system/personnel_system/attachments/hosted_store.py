from __future__ import annotations

import base64
import logging
from typing import Optional

import requests

from ..core.constants import DEFAULT_UPLOAD_TIMEOUT
from ..core.enums import AttachmentCategory
from ..core.exceptions import AttachmentStoreError
from .model import UploadedFile
from .store import AttachmentStore

logger = logging.getLogger(__name__)

IMAGE_HOST_URL = "https://api.imgur.com/3/image"
FILE_HOST_URL = "https://catbox.moe/user/api.php"


class HostedAttachmentStore(AttachmentStore):
    """Upload attachments to third-party hosts.

    Photos go to the image host as a base64 payload and come back as a JSON
    document whose ``data.link`` is the canonical URL. Documents go to the
    file host as multipart form data; the response body is the URL itself.
    """

    def __init__(
        self,
        *,
        image_client_id: str,
        session: Optional[requests.Session] = None,
        timeout: Optional[float] = DEFAULT_UPLOAD_TIMEOUT,
        image_host_url: str = IMAGE_HOST_URL,
        file_host_url: str = FILE_HOST_URL,
    ):
        self._client_id = image_client_id
        self._session = session or requests.Session()
        self._timeout = timeout
        self._image_host_url = image_host_url
        self._file_host_url = file_host_url

    def store(self, upload: Optional[UploadedFile], category: AttachmentCategory) -> Optional[str]:
        if upload is None or upload.is_empty:
            return None

        category = AttachmentCategory(category)
        try:
            if category == AttachmentCategory.PHOTO:
                link = self._upload_image(upload)
            else:
                link = self._upload_file(upload)
        except requests.RequestException as e:
            logger.exception("Upload of %s failed", upload.filename)
            raise AttachmentStoreError(f"Could not upload {upload.filename}") from e

        logger.info("Uploaded %s attachment %s -> %s", category.value, upload.filename, link)
        return link

    def _upload_image(self, upload: UploadedFile) -> str:
        if not self._client_id:
            raise AttachmentStoreError("Image host client id is not configured")

        response = self._session.post(
            self._image_host_url,
            headers={"Authorization": f"Client-ID {self._client_id}"},
            data={"image": base64.b64encode(upload.content).decode("ascii"), "type": "base64"},
            timeout=self._timeout,
        )
        response.raise_for_status()

        try:
            link = response.json()["data"]["link"]
        except (ValueError, KeyError, TypeError) as e:
            raise AttachmentStoreError("Image host returned an unexpected response") from e
        if not isinstance(link, str) or not link:
            raise AttachmentStoreError("Image host returned an unexpected response")
        return link

    def _upload_file(self, upload: UploadedFile) -> str:
        response = self._session.post(
            self._file_host_url,
            data={"reqtype": "fileupload"},
            files={
                "fileToUpload": (
                    upload.filename,
                    upload.content,
                    upload.content_type or "application/octet-stream",
                )
            },
            timeout=self._timeout,
        )
        response.raise_for_status()

        body = response.text.strip()
        if not body.startswith("https://"):
            raise AttachmentStoreError(f"File host upload failed: {body[:200]}")
        return body
