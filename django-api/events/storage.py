"""Event media on Django's Storage API.

Uploads are saved under events/ with a random name and addressed by their
public URL from then on. Deletion works back from that URL to the stored
name.
"""

import logging
import posixpath
from urllib.parse import unquote, urlparse
from uuid import uuid4

from django.conf import settings
from django.core.files.storage import Storage, default_storage

from events.domain.errors import ValidationError
from events.services.collaborators import DeletionResult, MediaStorage

logger = logging.getLogger(__name__)

MAX_IMAGE_BYTES = 8 * 1024 * 1024
IMAGE_EXTENSIONS = {".png", ".jpg", ".jpeg", ".heic", ".heif", ".webp"}
IMAGE_CONTENT_TYPES = {
    "image/png",
    "image/jpeg",
    "image/jpg",
    "image/heic",
    "image/heif",
    "image/webp",
}
UPLOAD_DIR = "events"


class DjangoMediaStorage(MediaStorage):
    """Media storage backed by a Django Storage, default_storage unless given."""

    def __init__(self, storage: Storage | None = None) -> None:
        self._storage = storage or default_storage

    def upload(self, file) -> str:
        """Raises ValidationError for non-images and files over 8 MB."""
        extension = posixpath.splitext(file.name or "")[1].lower()
        content_type = getattr(file, "content_type", None)
        if extension not in IMAGE_EXTENSIONS or (
            content_type and content_type not in IMAGE_CONTENT_TYPES
        ):
            raise ValidationError("Unsupported image format", field="file")
        if file.size > MAX_IMAGE_BYTES:
            raise ValidationError("Image must be 8MB or smaller", field="file")

        name = self._storage.save(f"{UPLOAD_DIR}/{uuid4().hex}{extension}", file)
        logger.info("Stored upload %s (%d bytes)", name, file.size)
        return self._storage.url(name)

    def delete_urls(self, urls: list[str]) -> list[DeletionResult]:
        results = [self._delete(url) for url in urls]
        succeeded = sum(1 for result in results if result.success)
        logger.info("Deleted %d/%d media files", succeeded, len(urls))
        return results

    def _delete(self, url: str) -> DeletionResult:
        name = self.name_from_url(url)
        if not name:
            logger.error("Could not extract a file name from URL: %s", url)
            return DeletionResult(url=url, success=False, error="Invalid URL")
        try:
            if not self._storage.exists(name):
                return DeletionResult(url=url, success=False, error="File not found")
            self._storage.delete(name)
        except Exception as exc:
            logger.exception("Error deleting media file %s", name)
            return DeletionResult(url=url, success=False, error=str(exc))
        return DeletionResult(url=url, success=True)

    @staticmethod
    def name_from_url(url: str) -> str:
        """Storage name for a URL: the path below MEDIA_URL, else the last segment."""
        path = unquote(urlparse(url).path)
        media_path = urlparse(settings.MEDIA_URL).path
        if media_path and media_path != "/" and path.startswith(media_path):
            return path[len(media_path):].lstrip("/")
        return posixpath.basename(path)
