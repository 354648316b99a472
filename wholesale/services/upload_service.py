# wholesale/services/upload_service.py
import logging
from pathlib import PurePath

from fastapi import HTTPException, status

from wholesale.core.config import get_settings
from wholesale.core.storage_utils import Storage, generate_filename, get_storage

logger = logging.getLogger(__name__)

# Documents (business licences, certificates) are accepted alongside images.
ALLOWED_CONTENT_TYPES: set[str] = {
    "image/jpeg",
    "image/png",
    "image/webp",
    "image/gif",
    "application/pdf",
}


class UploadService:
    """
    Validates uploaded files and stores them under `files/` in the active storage.
    """

    def __init__(self, storage: Storage | None = None, max_bytes: int | None = None):
        self._storage = storage
        self.max_bytes = max_bytes or get_settings().MAX_UPLOAD_BYTES

    @property
    def storage(self) -> Storage:
        if self._storage is None:
            self._storage = get_storage()
        return self._storage

    def upload(
        self,
        filename: str | None,
        content_type: str | None,
        file_bytes: bytes,
        fieldname: str = "file",
    ) -> str:
        """
        Store a file and return its public URL.

        Raises:
            HTTPException(400): missing/unsupported content type or empty file.
            HTTPException(413): file larger than MAX_UPLOAD_BYTES.
        """
        if not content_type or content_type not in ALLOWED_CONTENT_TYPES:
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail="Unsupported file type. Allowed: JPEG, PNG, WEBP, GIF, PDF.",
            )
        if not file_bytes:
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail="Empty file",
            )
        if len(file_bytes) > self.max_bytes:
            raise HTTPException(
                status_code=status.HTTP_413_REQUEST_ENTITY_TOO_LARGE,
                detail=f"File too large (max {self.max_bytes // (1024 * 1024)}MB).",
            )

        ext = PurePath(filename or "").suffix.lstrip(".").lower()
        path = f"files/{generate_filename(fieldname, ext)}"
        url = self.storage.upload(path, file_bytes, content_type)
        logger.info("Stored upload %s (%d bytes)", path, len(file_bytes))
        return url
