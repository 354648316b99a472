# wholesale/core/storage_utils.py
"""
File storage for uploads.

Two backends share one interface:
  - SupabaseStorage: public bucket in Supabase Storage (production)
  - LocalStorage: directory on disk served by the API under /uploads

`get_storage()` picks Supabase when its credentials are configured.
"""
import logging
import uuid
from functools import lru_cache
from pathlib import Path

from wholesale.core.config import get_settings
from wholesale.core.supabase_client import supabase_admin

logger = logging.getLogger(__name__)


class SupabaseStorage:
    def __init__(self, bucket: str):
        self.bucket = bucket

    def upload(self, path: str, file_bytes: bytes, content_type: str | None = None) -> str:
        """
        Upload raw bytes and return the public URL.

        If a file already exists at this path, it is overwritten thanks to
        the 'upsert' option.
        """
        options = {"upsert": "true"}
        if content_type:
            options["content-type"] = content_type
        client = supabase_admin()
        client.storage.from_(self.bucket).upload(path, file_bytes, options)
        return client.storage.from_(self.bucket).get_public_url(path)


class LocalStorage:
    def __init__(self, root: str | Path, base_url: str):
        self.root = Path(root)
        self.base_url = base_url.rstrip("/")

    def upload(self, path: str, file_bytes: bytes, content_type: str | None = None) -> str:
        target = self.root / path
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_bytes(file_bytes)
        return f"{self.base_url}/uploads/{path}"


Storage = SupabaseStorage | LocalStorage


@lru_cache
def get_storage() -> Storage:
    settings = get_settings()
    if settings.use_supabase_storage:
        logger.info("Uploads go to Supabase bucket %r", settings.SUPABASE_BUCKET)
        return SupabaseStorage(settings.SUPABASE_BUCKET)
    return LocalStorage(settings.UPLOAD_DIR, settings.BACKEND_URL)


def generate_filename(fieldname: str, ext: str) -> str:
    """
    Generate a unique filename.

    Args:
        fieldname: form field name, used as prefix (e.g. "file")
        ext: extension without dot (e.g. "png"); may be empty

    Returns:
        A filename like "file-<uuid4 hex>.png"
    """
    name = f"{fieldname}-{uuid.uuid4().hex}"
    return f"{name}.{ext}" if ext else name
