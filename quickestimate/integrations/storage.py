"""Lead photo storage.

Photos are either written under ``STORAGE_LOCAL_PATH/uploads`` and served
from ``/uploads``, or embedded as base64 data URIs when there is no writable
disk to rely on (the ``auto`` backend picks inline storage for PostgreSQL
deployments).  Either way the lead stores an opaque string reference.
"""

from __future__ import annotations

import base64
import time
import uuid
from pathlib import Path, PurePath

from quickestimate.common.enums import StorageBackend
from quickestimate.common.exceptions import BadRequestError
from quickestimate.config import settings
from quickestimate.integrations.base import BaseIntegration

UPLOADS_FOLDER = "uploads"
DEFAULT_EXTENSION = ".jpg"
DEFAULT_MIME = "image/jpeg"


def resolve_backend() -> StorageBackend:
    backend = StorageBackend(settings.STORAGE_BACKEND)
    if backend is StorageBackend.AUTO:
        return StorageBackend.INLINE if settings.uses_postgres else StorageBackend.LOCAL
    return backend


def uploads_dir() -> Path:
    return Path(settings.STORAGE_LOCAL_PATH) / UPLOADS_FOLDER


def photo_too_large_message(filename: str | None) -> str:
    limit_mb = settings.MAX_PHOTO_BYTES // (1024 * 1024)
    return f"Photo '{filename or 'photo'}' exceeds the {limit_mb}MB limit"


class StorageClient(BaseIntegration):
    """Persists uploaded photos and returns the reference stored with the lead."""

    def __init__(self, backend: StorageBackend | None = None) -> None:
        super().__init__("storage")
        self.backend = backend or resolve_backend()
        self._local_path = uploads_dir()

    async def health_check(self) -> bool:
        if self.backend is StorageBackend.INLINE:
            self.logger.info("Storage: inline data URIs")
            return True
        self._local_path.mkdir(parents=True, exist_ok=True)
        self.logger.info("Storage: local mode at %s", self._local_path)
        return True

    async def store_photo(
        self, content: bytes, filename: str | None, content_type: str | None = None,
    ) -> str:
        name = filename or "photo"
        if len(content) > settings.MAX_PHOTO_BYTES:
            raise BadRequestError(photo_too_large_message(name))

        if self.backend is StorageBackend.INLINE:
            mime = content_type or DEFAULT_MIME
            encoded = base64.b64encode(content).decode("ascii")
            self.logger.info("Inline photo: %s (%d bytes)", name, len(content))
            return f"data:{mime};base64,{encoded}"

        ext = PurePath(name).suffix or DEFAULT_EXTENSION
        stored_name = f"{int(time.time() * 1000)}-{uuid.uuid4()}{ext}"
        self._local_path.mkdir(parents=True, exist_ok=True)
        (self._local_path / stored_name).write_bytes(content)
        self.logger.info("Local photo: %s -> %s (%d bytes)", name, stored_name, len(content))
        return f"/{UPLOADS_FOLDER}/{stored_name}"

    async def delete_photo(self, reference: str) -> bool:
        """Remove a locally stored photo. Inline references have nothing on disk."""
        prefix = f"/{UPLOADS_FOLDER}/"
        if not reference.startswith(prefix):
            return False
        path = self._local_path / PurePath(reference).name
        try:
            path.unlink()
        except FileNotFoundError:
            return False
        self.logger.info("Deleted local photo: %s", path.name)
        return True
