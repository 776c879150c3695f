"""File storage for uploaded images, keyed by generated path."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from pathlib import PurePosixPath
from urllib.parse import urlsplit

from django.conf import settings
from django.core.files.storage import Storage, default_storage
from ulid import ULID

logger = logging.getLogger(__name__)

DEFAULT_EXTENSION = "bin"


def new_blob_name(original_name: str | None = None) -> str:
    """Sortable unique file name: a 26-character ULID plus the upload's extension."""
    suffix = PurePosixPath(original_name or "").suffix.lstrip(".").lower()
    return f"{ULID()}.{suffix or DEFAULT_EXTENSION}"


class BlobStore:
    """
    Thin layer over a Django storage backend.

    Paths are relative to the backend root (e.g. ``logos/01H....png``) and are
    what the database stores. Public URLs are derived from the path only, never
    persisted.
    """

    def __init__(self, storage: Storage | None = None, base_url: str | None = None):
        self.storage = storage or default_storage
        self.base_url = base_url if base_url is not None else settings.PUBLIC_BASE_URL

    def put(self, file, prefix: str) -> str:
        name = str(PurePosixPath(prefix.strip("/")) / new_blob_name(getattr(file, "name", None)))
        if hasattr(file, "seek"):
            file.seek(0)
        # Storage.save never overwrites: on a clash it picks an alternative name.
        return self.storage.save(name, file)

    def exists(self, path: str | None) -> bool:
        if not path:
            return False
        return self.storage.exists(path)

    def delete(self, paths: str | Iterable[str] | None) -> int:
        """Best-effort removal. Returns how many paths were handed to the backend."""
        if paths is None:
            return 0
        if isinstance(paths, str):
            paths = [paths]

        removed = 0
        for path in paths:
            if not path:
                continue
            try:
                self.storage.delete(path)
            except OSError:
                logger.warning("Could not delete blob %s", path, exc_info=True)
                continue
            removed += 1
        return removed

    def url_for(self, path: str | None) -> str | None:
        """Public URL: the storage URL appended to `base_url`, keeping any path it has."""
        if not path:
            return None
        url = self.storage.url(path)
        if urlsplit(url).scheme:
            return url
        return f"{self.base_url.rstrip('/')}/{url.lstrip('/')}"

    def modified_at(self, path: str):
        return self.storage.get_modified_time(path)

    def list(self, prefix: str) -> list[str]:
        """All blob paths stored directly under `prefix`."""
        prefix = prefix.strip("/")
        if not self.storage.exists(prefix):
            return []
        _, files = self.storage.listdir(prefix)
        return sorted(f"{prefix}/{name}" for name in files)


def get_blob_store() -> BlobStore:
    return BlobStore()
