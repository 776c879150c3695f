"""
Create/update/delete of a row together with the file it points at.

Ordering rules:

* create writes the file first, then inserts the row;
* update writes the new file inside the transaction and only removes the old
  file once the transaction has committed;
* delete removes the row and only removes its file after commit.

A failure between the two halves therefore leaves an orphaned file (which
`prune_orphan_assets` can collect), never a row pointing at a missing file.
"""

from functools import partial
from typing import Any

from django.db import transaction

from .logging import ErrorLogger
from .repositories import Repository
from .storage import BlobStore


class AssetTransactionManager:
    def __init__(
        self,
        repository: Repository,
        blob_store: BlobStore,
        *,
        asset_field: str,
        prefix: str,
        error_logger: ErrorLogger | None = None,
    ):
        self.repository = repository
        self.blob_store = blob_store
        self.asset_field = asset_field
        self.prefix = prefix
        self.error_logger = error_logger or ErrorLogger()

    @property
    def resource_name(self) -> str:
        return self.repository.model._meta.verbose_name

    def create(self, data: dict[str, Any], file=None, scope: dict[str, Any] | None = None):
        new_path = self.blob_store.put(file, self.prefix) if file is not None else None
        try:
            with transaction.atomic():
                fields = {**data, **(scope or {})}
                if new_path is not None:
                    fields[self.asset_field] = new_path
                return self.repository.create(fields)
        except Exception:
            self._remove_quietly(new_path, "failed create")
            raise

    def update(self, pk, data: dict[str, Any], file=None, scope: dict[str, Any] | None = None):
        new_path = None
        try:
            with transaction.atomic():
                instance = self.repository.get_or_fail(pk, scope)
                old_path = getattr(instance, self.asset_field)

                fields = dict(data)
                if file is not None:
                    new_path = self.blob_store.put(file, self.prefix)
                    fields[self.asset_field] = new_path
                instance = self.repository.update(instance.pk, fields, scope)

                if new_path is not None and new_path != old_path:
                    transaction.on_commit(
                        partial(self._remove_quietly, old_path, "replaced")
                    )
            return instance
        except Exception:
            self._remove_quietly(new_path, "failed update")
            raise

    def delete(self, pk, scope: dict[str, Any] | None = None) -> int:
        instance = self.repository.get_or_fail(pk, scope)
        asset_path = getattr(instance, self.asset_field)

        with transaction.atomic():
            deleted = self.repository.delete_one(instance.pk, scope)
            if deleted:
                transaction.on_commit(partial(self._remove_quietly, asset_path, "deleted"))
        return deleted

    def _remove_quietly(self, path: str | None, reason: str) -> None:
        # Cleanup must never replace the error (or success) the caller sees.
        if not path:
            return
        try:
            self.blob_store.delete(path)
        except Exception:
            self.error_logger.warning(
                "Could not remove %s asset %s (%s)", self.resource_name, path, reason, exc_info=True
            )
