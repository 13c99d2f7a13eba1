# mail_storage_api/services/storage_service.py
from __future__ import annotations

import logging
from pathlib import Path
from typing import BinaryIO

from mail_storage_api.core.exceptions import NotFoundError, ValidationError
from mail_storage_api.infrastructure.storage.file_storage import FileEntry, FileStorage, StoredFile

logger = logging.getLogger(__name__)


class StorageService:
    def __init__(self, *, storage: FileStorage, max_bytes: int | None = None) -> None:
        self._storage = storage
        self._max_bytes = max_bytes

    def upload(
        self,
        *,
        fileobj: BinaryIO | None,
        original_name: str | None,
    ) -> StoredFile:
        if fileobj is None or not original_name:
            raise ValidationError("No file uploaded")

        stored = self._storage.save(
            fileobj=fileobj,
            original_name=original_name,
            max_bytes=self._max_bytes,
        )
        logger.info(
            "Stored upload %s as %s (%d bytes)",
            stored.original_name,
            stored.stored_name,
            stored.size_bytes,
        )
        return stored

    def list_files(self) -> list[FileEntry]:
        return self._storage.list_files()

    def delete(self, filename: str) -> None:
        # check-then-act sem lock: corrida com outro DELETE vira 500, não 404
        if not self._storage.exists(filename):
            raise NotFoundError("File not found")

        self._storage.delete(stored_name=filename)
        logger.info("Deleted %s", filename)

    def download_path(self, filename: str) -> Path:
        if not self._storage.exists(filename):
            raise NotFoundError("File not found")
        return self._storage.path_for(filename)
