# mail_storage_api/infrastructure/storage/local_file_storage.py
from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from datetime import datetime, timezone
from pathlib import Path
from typing import BinaryIO

from mail_storage_api.core.exceptions import PayloadTooLargeError, StorageError
from mail_storage_api.infrastructure.storage.file_storage import FileEntry, FileStorage, StoredFile
from mail_storage_api.infrastructure.storage.naming import StoredNameGenerator, timestamp_stored_name

logger = logging.getLogger(__name__)

CHUNK_SIZE = 1024 * 1024  # 1MB


@dataclass(frozen=True)
class LocalFileStorageConfig:
    base_path: str
    strict_paths: bool = False


class LocalFileStorage(FileStorage):
    def __init__(
        self,
        *,
        config: LocalFileStorageConfig,
        name_generator: StoredNameGenerator = timestamp_stored_name,
    ) -> None:
        raw = (config.base_path or "").strip()
        if not raw:
            raise StorageError("Storage directory not configured (UPLOADS_DIR is empty).")

        self._base = Path(raw).expanduser().resolve()
        self._strict = config.strict_paths
        self._name_generator = name_generator

        # sem retry: se não conseguir criar a pasta, a inicialização aborta
        try:
            self._base.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise StorageError(
                f"Failed to initialise storage directory '{self._base}'", error=str(e)
            ) from e

        if not self._base.is_dir():
            raise StorageError(f"Storage path '{self._base}' is not a directory.")

        logger.info("Storage directory ready at %s", self._base)

    @property
    def base_path(self) -> Path:
        return self._base

    def path_for(self, stored_name: str) -> Path:
        path = self._base / stored_name
        if not self._strict:
            return path

        # anti path traversal (opt-in, ver strict_storage_paths)
        abs_path = path.resolve()
        base_str = str(self._base)
        abs_str = str(abs_path)
        if not abs_str.startswith(base_str + os.sep):
            raise ValueError("stored_name inválido (path traversal).")
        return abs_path

    def exists(self, stored_name: str) -> bool:
        try:
            return self.path_for(stored_name).exists()
        except ValueError:
            return False

    def save(
        self,
        *,
        fileobj: BinaryIO,
        original_name: str,
        max_bytes: int | None = None,
    ) -> StoredFile:
        stored_name = self._name_generator(original_name)
        abs_path = self._base / stored_name
        size = 0

        try:
            with open(abs_path, "wb") as out:
                while True:
                    chunk = fileobj.read(CHUNK_SIZE)
                    if not chunk:
                        break
                    size += len(chunk)
                    if max_bytes is not None and size > max_bytes:
                        raise PayloadTooLargeError(
                            "File too large",
                            error=f"File exceeds the {max_bytes} bytes limit",
                        )
                    out.write(chunk)
        except PayloadTooLargeError:
            self._discard_partial(abs_path)
            raise
        except OSError as e:
            self._discard_partial(abs_path)
            raise StorageError("Failed to upload file", error=str(e)) from e

        return StoredFile(
            original_name=original_name,
            stored_name=stored_name,
            size_bytes=size,
        )

    def list_files(self) -> list[FileEntry]:
        out: list[FileEntry] = []
        try:
            with os.scandir(self._base) as it:
                for entry in it:
                    try:
                        if not entry.is_file():
                            continue
                        st = entry.stat()
                    except FileNotFoundError:
                        # removido entre a listagem e o stat
                        continue

                    created = getattr(st, "st_birthtime", None) or st.st_ctime
                    out.append(
                        FileEntry(
                            filename=entry.name,
                            size_bytes=st.st_size,
                            created_at=datetime.fromtimestamp(created, tz=timezone.utc),
                        )
                    )
        except OSError as e:
            raise StorageError("Failed to list files", error=str(e)) from e

        return out

    def delete(self, *, stored_name: str) -> None:
        try:
            self.path_for(stored_name).unlink()
        except (OSError, ValueError) as e:
            raise StorageError("Failed to delete file", error=str(e)) from e

    @staticmethod
    def _discard_partial(abs_path: Path) -> None:
        # melhor esforço: remove arquivo parcial se existir
        try:
            abs_path.unlink(missing_ok=True)
        except OSError:
            logger.warning("Could not remove partial upload %s", abs_path)
