# mail_storage_api/infrastructure/storage/file_storage.py
from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from pathlib import Path
from typing import BinaryIO, Protocol


@dataclass(frozen=True)
class StoredFile:
    original_name: str
    stored_name: str
    size_bytes: int


@dataclass(frozen=True)
class FileEntry:
    filename: str
    size_bytes: int
    created_at: datetime


class FileStorage(Protocol):
    def save(
        self,
        *,
        fileobj: BinaryIO,
        original_name: str,
        max_bytes: int | None = None,
    ) -> StoredFile:
        """Persiste o arquivo com um nome único e retorna os metadados."""
        raise NotImplementedError

    def list_files(self) -> list[FileEntry]:
        """Lista o diretório (plano) na ordem em que o sistema de arquivos enumera."""
        raise NotImplementedError

    def path_for(self, stored_name: str) -> Path:
        raise NotImplementedError

    def exists(self, stored_name: str) -> bool:
        raise NotImplementedError

    def delete(self, *, stored_name: str) -> None:
        raise NotImplementedError
