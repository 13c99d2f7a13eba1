# mail_storage_api/api/routes/storage_routes.py

from __future__ import annotations

from datetime import datetime, timezone

from flask import Blueprint, jsonify, request, send_file
from werkzeug.datastructures import FileStorage as WzFileStorage

from mail_storage_api.api.dependencies import get_services
from mail_storage_api.api.schemas.common_schema import MessageResponse
from mail_storage_api.api.schemas.file_schema import (
    FileListItemResponse,
    FilesListResponse,
    UploadedFileResponse,
    UploadFileResponse,
)
from mail_storage_api.core.exceptions import StorageError, ValidationError

bp_storage = Blueprint("storage", __name__)

UPLOAD_FIELD = "file"


# -------------------------
# Helpers
# -------------------------

def _get_single_upload() -> WzFileStorage | None:
    # exatamente um campo de arquivo, chamado "file"
    for field in request.files:
        if field != UPLOAD_FIELD:
            raise ValidationError("Unexpected field", error=f"Unexpected file field '{field}'")

    files = request.files.getlist(UPLOAD_FIELD)
    if len(files) > 1:
        raise ValidationError("Unexpected field", error=f"Only one '{UPLOAD_FIELD}' is accepted")
    return files[0] if files else None


# -------------------------
# Upload
# -------------------------

@bp_storage.post("/upload")
def upload_file():
    f = _get_single_upload()

    stored = get_services().storage.upload(
        fileobj=f.stream if f else None,
        original_name=f.filename if f else None,
    )

    payload = UploadFileResponse(
        file=UploadedFileResponse(
            filename=stored.stored_name,
            original_name=stored.original_name,
            size=stored.size_bytes,
            uploaded_at=datetime.now(timezone.utc),
        )
    )
    return jsonify(payload.model_dump(by_alias=True)), 200


# -------------------------
# Listagem / remoção
# -------------------------

@bp_storage.get("/files")
def list_files():
    entries = get_services().storage.list_files()

    payload = FilesListResponse(
        files=[
            FileListItemResponse(
                filename=e.filename,
                size=e.size_bytes,
                uploaded_at=e.created_at,
            )
            for e in entries
        ]
    )
    return jsonify(payload.model_dump(by_alias=True)), 200


@bp_storage.delete("/files/<filename>")
def delete_file(filename: str):
    get_services().storage.delete(filename)
    return jsonify(MessageResponse(message="File deleted successfully").model_dump()), 200


# -------------------------
# Download
# -------------------------

@bp_storage.get("/download/<filename>")
def download_file(filename: str):
    abs_path = get_services().storage.download_path(filename)

    try:
        return send_file(
            abs_path,
            as_attachment=True,
            download_name=filename,
            conditional=True,
        )
    except OSError as e:
        raise StorageError("Failed to download file", error=str(e)) from e
