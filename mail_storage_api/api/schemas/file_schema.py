# mail_storage_api/api/schemas/file_schema.py
from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, Field, field_serializer

from mail_storage_api.api.schemas._datetime_serializer import serialize_dt


class UploadedFileResponse(BaseModel):
    filename: str
    original_name: str = Field(serialization_alias="originalname")
    size: int
    uploaded_at: datetime = Field(serialization_alias="uploadedAt")

    @field_serializer("uploaded_at")
    def serialize_uploaded_at(self, value: datetime):
        return serialize_dt(value)


class UploadFileResponse(BaseModel):
    success: bool = True
    message: str = "File uploaded successfully"
    file: UploadedFileResponse


class FileListItemResponse(BaseModel):
    filename: str
    size: int
    uploaded_at: datetime = Field(serialization_alias="uploadedAt")

    @field_serializer("uploaded_at")
    def serialize_uploaded_at(self, value: datetime):
        return serialize_dt(value)


class FilesListResponse(BaseModel):
    success: bool = True
    files: list[FileListItemResponse]
