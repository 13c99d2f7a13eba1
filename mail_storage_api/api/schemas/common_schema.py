# mail_storage_api/api/schemas/common_schema.py
from pydantic import BaseModel


class MessageResponse(BaseModel):
    success: bool = True
    message: str


class ErrorResponse(BaseModel):
    success: bool = False
    message: str
    error: str | None = None


class HealthResponse(BaseModel):
    status: str = "ok"
    message: str = "Server is running"
