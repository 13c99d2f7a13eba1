# mail_storage_api/core/exceptions.py

class AppError(Exception):
    def __init__(self, message: str, *, status_code: int = 400, error: str | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        # texto bruto da causa (exposto ao cliente, ver DESIGN.md)
        self.error = error


class ValidationError(AppError):
    def __init__(self, message: str = "Invalid request", *, error: str | None = None) -> None:
        super().__init__(message, status_code=400, error=error)


class NotFoundError(AppError):
    def __init__(self, message: str = "Resource not found") -> None:
        super().__init__(message, status_code=404)


class PayloadTooLargeError(AppError):
    def __init__(self, message: str = "File too large", *, error: str | None = None) -> None:
        super().__init__(message, status_code=413, error=error)


class StorageError(AppError):
    def __init__(self, message: str = "Storage failure", *, error: str | None = None) -> None:
        super().__init__(message, status_code=500, error=error)


class MailTransportError(AppError):
    def __init__(self, message: str = "Failed to send email", *, error: str | None = None) -> None:
        super().__init__(message, status_code=500, error=error)
