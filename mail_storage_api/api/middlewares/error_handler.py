# mail_storage_api/api/middlewares/error_handler.py
import logging

from flask import Flask, jsonify
from pydantic import ValidationError as PydanticValidationError
from werkzeug.exceptions import HTTPException, RequestEntityTooLarge

from mail_storage_api.api.schemas.common_schema import ErrorResponse
from mail_storage_api.core.exceptions import AppError

logger = logging.getLogger(__name__)


def _envelope(message: str, status_code: int, error: str | None = None):
    body = ErrorResponse(message=message, error=error).model_dump(exclude_none=True)
    return jsonify(body), status_code


def register_error_handlers(app: Flask) -> None:
    @app.errorhandler(AppError)
    def handle_app_error(err: AppError):
        if err.status_code >= 500:
            logger.error("%s: %s", err.message, err.error, exc_info=err)
        else:
            logger.warning("%s (%s)", err.message, err.status_code)
        return _envelope(err.message, err.status_code, err.error)

    @app.errorhandler(PydanticValidationError)
    def handle_validation_error(err: PydanticValidationError):
        logger.warning("Invalid request body: %s", err)
        return _envelope("Invalid request body", 400, str(err))

    @app.errorhandler(RequestEntityTooLarge)
    def handle_too_large(err: RequestEntityTooLarge):
        # o corpo é recusado pelo werkzeug antes de chegar na rota
        logger.warning("Request body rejected: over MAX_CONTENT_LENGTH")
        return _envelope("File too large", 413, err.description)

    @app.errorhandler(HTTPException)
    def handle_http_exception(err: HTTPException):
        return _envelope(err.name, err.code or 500, err.description)

    @app.errorhandler(Exception)
    def handle_unexpected_error(err: Exception):
        logger.exception("Unhandled error")
        return _envelope("Internal server error", 500, str(err))
