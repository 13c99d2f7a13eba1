# mail_storage_api/main.py
from __future__ import annotations

import logging
from pathlib import Path

from flask import Flask
from flask_cors import CORS

from mail_storage_api.api.dependencies import Services, init_services
from mail_storage_api.api.middlewares.error_handler import register_error_handlers
from mail_storage_api.api.routes import register_routes
from mail_storage_api.config.flask_config import configure_app
from mail_storage_api.config.logging_config import setup_logging
from mail_storage_api.config.settings import Settings, settings
from mail_storage_api.infrastructure.mail.mail_transport import MailTransport
from mail_storage_api.infrastructure.mail.smtp_mail_transport import SmtpConfig, SmtpMailTransport
from mail_storage_api.infrastructure.storage.local_file_storage import LocalFileStorage, LocalFileStorageConfig
from mail_storage_api.infrastructure.storage.naming import STORED_NAME_STRATEGIES
from mail_storage_api.services.mail_service import MailService
from mail_storage_api.services.storage_service import StorageService

API_PREFIX = "/api"

logger = logging.getLogger(__name__)


def build_services(config: Settings, *, mail_transport: MailTransport | None = None) -> Services:
    # criado uma vez no startup; falha aqui (pasta de uploads) aborta o processo
    storage = LocalFileStorage(
        config=LocalFileStorageConfig(
            base_path=config.uploads_dir,
            strict_paths=config.strict_storage_paths,
        ),
        name_generator=STORED_NAME_STRATEGIES[config.stored_name_strategy],
    )

    if mail_transport is None:
        mail_transport = SmtpMailTransport(
            config=SmtpConfig(
                host=config.smtp_host,
                port=config.smtp_port,
                user=config.smtp_user,
                password=config.smtp_pass,
                secure=config.smtp_secure,
                timeout=config.smtp_timeout_seconds,
            )
        )

    return Services(
        mail=MailService(transport=mail_transport, sender=config.sender_address),
        storage=StorageService(storage=storage, max_bytes=config.max_upload_bytes),
    )


def create_app(config: Settings | None = None, *, mail_transport: MailTransport | None = None) -> Flask:
    config = config or settings
    setup_logging(config.log_level)

    app = Flask(__name__, static_folder=None)

    CORS(
        app,
        resources={rf"{API_PREFIX}/*": {"origins": config.cors_origins_list}},
        # "*" literal como o cors() do express, em vez de ecoar o Origin
        send_wildcard=config.cors_origins_list == "*",
        allow_headers=["Content-Type", "Authorization"],
        methods=["GET", "POST", "DELETE", "OPTIONS"],
    )

    configure_app(app, config)
    init_services(app, build_services(config, mail_transport=mail_transport))

    register_routes(
        app,
        api_prefix=API_PREFIX,
        public_dir=Path(config.public_dir).expanduser().resolve(),
    )
    register_error_handlers(app)

    return app


def run() -> None:
    app = create_app()
    logger.info("Server running on port %s", settings.port)
    app.run(host=settings.host, port=settings.port, debug=settings.debug)


if __name__ == "__main__":
    run()
