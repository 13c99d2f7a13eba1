# mail_storage_api/api/routes/__init__.py

from pathlib import Path

from flask import Flask

from mail_storage_api.api.routes.health_routes import bp_health
from mail_storage_api.api.routes.mail_routes import bp_mail
from mail_storage_api.api.routes.static_routes import build_static_blueprint
from mail_storage_api.api.routes.storage_routes import bp_storage


def register_routes(app: Flask, *, api_prefix: str, public_dir: Path | None = None) -> None:
    app.register_blueprint(bp_health, url_prefix=f"{api_prefix}/health")
    app.register_blueprint(bp_mail, url_prefix=f"{api_prefix}/mail")
    app.register_blueprint(bp_storage, url_prefix=f"{api_prefix}/storage")

    # arquivos estáticos só quando a pasta existe
    if public_dir is not None and public_dir.is_dir():
        app.register_blueprint(build_static_blueprint(public_dir))
