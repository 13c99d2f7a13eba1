from flask import Flask

from mail_storage_api.config.settings import Settings


def configure_app(app: Flask, config: Settings) -> None:
    app.config["ENV"] = config.environment
    app.config["DEBUG"] = config.debug
    # o werkzeug recusa o corpo antes de bufferizar quando excede o limite
    app.config["MAX_CONTENT_LENGTH"] = config.max_upload_bytes
    app.json.sort_keys = False
