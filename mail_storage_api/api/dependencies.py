# mail_storage_api/api/dependencies.py
from __future__ import annotations

from dataclasses import dataclass

from flask import Flask, current_app

from mail_storage_api.services.mail_service import MailService
from mail_storage_api.services.storage_service import StorageService

EXTENSION_KEY = "mail_storage_api"


@dataclass(frozen=True)
class Services:
    mail: MailService
    storage: StorageService


def init_services(app: Flask, services: Services) -> None:
    app.extensions[EXTENSION_KEY] = services


def get_services() -> Services:
    return current_app.extensions[EXTENSION_KEY]
