"""Shared pytest fixtures."""

import pytest

from mail_storage_api.config.settings import Settings
from mail_storage_api.core.exceptions import MailTransportError
from mail_storage_api.infrastructure.mail.mail_transport import MailMessage
from mail_storage_api.main import create_app


class FakeMailTransport:
    """Records every message instead of talking to an SMTP server."""

    def __init__(self, *, fail_with: str | None = None) -> None:
        self.sent: list[MailMessage] = []
        self.fail_with = fail_with

    def send(self, message: MailMessage) -> str:
        self.sent.append(message)
        if self.fail_with:
            raise MailTransportError("Failed to send email", error=self.fail_with)
        return f"<{len(self.sent)}@test.local>"


@pytest.fixture
def uploads_dir(tmp_path):
    return tmp_path / "data" / "uploads"


@pytest.fixture
def settings(uploads_dir, tmp_path):
    return Settings(
        _env_file=None,
        uploads_dir=str(uploads_dir),
        public_dir=str(tmp_path / "public"),
        smtp_user="sender@example.com",
        log_level="WARNING",
    )


@pytest.fixture
def mail_transport():
    return FakeMailTransport()


@pytest.fixture
def app(settings, mail_transport):
    app = create_app(settings, mail_transport=mail_transport)
    app.config["TESTING"] = True
    return app


@pytest.fixture
def client(app):
    return app.test_client()
