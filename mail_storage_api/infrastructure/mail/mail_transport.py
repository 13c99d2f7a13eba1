# mail_storage_api/infrastructure/mail/mail_transport.py
from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol


@dataclass(frozen=True)
class MailMessage:
    sender: str
    to: str
    subject: str
    text: str | None = None
    html: str | None = None


class MailTransport(Protocol):
    def send(self, message: MailMessage) -> str:
        """Entrega a mensagem e retorna o Message-ID atribuído."""
        ...
