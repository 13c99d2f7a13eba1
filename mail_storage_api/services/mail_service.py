# mail_storage_api/services/mail_service.py
from __future__ import annotations

import logging

from mail_storage_api.core.exceptions import ValidationError
from mail_storage_api.infrastructure.mail.mail_transport import MailMessage, MailTransport

logger = logging.getLogger(__name__)

MISSING_FIELDS_MESSAGE = "Missing required fields: to, subject, and text/html"


class MailService:
    def __init__(self, *, transport: MailTransport, sender: str) -> None:
        self._transport = transport
        self._sender = sender

    def send(
        self,
        *,
        to: str | None,
        subject: str | None,
        text: str | None = None,
        html: str | None = None,
    ) -> str:
        if not to or not subject or (not text and not html):
            raise ValidationError(MISSING_FIELDS_MESSAGE)

        message = MailMessage(
            sender=self._sender,
            to=to,
            subject=subject,
            text=text or None,
            html=html or None,
        )
        message_id = self._transport.send(message)

        logger.info("Email sent to=%s message_id=%s", to, message_id)
        return message_id
