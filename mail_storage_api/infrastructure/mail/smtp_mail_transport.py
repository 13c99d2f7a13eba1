# mail_storage_api/infrastructure/mail/smtp_mail_transport.py
from __future__ import annotations

import logging
import smtplib
from dataclasses import dataclass
from email.message import EmailMessage
from email.utils import formatdate, make_msgid

from mail_storage_api.core.exceptions import MailTransportError
from mail_storage_api.infrastructure.mail.mail_transport import MailMessage, MailTransport

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SmtpConfig:
    host: str
    port: int
    user: str | None = None
    password: str | None = None
    secure: bool = False
    timeout: float = 30.0


def build_email(message: MailMessage) -> EmailMessage:
    msg = EmailMessage()
    msg["From"] = message.sender
    msg["To"] = message.to
    msg["Subject"] = message.subject
    msg["Date"] = formatdate(localtime=True)

    domain = message.sender.rsplit("@", 1)[-1] if "@" in message.sender else None
    msg["Message-ID"] = make_msgid(domain=domain)

    if message.text:
        msg.set_content(message.text)
        if message.html:
            msg.add_alternative(message.html, subtype="html")
    else:
        msg.set_content(message.html or "", subtype="html")

    return msg


class SmtpMailTransport(MailTransport):
    """
    Envio síncrono via smtplib, uma conexão por mensagem.

    secure=True usa TLS implícito (porta 465); caso contrário a conexão é
    promovida com STARTTLS quando o servidor anuncia a extensão.
    Sem retry nem fila: qualquer falha vira MailTransportError.
    """

    def __init__(self, *, config: SmtpConfig) -> None:
        self._config = config

    def _connect(self) -> smtplib.SMTP:
        cfg = self._config
        if cfg.secure:
            return smtplib.SMTP_SSL(cfg.host, cfg.port, timeout=cfg.timeout)
        return smtplib.SMTP(cfg.host, cfg.port, timeout=cfg.timeout)

    def send(self, message: MailMessage) -> str:
        cfg = self._config

        try:
            # CR/LF em cabeçalhos (to/subject) levanta ValueError no EmailMessage
            email = build_email(message)
            with self._connect() as smtp:
                smtp.ehlo()
                if not cfg.secure and smtp.has_extn("starttls"):
                    smtp.starttls()
                    smtp.ehlo()
                if cfg.user and cfg.password:
                    smtp.login(cfg.user, cfg.password)
                smtp.send_message(email)
        except (smtplib.SMTPException, OSError, ValueError) as e:
            raise MailTransportError("Failed to send email", error=str(e)) from e

        logger.debug("SMTP %s:%s accepted %s", cfg.host, cfg.port, email["Message-ID"])
        return email["Message-ID"]
