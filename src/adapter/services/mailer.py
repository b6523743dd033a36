"""
Mail transports.

SmtpMailer talks to a configured relay. PreviewMailer is the disposable
transport used when no relay is configured: messages stay in an in-process
outbox and only recipient and subject are logged.
"""

import logging
import smtplib
from collections import deque
from email.message import EmailMessage
from email.utils import make_msgid
from typing import Deque, List

from src.app.services.mailer import IMailer
from src.core.result import Error, Result, Return

logger = logging.getLogger(__name__)


def _build_message(sender: str, to: str, subject: str, html: str) -> EmailMessage:
    msg = EmailMessage()
    msg["From"] = sender
    msg["To"] = to
    msg["Subject"] = subject
    msg["Message-ID"] = make_msgid()
    msg.set_content("This message requires an HTML capable mail client.")
    msg.add_alternative(html, subtype="html")
    return msg


class SmtpMailer(IMailer):
    """SMTP relay transport with a bounded connect/send timeout"""

    def __init__(
        self,
        host: str,
        port: int,
        sender: str,
        username: str = "",
        password: str = "",
        timeout: float = 5.0,
    ):
        self.host = host
        self.port = port
        self.sender = sender
        self.username = username
        self.password = password
        self.timeout = timeout

    def _implicit_tls(self) -> bool:
        return self.port == 465

    def _connect(self) -> smtplib.SMTP:
        if self._implicit_tls():
            return smtplib.SMTP_SSL(self.host, self.port, timeout=self.timeout)
        return smtplib.SMTP(self.host, self.port, timeout=self.timeout)

    def send(self, to: str, subject: str, html: str) -> Result[str]:
        msg = _build_message(self.sender, to, subject, html)
        try:
            with self._connect() as smtp:
                if not self._implicit_tls():
                    smtp.ehlo()
                    if smtp.has_extn("starttls"):
                        smtp.starttls()
                        smtp.ehlo()
                if self.username and self.password:
                    smtp.login(self.username, self.password)
                smtp.send_message(msg)
        except (smtplib.SMTPException, OSError) as exc:
            return Return.err(Error("MAIL_SEND_FAILED", f"{type(exc).__name__}: {exc}"))

        return Return.ok(msg["Message-ID"])


class PreviewMailer(IMailer):
    """In-process preview transport keeping the most recent messages"""

    def __init__(self, limit: int = 50):
        self.outbox: Deque[EmailMessage] = deque(maxlen=limit)

    def send(self, to: str, subject: str, html: str) -> Result[str]:
        msg = _build_message("preview@inventory.local", to, subject, html)
        self.outbox.append(msg)
        logger.info(f"Preview mail stored for {to}: {subject}")
        return Return.ok(msg["Message-ID"])

    def messages_to(self, to: str) -> List[EmailMessage]:
        return [msg for msg in self.outbox if msg["To"] == to]


def build_mailer(config) -> IMailer:
    """Build the process-wide mail transport from configuration"""
    if config.SMTP_HOST:
        logger.info(f"Using SMTP relay {config.SMTP_HOST}:{config.SMTP_PORT}")
        return SmtpMailer(
            host=config.SMTP_HOST,
            port=config.SMTP_PORT,
            sender=config.SMTP_FROM,
            username=config.SMTP_USER,
            password=config.SMTP_PASS,
            timeout=config.SMTP_TIMEOUT,
        )

    logger.warning("SMTP_HOST not set, reset emails go to the preview outbox")
    return PreviewMailer(limit=config.MAIL_PREVIEW_LIMIT)
