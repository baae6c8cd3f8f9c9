from __future__ import annotations

import logging
import smtplib
from dataclasses import dataclass
from email.message import EmailMessage
from email.utils import formataddr
from typing import Optional

from ..core.exceptions import DeliveryError
from .model import OutgoingEmail

logger = logging.getLogger(__name__)


@dataclass
class SMTPConfig:
    host: str
    port: int
    user: str
    password: str
    use_tls: bool = True
    from_name: str = "Sense Time Tracker"
    timeout: Optional[float] = 30


class SmtpMailer:
    """Mailer over plain SMTP (Gmail app passwords work with STARTTLS on 587)."""

    def __init__(self, config: SMTPConfig):
        self._config = config

    def build_message(self, email: OutgoingEmail) -> EmailMessage:
        msg = EmailMessage()
        msg["From"] = formataddr((self._config.from_name, self._config.user))
        msg["To"] = ", ".join(email.recipients)
        msg["Subject"] = email.subject
        msg.set_content(email.text)
        msg.add_alternative(email.html, subtype="html")

        for a in email.attachments:
            maintype, _, subtype = a.mimetype.partition("/")
            msg.add_attachment(a.content, maintype=maintype, subtype=subtype, filename=a.filename)
        return msg

    def send(self, email: OutgoingEmail) -> None:
        msg = self.build_message(email)
        try:
            with smtplib.SMTP(self._config.host, int(self._config.port), timeout=self._config.timeout) as smtp:
                if self._config.use_tls:
                    smtp.starttls()
                if self._config.user and self._config.password:
                    smtp.login(self._config.user, self._config.password)
                smtp.send_message(msg)
        except (smtplib.SMTPException, OSError) as e:
            raise DeliveryError(str(e) or e.__class__.__name__) from e

        logger.info("Report email sent to %s", ", ".join(email.recipients))
