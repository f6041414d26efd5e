"""Email notification for accepted account requests."""

from __future__ import annotations

import logging
import smtplib
import sys
from email.message import EmailMessage
from email.utils import formataddr, formatdate
from typing import Any, Callable, TextIO

import email_validator
from email_validator import validate_email

from .config import Settings
from .domain.user import User

logger = logging.getLogger(__name__)

SMTP_SSL_PORT = 465

# Relays and distribution lists commonly sit on internal domains such as
# .local or localhost; only address syntax is checked.
email_validator.SPECIAL_USE_DOMAIN_NAMES.clear()


def _validate_address(address: str) -> None:
    validate_email(
        address,
        check_deliverability=False,
        globally_deliverable=False,
        allow_quoted_local=True,
        allow_domain_literal=True,
    )


def _mailbox(address: str) -> str:
    """Validate an address and wrap it in angle brackets.

    Raises ``email_validator.EmailNotValidError`` for malformed input.
    """
    _validate_address(address)
    return f"<{address}>"


def _default_smtp_factory(host: str, port: int) -> smtplib.SMTP:
    if port == SMTP_SSL_PORT:
        return smtplib.SMTP_SSL(host, port)
    return smtplib.SMTP(host, port)


class EmailNotifier:
    """Sends the rendered request template, or prints it when debugging."""

    def __init__(
        self,
        smtp_factory: Callable[[str, int], Any] | None = None,
        stream: TextIO | None = None,
    ) -> None:
        self._smtp_factory = smtp_factory or _default_smtp_factory
        self._stream = stream

    def build_message(self, user: User, body: str, settings: Settings) -> EmailMessage:
        """Assemble the HTML notification for ``user``.

        Address validation failures propagate to the caller.
        """
        _validate_address(settings.email_from_address)

        message = EmailMessage()
        message["From"] = formataddr((settings.email_from_name, settings.email_from_address))
        message["To"] = _mailbox(user.email_address)
        message["Cc"] = _mailbox(settings.email_cc)
        message["Subject"] = settings.email_subject
        message["Date"] = formatdate(localtime=True)
        message.set_content(body, subtype="html")
        return message

    def dispatch(self, user: User, body: str, settings: Settings) -> bool:
        """Deliver the notification once and report whether the relay accepted it.

        In debug mode the body is written to the diagnostic stream and nothing
        is sent. Delivery errors are logged, never raised.
        """
        if settings.debug:
            stream = self._stream or sys.stdout
            stream.write(body)
            stream.flush()
            return False

        message = self.build_message(user, body, settings)
        try:
            with self._smtp_factory(settings.smtp_host, settings.smtp_port) as smtp:
                smtp.send_message(message)
        except (smtplib.SMTPException, OSError) as exc:
            logger.error("failed to send account request email to %s: %s", user.email_address, exc)
            return False

        logger.info("Email sent successfully to %s", user.email_address)
        return True
