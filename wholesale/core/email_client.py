# wholesale/core/email_client.py
"""
Email client utilities.

Responsibilities:
  - Read SMTP configuration from settings.
  - Provide a single send_email(...) function for services to use.
  - Support both TLS (STARTTLS) and SSL connections.

Typical .env configuration:

    SMTP_HOST=smtp.example.com
    SMTP_PORT=465
    SMTP_USERNAME=noreply@example.com
    SMTP_PASSWORD=...
    SMTP_FROM_EMAIL=noreply@example.com
    SMTP_FROM_NAME=SoleTrade
    SMTP_USE_TLS=false
    SMTP_USE_SSL=true
"""

import logging
import smtplib
from email.message import EmailMessage

from wholesale.core.config import Settings, get_settings
from wholesale.core.errors import ConfigurationError

logger = logging.getLogger(__name__)


def email_enabled(settings: Settings | None = None) -> bool:
    """Email is switched on by setting SMTP_HOST."""
    settings = settings or get_settings()
    return bool(settings.SMTP_HOST)


_NOT_CONFIGURED = (
    "SMTP is not configured correctly. "
    "Please set SMTP_HOST, SMTP_USERNAME, and SMTP_PASSWORD in .env."
)


def ensure_email_configured(settings: Settings | None = None) -> None:
    """
    Fail fast on a half-configured SMTP setup (host set, credentials missing).

    Services call this before their write so a misconfiguration never
    surfaces after the data is committed. Email switched off is fine.

    Raises:
        ConfigurationError: if SMTP_HOST is set without SMTP_USERNAME/SMTP_PASSWORD.
    """
    settings = settings or get_settings()
    if email_enabled(settings) and not (settings.SMTP_USERNAME and settings.SMTP_PASSWORD):
        raise ConfigurationError(_NOT_CONFIGURED)


def _create_smtp_client(settings: Settings) -> smtplib.SMTP:
    """
    Create and return an SMTP client configured for TLS or SSL.

    Priority:
      - If SMTP_USE_SSL is True -> smtplib.SMTP_SSL (e.g. port 465).
      - Else -> smtplib.SMTP + optional STARTTLS if SMTP_USE_TLS is True.
    """
    if settings.SMTP_USE_SSL:
        server: smtplib.SMTP = smtplib.SMTP_SSL(settings.SMTP_HOST, settings.SMTP_PORT, timeout=30)
    else:
        server = smtplib.SMTP(settings.SMTP_HOST, settings.SMTP_PORT, timeout=30)
        if settings.SMTP_USE_TLS:
            server.starttls()
    return server


def send_email(
    to_email: str,
    subject: str,
    html_body: str,
    text_body: str | None = None,
    settings: Settings | None = None,
) -> None:
    """
    Send an email to a single recipient.

    Raises:
        ConfigurationError: if SMTP_HOST, SMTP_USERNAME or SMTP_PASSWORD is missing.
        smtplib.SMTPException: if the underlying SMTP connection or send fails.
    """
    settings = settings or get_settings()
    if not (settings.SMTP_HOST and settings.SMTP_USERNAME and settings.SMTP_PASSWORD):
        raise ConfigurationError(_NOT_CONFIGURED)

    msg = EmailMessage()
    from_email = settings.SMTP_FROM_EMAIL or settings.SMTP_USERNAME
    msg["From"] = f"{settings.SMTP_FROM_NAME} <{from_email}>"
    msg["To"] = to_email
    msg["Subject"] = subject

    msg.set_content(text_body or "Please view this message in an HTML-capable client.")
    msg.add_alternative(html_body, subtype="html")

    server = _create_smtp_client(settings)
    try:
        server.login(settings.SMTP_USERNAME, settings.SMTP_PASSWORD)
        server.send_message(msg)
    finally:
        try:
            server.quit()
        except smtplib.SMTPException:
            # Connection is being torn down anyway.
            logger.debug("SMTP quit failed", exc_info=True)
