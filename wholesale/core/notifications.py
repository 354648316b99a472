# wholesale/core/notifications.py
import logging
import smtplib

from wholesale.core.email_client import email_enabled, send_email
from wholesale.core.errors import ConfigurationError

logger = logging.getLogger(__name__)


def notify_by_email(to_email: str, subject: str, html_body: str) -> bool:
    """
    Send a notification email, or log it when email is switched off.

    Called after the business write has committed, so a send failure is
    logged and reported as False instead of failing the request. Callers
    check the SMTP setup up front with `ensure_email_configured`.
    """
    if not email_enabled():
        logger.info("[mock email] to=%s subject=%r", to_email, subject)
        return True
    try:
        send_email(to_email=to_email, subject=subject, html_body=html_body)
    except (ConfigurationError, smtplib.SMTPException, OSError) as e:
        logger.error("Failed to send email to %s (%r): %s", to_email, subject, e)
        return False
    return True
