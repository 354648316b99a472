import logging

import pytest

from wholesale.core.config import Settings
from wholesale.core.email_client import email_enabled, ensure_email_configured, send_email
from wholesale.core.errors import ConfigurationError
from wholesale.core.notifications import notify_by_email


def test_missing_credentials_raise_configuration_error():
    settings = Settings(JWT_SECRET="x", SMTP_HOST="smtp.example.com")
    with pytest.raises(ConfigurationError):
        send_email("a@b.com", "Hi", "<p>Hi</p>", settings=settings)


def test_email_enabled_follows_smtp_host():
    assert email_enabled(Settings(JWT_SECRET="x", SMTP_HOST="smtp.example.com"))
    assert not email_enabled(Settings(JWT_SECRET="x", SMTP_HOST=None))


def test_notifications_are_logged_when_email_is_off(caplog):
    with caplog.at_level(logging.INFO):
        notify_by_email("a@b.com", "Order received", "<p>ok</p>")
    assert "[mock email]" in caplog.text


def test_ensure_email_configured_rejects_half_configured_smtp():
    with pytest.raises(ConfigurationError):
        ensure_email_configured(Settings(JWT_SECRET="x", SMTP_HOST="smtp.example.com", SMTP_USERNAME="u"))


def test_ensure_email_configured_accepts_off_and_complete_setups():
    ensure_email_configured(Settings(JWT_SECRET="x", SMTP_HOST=None))
    ensure_email_configured(
        Settings(JWT_SECRET="x", SMTP_HOST="smtp.example.com", SMTP_USERNAME="u", SMTP_PASSWORD="p")
    )


def test_send_failure_is_logged_not_raised(failing_smtp, caplog):
    caplog.set_level(logging.ERROR)
    assert notify_by_email("a@b.com", "Order received", "<p>ok</p>") is False
    assert "Failed to send email to a@b.com" in caplog.text
