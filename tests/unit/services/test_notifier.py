"""
Unit tests for best-effort reset email delivery
"""
import logging
from unittest.mock import MagicMock

from src.app.services.notifier import deliver_reset_email
from src.app.use_cases.auth.dtos import ResetEmail
from src.core.result import Error, Return

RESET_URL = "http://localhost:3000/reset-password/" + "f" * 64


def _message():
    return ResetEmail(
        to="user@example.com",
        username="alex",
        subject="Reset your password",
        html=f'<a href="{RESET_URL}">{RESET_URL}</a>',
        reset_url=RESET_URL,
    )


def test_delivers_through_mailer(caplog):
    mailer = MagicMock()
    mailer.send.return_value = Return.ok("<id@local>")

    with caplog.at_level(logging.INFO):
        deliver_reset_email(mailer, _message())

    mailer.send.assert_called_once_with("user@example.com", "Reset your password", _message().html)
    assert "sent for user alex" in caplog.text


def test_transport_failure_is_logged_not_raised(caplog):
    mailer = MagicMock()
    mailer.send.return_value = Return.err(Error("MAIL_SEND_FAILED", "ConnectionRefusedError"))

    with caplog.at_level(logging.WARNING):
        deliver_reset_email(mailer, _message())

    assert mailer.send.call_count == 1  # never retried
    assert "failed for user alex" in caplog.text


def test_unexpected_exception_is_absorbed(caplog):
    mailer = MagicMock()
    mailer.send.side_effect = RuntimeError("boom")

    with caplog.at_level(logging.WARNING):
        deliver_reset_email(mailer, _message())

    assert mailer.send.call_count == 1
    assert "crashed for user alex" in caplog.text


def test_secret_never_logged(caplog):
    mailer = MagicMock()
    mailer.send.return_value = Return.err(Error("MAIL_SEND_FAILED", "timeout"))

    with caplog.at_level(logging.DEBUG):
        deliver_reset_email(mailer, _message())

    assert "f" * 64 not in caplog.text
