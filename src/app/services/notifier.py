"""
Reset email delivery.

Runs as a background task after the forgot-password response has been sent.
Delivery is best-effort: the outcome is logged, errors are absorbed and
nothing is retried.
"""

import logging

from src.app.services.mailer import IMailer
from src.app.use_cases.auth.dtos import ResetEmail

logger = logging.getLogger(__name__)


def deliver_reset_email(mailer: IMailer, message: ResetEmail) -> None:
    try:
        result = mailer.send(message.to, message.subject, message.html)
    except Exception:
        logger.exception(f"Password reset email crashed for user {message.username} (ignored)")
        return

    if result.is_err():
        logger.warning(
            f"Password reset email failed for user {message.username} (ignored): "
            f"{result.error.message}"
        )
        return

    logger.info(f"Password reset email sent for user {message.username}: {result.value}")
