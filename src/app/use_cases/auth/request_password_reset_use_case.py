"""
Request Password Reset Use Case

Issues a one-time password reset secret and prepares the reset email.
"""

import html
import logging
from datetime import timedelta
from typing import Callable, Optional

from config import ApplicationConfig
from src.core.result import Result, Return
from src.app.services.unit_of_work import UnitOfWork
from src.domain.base import utcnow
from src.domain.security import fingerprint_token, generate_reset_secret, normalize_email
from .dtos import ResetEmail

logger = logging.getLogger(__name__)

RESET_EMAIL_SUBJECT = "Reset your password"


class RequestPasswordResetUseCase:
    """
    Use case for requesting password reset.

    Business Rules:
    - Identifier is normalized (trimmed, lowercase) before lookup
    - Empty identifier or unknown email: no mutation, same outcome as a match
    - Secret is 256 bits of randomness; only its SHA-256 fingerprint is stored
    - Token expires RESET_TOKEN_TTL_MINUTES (1 hour) after issue
    - A new request overwrites any earlier token
    - The reset link embeds the raw secret and is returned for out-of-band
      delivery; it is never persisted or logged
    """

    def __init__(
        self,
        uow: UnitOfWork,
        normalize: Callable[[object], str] = normalize_email,
        clock: Callable = utcnow,
    ):
        self.uow = uow
        self.normalize = normalize
        self.clock = clock

    async def execute(self, email) -> Result[Optional[ResetEmail]]:
        """
        Execute request password reset use case.

        Args:
            email: Claimed email address, as supplied by the caller

        Returns:
            Result with the ResetEmail to deliver, or None when nothing
            should be sent. Callers must respond identically in both cases.
        """
        normalized = self.normalize(email)
        if not normalized:
            logger.info("Password reset requested without an email")
            return Return.ok(None)

        async with self.uow:
            user = await self.uow.users.get_by_email(normalized)
            if user is None:
                logger.info("Password reset requested for unknown email")
                return Return.ok(None)

            raw_token = generate_reset_secret()
            user.reset_token = fingerprint_token(raw_token)
            user.reset_expiry = self.clock() + timedelta(
                minutes=ApplicationConfig.RESET_TOKEN_TTL_MINUTES
            )
            await self.uow.users.update(user)

            await self.uow.commit()

            logger.info(f"Password reset token issued for user {user.id}")

            reset_url = f"{ApplicationConfig.CLIENT_URL.rstrip('/')}/reset-password/{raw_token}"
            return Return.ok(
                ResetEmail(
                    to=normalized,
                    username=user.username,
                    subject=RESET_EMAIL_SUBJECT,
                    html=_render_reset_email(user.username, reset_url),
                    reset_url=reset_url,
                )
            )


def _render_reset_email(username: str, reset_url: str) -> str:
    ttl = ApplicationConfig.RESET_TOKEN_TTL_MINUTES
    validity = "1 hour" if ttl == 60 else f"{ttl} minutes"
    link = html.escape(reset_url, quote=True)
    return (
        f"<p>Hello {html.escape(username)},</p>"
        f"<p>Click the link below to reset your password (valid for {validity}):</p>"
        f'<p><a href="{link}" target="_blank">{link}</a></p>'
        "<p>If you did not request this, you can ignore this email.</p>"
    )
