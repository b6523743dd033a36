"""
Confirm Password Reset Use Case

Consumes a one-time reset secret and sets the new password.
"""

import logging
from typing import Callable, Optional

from src.core.result import Error, Result, Return
from src.app.services.unit_of_work import UnitOfWork
from src.domain.base import utcnow
from src.domain.security import fingerprint_token, hash_password
from .dtos import ConfirmPasswordResetResponse

logger = logging.getLogger(__name__)

MISSING_FIELDS = Error("MISSING_FIELDS", "Token and new password are required.")
INVALID_TOKEN = Error("INVALID_TOKEN", "Reset link is invalid or has expired.")


class ConfirmPasswordResetUseCase:
    """
    Use case for confirming password reset.

    Business Rules:
    - Token and new password are both required
    - Token is matched by its SHA-256 fingerprint and must expire strictly
      after the verification time
    - Wrong, expired and already used tokens yield the same INVALID_TOKEN error
    - Password is re-hashed with bcrypt and a fresh salt
    - Password change and token clearing happen in a single conditional
      update, so a token succeeds at most once even under concurrent use
    """

    def __init__(self, uow: UnitOfWork, clock: Callable = utcnow):
        self.uow = uow
        self.clock = clock

    async def execute(
        self, token: Optional[str], new_password: Optional[str]
    ) -> Result[ConfirmPasswordResetResponse]:
        """
        Execute confirm password reset use case.

        Args:
            token: Raw reset secret from the reset link
            new_password: New password to set

        Returns:
            Result with confirmation message, or Error

        Errors:
            - MISSING_FIELDS: Token or new password missing
            - INVALID_TOKEN: Token unknown, expired or already used
        """
        if not token or not new_password:
            return Return.err(MISSING_FIELDS)

        token_hash = fingerprint_token(token)
        now = self.clock()

        async with self.uow:
            user = await self.uow.users.get_by_reset_token(token_hash, now)
            if user is None:
                logger.info("Password reset attempted with an invalid or expired token")
                return Return.err(INVALID_TOKEN)

            password_hash = hash_password(new_password)

            consumed = await self.uow.users.consume_reset_token(
                user.id, token_hash, now, password_hash
            )
            if not consumed:
                # Another request consumed the token between lookup and update
                logger.info(f"Password reset token for user {user.id} was already consumed")
                return Return.err(INVALID_TOKEN)

            await self.uow.commit()

            logger.info(f"Password reset completed for user {user.id}")

            return Return.ok(
                ConfirmPasswordResetResponse(
                    message="Password has been reset. You can now log in."
                )
            )
