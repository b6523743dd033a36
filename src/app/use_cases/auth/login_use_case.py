"""
Login Use Case

Handles user authentication and returns a JWT access token.
"""

from src.core.result import Error, Result, Return
from src.app.services.unit_of_work import UnitOfWork
from src.api.utils.jwt import generate_jwt
from src.domain.security import hash_password, normalize_email, verify_password
from .dtos import LoginResponse, UserInfo

INVALID_CREDENTIALS = Error("INVALID_CREDENTIALS", "Invalid username or password")


class LoginUseCase:
    """
    Use case for user login and JWT issuance.

    Business Rules:
    - Identifier matches a username first, then a normalized email
    - Same error for unknown user and wrong password
    - Password check runs even when the user is unknown (timing)
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, username: str, password: str) -> Result[LoginResponse]:
        """
        Execute login use case.

        Args:
            username: Username or email address
            password: Plain text password

        Returns:
            Result with LoginResponse containing the token and user info, or Error
        """
        async with self.uow:
            user = await self.uow.users.get_by_username(username.strip())
            if user is None and "@" in username:
                user = await self.uow.users.get_by_email(normalize_email(username))

            if user is None:
                # Hash dummy password to maintain constant time
                hash_password("dummy_password")
                return Return.err(INVALID_CREDENTIALS)

            if not verify_password(password, user.password_hash):
                return Return.err(INVALID_CREDENTIALS)

            token = generate_jwt(user.id, user.role.value)

            return Return.ok(
                LoginResponse(
                    token=token,
                    user=UserInfo(
                        id=str(user.id),
                        username=user.username,
                        email=user.email,
                        role=user.role.value,
                    ),
                )
            )
