from src.core.result import Error, Result, Return

from src.app.services.unit_of_work import UnitOfWork
from src.domain.entities import User, UserRole
from src.domain.security import hash_password, normalize_email
from .dtos import MessageResponse
from .signup_dto import SignupCommand


class SignupUseCase:
    """
    Signup Use Case

    Command/Response Pattern:
    - Input: SignupCommand (validated business intent)
    - Output: Result[MessageResponse]

    Business Logic:
    1. Normalize username (trimmed) and email (trimmed, lowercase)
    2. Reject when username or email is already taken
    3. Hash password with bcrypt
    4. Create User with the requested role (default stembassador)
    5. Commit transaction
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, command: SignupCommand) -> Result[MessageResponse]:
        """
        Execute signup use case

        Args:
            command: SignupCommand with username, email, password and optional role

        Returns:
            Result[MessageResponse], or Error(USER_ALREADY_EXISTS)
        """
        username = command.username.strip()
        email = normalize_email(command.email)

        async with self.uow:
            existing = await self.uow.users.get_by_username(username)
            if existing is None:
                existing = await self.uow.users.get_by_email(email)
            if existing:
                return Return.err(
                    Error("USER_ALREADY_EXISTS", "Username or email already exists")
                )

            user = User(
                username=username,
                email=email,
                password_hash=hash_password(command.password),
                role=command.role or UserRole.stembassador,
            )
            await self.uow.users.create(user)

            await self.uow.commit()

            return Return.ok(MessageResponse(message="User created successfully"))
