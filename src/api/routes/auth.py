from typing import Optional

from fastapi import APIRouter, BackgroundTasks, Depends, Request, status
from pydantic import BaseModel, EmailStr, Field

from src.api.error import ClientError, ServerError
from src.app.services.mailer import IMailer
from src.app.services.notifier import deliver_reset_email
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.auth import (
    SignupCommand,
    SignupUseCase,
    LoginUseCase,
    RequestPasswordResetUseCase,
    ConfirmPasswordResetUseCase,
    MessageResponse,
    LoginResponse,
    ConfirmPasswordResetResponse,
)
from src.depends import get_mailer, get_unit_of_work
from src.domain.entities import UserRole

router = APIRouter(prefix="/auth", tags=["Authentication"])

FORGOT_PASSWORD_MESSAGE = "If that email exists, a reset link has been sent."


class SignupRequest(BaseModel):
    """
    Signup HTTP request payload

    Validates incoming HTTP request before converting to SignupCommand.
    API layer responsibility: HTTP validation and serialization.
    """

    username: str = Field(..., min_length=1, max_length=150, description="Unique username")
    email: EmailStr = Field(..., description="User email address")
    password: str = Field(..., min_length=1, description="User password")
    role: Optional[UserRole] = Field(default=None, description="Defaults to stembassador")


@router.post("/signup", status_code=status.HTTP_201_CREATED, response_model=MessageResponse)
async def signup(request: SignupRequest, uow: UnitOfWork = Depends(get_unit_of_work)):
    """
    User Signup

    Raises:
        - 409 Conflict: Username or email already exists
        - 422 Unprocessable Entity: Invalid input (handled by FastAPI)
    """
    command = SignupCommand(
        username=request.username,
        email=request.email,
        password=request.password,
        role=request.role,
    )

    use_case = SignupUseCase(uow)
    result = await use_case.execute(command)

    if result.is_err():
        error = result.error
        if error.code == "USER_ALREADY_EXISTS":
            raise ClientError(error, status_code=status.HTTP_409_CONFLICT)
        raise ServerError(error)

    return result.value


class LoginRequest(BaseModel):
    """Login HTTP request payload"""

    username: str = Field(..., min_length=1, description="Username or email address")
    password: str = Field(..., min_length=1, description="User password")


@router.post("/login", status_code=status.HTTP_200_OK, response_model=LoginResponse)
async def login(request: LoginRequest, uow: UnitOfWork = Depends(get_unit_of_work)):
    """
    User Login

    Returns a JWT access token and the user's profile.

    Raises:
        - 401 Unauthorized: Invalid username or password (not a 400)
        - 422 Unprocessable Entity: username or password missing (handled by FastAPI)
    """
    use_case = LoginUseCase(uow)
    result = await use_case.execute(request.username, request.password)

    if result.is_err():
        error = result.error
        if error.code == "INVALID_CREDENTIALS":
            raise ClientError(error, status_code=status.HTTP_401_UNAUTHORIZED)
        raise ServerError(error)

    return result.value


async def _read_claimed_email(request: Request):
    """Pull "email" out of the body without ever failing the request"""
    try:
        payload = await request.json()
    except ValueError:
        return None
    if isinstance(payload, dict):
        return payload.get("email")
    return None


@router.post("/forgot-password", status_code=status.HTTP_200_OK, response_model=MessageResponse)
async def forgot_password(
    request: Request,
    background_tasks: BackgroundTasks,
    uow: UnitOfWork = Depends(get_unit_of_work),
    mailer: IMailer = Depends(get_mailer),
):
    """
    Forgot Password

    Body: {"email": "..."}

    Security:
        - Same 200 response for missing, malformed, unknown and known emails
        - The reset email is sent by a background task after the response,
          so mail latency or failure never reaches the caller

    Returns:
        - 200 OK: Always (no enumeration)
        - 500 Internal Server Error: Store unavailable
    """
    email = await _read_claimed_email(request)

    use_case = RequestPasswordResetUseCase(uow)
    result = await use_case.execute(email)

    if result.is_err():
        raise ServerError(result.error)

    if result.value is not None:
        background_tasks.add_task(deliver_reset_email, mailer, result.value)

    return MessageResponse(message=FORGOT_PASSWORD_MESSAGE)


async def _read_reset_fields(request: Request):
    """Pull string "token" and "password" out of the body; anything else reads as missing"""
    try:
        payload = await request.json()
    except ValueError:
        return None, None
    if not isinstance(payload, dict):
        return None, None
    token, password = payload.get("token"), payload.get("password")
    return (
        token if isinstance(token, str) else None,
        password if isinstance(password, str) else None,
    )


async def _reset_password(
    token: Optional[str], password: Optional[str], uow: UnitOfWork
) -> ConfirmPasswordResetResponse:
    use_case = ConfirmPasswordResetUseCase(uow)
    result = await use_case.execute(token, password)

    if result.is_err():
        error = result.error
        if error.code in ("MISSING_FIELDS", "INVALID_TOKEN"):
            raise ClientError(error, status_code=status.HTTP_400_BAD_REQUEST)
        raise ServerError(error)

    return result.value


@router.post(
    "/reset-password/{token}",
    status_code=status.HTTP_200_OK,
    response_model=ConfirmPasswordResetResponse,
)
async def reset_password_from_link(
    token: str,
    request: Request,
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Reset Password (token in path)

    Body: {"password": "..."}. The body is read by hand so that a missing,
    malformed or non-string password is a 400, never a 422.

    Raises:
        - 400 Bad Request: Token or password missing
        - 400 Bad Request: Reset link is invalid or has expired
        - 500 Internal Server Error: Store unavailable
    """
    _, password = await _read_reset_fields(request)
    return await _reset_password(token, password, uow)


@router.post(
    "/reset-password",
    status_code=status.HTTP_200_OK,
    response_model=ConfirmPasswordResetResponse,
)
async def reset_password(request: Request, uow: UnitOfWork = Depends(get_unit_of_work)):
    """Reset Password (token in body: {"token": "...", "password": "..."})"""
    token, password = await _read_reset_fields(request)
    return await _reset_password(token, password, uow)
