from datetime import UTC, datetime, timedelta
from uuid import UUID

from jose import jwt

from config import ApplicationConfig


def generate_jwt(user_id: UUID, role: str) -> str:
    """
    Generate JWT access token

    Args:
        user_id: User UUID
        role: User role (director, inventoryManager, stembassador)

    Returns:
        JWT token string (HS256, JWT_EXPIRES_HOURS expiry)
    """
    now = datetime.now(UTC)
    payload = {
        "user_id": str(user_id),
        "role": role,
        "exp": now + timedelta(hours=ApplicationConfig.JWT_EXPIRES_HOURS),
        "iat": now,
    }
    return jwt.encode(payload, ApplicationConfig.JWT_SECRET, algorithm="HS256")
