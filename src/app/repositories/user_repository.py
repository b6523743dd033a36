from abc import ABC, abstractmethod
from datetime import datetime
from typing import Optional
from uuid import UUID

from src.domain.entities import User


class IUserRepository(ABC):
    """User repository interface - application layer"""

    @abstractmethod
    async def get_by_id(self, user_id: UUID) -> Optional[User]:
        """Get user by ID"""
        pass

    @abstractmethod
    async def get_by_username(self, username: str) -> Optional[User]:
        """Get user by username"""
        pass

    @abstractmethod
    async def get_by_email(self, email: str) -> Optional[User]:
        """Get user by (normalized) email address"""
        pass

    @abstractmethod
    async def create(self, user: User) -> User:
        """Create a new user"""
        pass

    @abstractmethod
    async def update(self, user: User) -> User:
        """Update existing user"""
        pass

    @abstractmethod
    async def get_by_reset_token(self, token_hash: str, now: datetime) -> Optional[User]:
        """Get user whose reset token matches and expires strictly after now"""
        pass

    @abstractmethod
    async def consume_reset_token(
        self, user_id: UUID, token_hash: str, now: datetime, password_hash: str
    ) -> bool:
        """
        Set a new password hash and clear the reset token in one conditional update.

        Only applies while the stored token still matches and has not expired.
        Returns False when no row matched (token already consumed or expired).
        """
        pass
