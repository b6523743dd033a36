from datetime import datetime
from typing import Optional
from uuid import UUID

from sqlmodel import select, update
from sqlmodel.ext.asyncio.session import AsyncSession

from src.app.repositories.user_repository import IUserRepository
from src.domain.base import utcnow
from src.domain.entities import User


class UserRepository(IUserRepository):
    """User repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_id(self, user_id: UUID) -> Optional[User]:
        """Get user by ID"""
        stmt = select(User).where(User.id == user_id)
        result = await self.session.exec(stmt)
        return result.one_or_none()

    async def get_by_username(self, username: str) -> Optional[User]:
        """Get user by username"""
        stmt = select(User).where(User.username == username)
        result = await self.session.exec(stmt)
        return result.one_or_none()

    async def get_by_email(self, email: str) -> Optional[User]:
        """Get user by (normalized) email address"""
        stmt = select(User).where(User.email == email)
        result = await self.session.exec(stmt)
        return result.one_or_none()

    async def create(self, user: User) -> User:
        """Create a new user"""
        self.session.add(user)
        await self.session.flush()
        await self.session.refresh(user)
        return user

    async def update(self, user: User) -> User:
        """Update existing user"""
        user.updated_at = utcnow()
        self.session.add(user)
        await self.session.flush()
        await self.session.refresh(user)
        return user

    async def get_by_reset_token(self, token_hash: str, now: datetime) -> Optional[User]:
        """Get user whose reset token matches and expires strictly after now"""
        stmt = select(User).where(User.reset_token == token_hash, User.reset_expiry > now)
        result = await self.session.exec(stmt)
        return result.one_or_none()

    async def consume_reset_token(
        self, user_id: UUID, token_hash: str, now: datetime, password_hash: str
    ) -> bool:
        """Set the new password and clear the reset token if it is still valid"""
        stmt = (
            update(User)
            .where(
                User.id == user_id,
                User.reset_token == token_hash,
                User.reset_expiry > now,
            )
            .values(
                password_hash=password_hash,
                reset_token=None,
                reset_expiry=None,
                updated_at=utcnow(),
            )
        )
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount == 1
