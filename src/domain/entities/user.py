"""
User Entity

Represents a person who can log in and submit or review item requests.
"""

from datetime import datetime
from typing import Optional
from uuid import UUID, uuid4

from sqlmodel import Column, DateTime, Field, Index, SQLModel

from src.domain.base import utcnow
from .enums import UserRole


class User(SQLModel, table=True):
    """
    User entity - an account of the inventory service.

    Business Rules:
    - Username is unique; email is unique when present
    - Email is stored lowercase and trimmed
    - Password stored as bcrypt hash, never in plain text
    - reset_token holds the SHA-256 fingerprint of a one-time reset secret;
      reset_token and reset_expiry are set and cleared together
    """

    __tablename__ = "users"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    username: str = Field(unique=True, index=True, max_length=150)
    email: Optional[str] = Field(default=None, unique=True, index=True, max_length=255)
    password_hash: str = Field(max_length=60)  # Bcrypt output is 60 chars

    role: UserRole = Field(default=UserRole.stembassador)

    # Password reset (forgot-password / reset-password)
    reset_token: Optional[str] = Field(default=None, max_length=64)  # SHA-256 hex
    reset_expiry: Optional[datetime] = Field(default=None, sa_column=Column(DateTime))

    # Timestamps
    created_at: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime))
    updated_at: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime))

    __table_args__ = (Index("idx_user_reset_token", "reset_token"),)
