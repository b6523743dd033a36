"""
Signup Use Case DTOs (Data Transfer Objects)

Command pattern for clean architecture separation:
- SignupCommand: Input to use case (validated business intent)
"""

from typing import Optional
from pydantic import BaseModel

from src.domain.entities import UserRole


class SignupCommand(BaseModel):
    """
    Signup command - represents validated signup intent

    Created by API layer after request validation passes.
    Contains only business-relevant data (no HTTP concerns).
    """

    username: str
    email: str
    password: str
    role: Optional[UserRole] = None
