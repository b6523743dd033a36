"""
Authentication Use Case DTOs (Data Transfer Objects)

All Command and Response classes for auth domain.
Provides type safety and clear contracts between layers.
"""

from typing import Optional
from pydantic import BaseModel, Field


# ============================================================================
# Response DTOs
# ============================================================================


class MessageResponse(BaseModel):
    """Plain message response"""

    message: str


class UserInfo(BaseModel):
    """User information in authentication responses"""

    id: str
    username: str
    email: Optional[str] = None
    role: str


class LoginResponse(BaseModel):
    """Response for user login use case"""

    token: str
    user: UserInfo


class ConfirmPasswordResetResponse(BaseModel):
    """Response for confirm password reset use case"""

    message: str


# ============================================================================
# Internal DTOs
# ============================================================================


class ResetEmail(BaseModel):
    """
    Password reset email produced by the request use case.

    Carries the raw reset secret inside reset_url and html, so those fields
    are kept out of repr() and must never be logged.
    """

    to: str
    username: str
    subject: str
    html: str = Field(repr=False)
    reset_url: str = Field(repr=False)
