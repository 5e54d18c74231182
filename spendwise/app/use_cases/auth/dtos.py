"""
Authentication Use Case DTOs (Data Transfer Objects)

All Command and Response classes for auth domain.
Provides type safety and clear contracts between layers.
"""

from typing import Optional
from pydantic import BaseModel

from spendwise.domain.entities import User


# ============================================================================
# Commands
# ============================================================================


class RegisterCommand(BaseModel):
    """
    Register command - represents validated registration intent

    Created by API layer after request validation passes.
    """

    email: str
    password: str
    name: Optional[str] = None


# ============================================================================
# Response DTOs
# ============================================================================


class UserSummary(BaseModel):
    """Public view of a user, never includes the password hash"""

    id: str
    email: str
    name: Optional[str] = None
    currency: str

    @classmethod
    def from_user(cls, user: User) -> "UserSummary":
        return cls(id=str(user.id), email=user.email, name=user.name, currency=user.currency)


class RegisterResponse(BaseModel):
    """Response for user registration use case"""

    user: UserSummary


class LoginResponse(BaseModel):
    """Response for user login use case"""

    user: UserSummary
    token: str


class RequestPasswordResetResponse(BaseModel):
    """Response for request password reset use case"""

    message: str
    # Only populated outside production
    reset_token: Optional[str] = None


class ConfirmPasswordResetResponse(BaseModel):
    """Response for confirm password reset use case"""

    message: str
