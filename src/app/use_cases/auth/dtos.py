"""
Authentication Use Case DTOs (Data Transfer Objects)

All Command and Response classes for the auth and password reset flows.
"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel

from src.domain.entities import Position, User, UserRole


# ============================================================================
# Commands
# ============================================================================


class RegisterCommand(BaseModel):
    """Validated registration intent"""

    name: str
    email: str
    password: str
    role: UserRole
    position: Position = Position.member


# ============================================================================
# Response DTOs
# ============================================================================


class UserInfo(BaseModel):
    """Public profile fields; never carries the password hash"""

    id: int
    name: str
    email: str
    role: UserRole
    position: Position
    bio: Optional[str] = None
    avatar_url: Optional[str] = None
    github_url: Optional[str] = None
    linkedin_url: Optional[str] = None
    last_notification_read_at: Optional[datetime] = None
    created_at: Optional[datetime] = None

    @classmethod
    def from_user(cls, user: User) -> "UserInfo":
        return cls(
            id=user.id,
            name=user.name,
            email=user.email,
            role=user.role,
            position=user.position,
            bio=user.bio,
            avatar_url=user.avatar_url,
            github_url=user.github_url,
            linkedin_url=user.linkedin_url,
            last_notification_read_at=user.last_notification_read_at,
            created_at=user.created_at,
        )


class AuthResponse(BaseModel):
    """Response for register and login use cases"""

    user: UserInfo
    access_token: str


class PasswordResetRequestResponse(BaseModel):
    """
    Response for request/resend password reset.

    cooldown is only present when a recent email suppressed this one.
    """

    ok: bool = True
    cooldown: Optional[bool] = None


class PasswordResetRedeemResponse(BaseModel):
    """Response for password reset redemption"""

    ok: bool = True
