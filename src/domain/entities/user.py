"""
User Entity

A registered club member.
"""

from datetime import datetime
from typing import Optional

from sqlmodel import Column, DateTime, Field, SQLModel

from src.domain.base import utcnow
from .enums import Position, UserRole


class User(SQLModel, table=True):
    """
    User entity - a registered member.

    Business Rules:
    - Email must be unique across all users (lookups for reset are case-insensitive)
    - Password stored only as a bcrypt hash
    - Never hard-deleted
    """

    __tablename__ = "users"

    id: Optional[int] = Field(default=None, primary_key=True)
    name: str = Field(max_length=255)
    email: str = Field(unique=True, index=True, max_length=255)
    password_hash: str = Field(max_length=60)  # Bcrypt output is 60 chars

    role: UserRole = Field(default=UserRole.assignee)
    position: Position = Field(default=Position.member)

    # Profile
    bio: Optional[str] = None
    avatar_url: Optional[str] = Field(default=None, max_length=2048)
    github_url: Optional[str] = Field(default=None, max_length=2048)
    linkedin_url: Optional[str] = Field(default=None, max_length=2048)
    last_notification_read_at: Optional[datetime] = Field(
        default=None, sa_column=Column(DateTime)
    )

    # Timestamps
    created_at: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime))
    updated_at: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime))
