"""
PasswordResetToken Entity

Time-boxed, single-use password reset tokens.
"""

from datetime import datetime
from typing import Optional

from sqlmodel import Column, DateTime, Field, Index, SQLModel

from src.domain.base import utcnow


class PasswordResetToken(SQLModel, table=True):
    """
    PasswordResetToken entity - secure password reset tokens.

    Business Rules:
    - Token is the SHA-256 hash of a random value; the raw value is never stored
    - Valid only while used is False and now < expires_at
    - Single-use: marked as used on redemption
    - last_sent_at of the newest row drives the resend cooldown
    - Superseded rows are kept, never deleted
    """

    __tablename__ = "password_resets"

    id: Optional[int] = Field(default=None, primary_key=True)

    user_id: int = Field(foreign_key="users.id", nullable=False)
    token_hash: str = Field(max_length=64)  # SHA-256 hex output

    used: bool = Field(default=False)

    # Timestamps
    expires_at: datetime = Field(sa_column=Column(DateTime, nullable=False))
    last_sent_at: Optional[datetime] = Field(default=None, sa_column=Column(DateTime))
    created_at: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime))

    __table_args__ = (
        Index("idx_password_resets_user_id", "user_id"),
        Index("idx_password_resets_token_hash", "token_hash"),
    )
