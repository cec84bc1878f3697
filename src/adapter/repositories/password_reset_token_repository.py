from typing import Optional

from sqlalchemy import update
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from src.app.repositories.password_reset_token_repository import IPasswordResetTokenRepository
from src.domain.entities import PasswordResetToken


class PasswordResetTokenRepository(IPasswordResetTokenRepository):
    """PasswordResetToken repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def create(self, token: PasswordResetToken) -> PasswordResetToken:
        """Create a new password reset token"""
        self.session.add(token)
        await self.session.flush()
        await self.session.refresh(token)
        return token

    async def get_latest_for_user(self, user_id: int) -> Optional[PasswordResetToken]:
        """Get the most recently created token for a user"""
        stmt = (
            select(PasswordResetToken)
            .where(PasswordResetToken.user_id == user_id)
            .order_by(PasswordResetToken.created_at.desc(), PasswordResetToken.id.desc())
            .limit(1)
        )
        result = await self.session.exec(stmt)
        return result.first()

    async def get_by_user_and_hash(
        self, user_id: int, token_hash: str
    ) -> Optional[PasswordResetToken]:
        """Get a user's token by its hash"""
        stmt = (
            select(PasswordResetToken)
            .where(
                PasswordResetToken.user_id == user_id,
                PasswordResetToken.token_hash == token_hash,
            )
            .limit(1)
        )
        result = await self.session.exec(stmt)
        return result.first()

    async def mark_used(self, token_id: int) -> bool:
        """Conditionally mark a token as used (compare-and-set on used)"""
        stmt = (
            update(PasswordResetToken)
            .where(PasswordResetToken.id == token_id, PasswordResetToken.used == False)  # noqa: E712
            .values(used=True)
        )
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount == 1
