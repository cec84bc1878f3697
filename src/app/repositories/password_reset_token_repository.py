from abc import ABC, abstractmethod
from typing import Optional

from src.domain.entities import PasswordResetToken


class IPasswordResetTokenRepository(ABC):
    """PasswordResetToken repository interface - application layer"""

    @abstractmethod
    async def create(self, token: PasswordResetToken) -> PasswordResetToken:
        """Create a new password reset token"""
        pass

    @abstractmethod
    async def get_latest_for_user(self, user_id: int) -> Optional[PasswordResetToken]:
        """Get the most recently created token for a user"""
        pass

    @abstractmethod
    async def get_by_user_and_hash(
        self, user_id: int, token_hash: str
    ) -> Optional[PasswordResetToken]:
        """Get a user's token by its hash"""
        pass

    @abstractmethod
    async def mark_used(self, token_id: int) -> bool:
        """
        Flip used to True only if it is still False.

        Returns True when this call performed the transition.
        """
        pass
