"""
Redeem Password Reset Use Case

Validates a reset token and sets the new password.
"""

import logging
from typing import Optional

from sqlalchemy.exc import SQLAlchemyError

from libs.result import Error, Result, Return
from config import ApplicationConfig
from src.app.services.token_service import hash_password, hash_token
from src.app.services.unit_of_work import UnitOfWork
from src.domain.base import utcnow
from .dtos import PasswordResetRedeemResponse

logger = logging.getLogger(__name__)


class RedeemPasswordResetUseCase:
    """
    Use case for redeeming a password reset token.

    Business Rules:
    - Token, email and password are all required
    - Password must be at least MIN_PASSWORD_LENGTH characters
    - Checks run in order: user exists, token matches that user, not used,
      not expired
    - The token is claimed with a conditional update; a redemption that
      loses a race sees "Token already used"
    - Password change and token claim commit in one transaction
    """

    def __init__(self, uow: UnitOfWork, min_password_length: Optional[int] = None):
        self.uow = uow
        self.min_password_length = (
            min_password_length
            if min_password_length is not None
            else ApplicationConfig.MIN_PASSWORD_LENGTH
        )

    async def execute(
        self, token: Optional[str], email: Optional[str], new_password: Optional[str]
    ) -> Result[PasswordResetRedeemResponse]:
        """
        Execute redeem password reset use case.

        Errors:
            - VALIDATION_ERROR: a field is missing
            - INVALID_PASSWORD: password too short
            - INVALID_TOKEN: unknown email, or token not issued to that user
            - TOKEN_ALREADY_USED: token was redeemed before
            - TOKEN_EXPIRED: token is past its expiry
            - INTERNAL_ERROR: datastore failure
        """
        if not token or not email or not new_password:
            return Return.err(
                Error("VALIDATION_ERROR", "token, email and password are required")
            )

        if len(new_password) < self.min_password_length:
            return Return.err(
                Error(
                    "INVALID_PASSWORD",
                    f"Password must be at least {self.min_password_length} characters long",
                )
            )

        try:
            return await self._redeem(token, email.strip(), new_password)
        except SQLAlchemyError:
            logger.exception(f"password_reset_redeem failed for {email}")
            return Return.err(Error("INTERNAL_ERROR", "Internal server error"))

    async def _redeem(
        self, token: str, email: str, new_password: str
    ) -> Result[PasswordResetRedeemResponse]:
        async with self.uow:
            user = await self.uow.users.find_by_email_insensitive(email)
            if user is None:
                return Return.err(Error("INVALID_TOKEN", "Invalid token or email"))

            reset_token = await self.uow.password_reset_tokens.get_by_user_and_hash(
                user.id, hash_token(token)
            )
            if reset_token is None:
                return Return.err(Error("INVALID_TOKEN", "Invalid token or email"))

            if reset_token.used:
                return Return.err(Error("TOKEN_ALREADY_USED", "Token already used"))

            now = utcnow()
            if now >= reset_token.expires_at:
                return Return.err(Error("TOKEN_EXPIRED", "Token expired"))

            claimed = await self.uow.password_reset_tokens.mark_used(reset_token.id)
            if not claimed:
                return Return.err(Error("TOKEN_ALREADY_USED", "Token already used"))

            user.password_hash = hash_password(new_password)
            user.updated_at = now
            await self.uow.users.update(user)

            await self.uow.commit()

            logger.info(f"password_reset_redeem: password updated for user {user.id}")
            return Return.ok(PasswordResetRedeemResponse())
