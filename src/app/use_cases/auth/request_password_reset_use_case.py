"""
Request Password Reset Use Case

Issues a time-boxed reset token and emails the reset link.
"""

import logging
from datetime import timedelta
from typing import Optional, Tuple

from sqlalchemy.exc import SQLAlchemyError

from libs.result import Error, Result, Return
from config import ApplicationConfig
from src.app.services.mail_gateway import IMailGateway, MailDeliveryError
from src.app.services.token_service import generate_token, hash_token
from src.app.services.unit_of_work import UnitOfWork
from src.domain.base import utcnow
from src.domain.entities import PasswordResetToken
from .dtos import PasswordResetRequestResponse

logger = logging.getLogger(__name__)


class RequestPasswordResetUseCase:
    """
    Use case for requesting a password reset.

    Business Rules:
    - Email is trimmed and matched case-insensitively
    - No email enumeration: unknown emails get the same {ok: true} response
    - Within the cooldown window of the newest token, nothing is issued or sent
      and the response carries cooldown=true
    - Only the SHA-256 hash of the token is stored
    - Token expires after RESET_TOKEN_EXPIRE_MINUTES
    - Datastore and mail failures are logged, never surfaced
    """

    operation = "password_reset_request"

    def __init__(
        self,
        uow: UnitOfWork,
        mail_gateway: IMailGateway,
        token_expire_minutes: Optional[int] = None,
        resend_cooldown_seconds: Optional[int] = None,
    ):
        self.uow = uow
        self.mail_gateway = mail_gateway
        self.token_expire_minutes = (
            token_expire_minutes
            if token_expire_minutes is not None
            else ApplicationConfig.RESET_TOKEN_EXPIRE_MINUTES
        )
        self.resend_cooldown_seconds = (
            resend_cooldown_seconds
            if resend_cooldown_seconds is not None
            else ApplicationConfig.RESET_RESEND_COOLDOWN_SECONDS
        )

    async def execute(self, email) -> Result[PasswordResetRequestResponse]:
        """
        Execute request password reset use case.

        Args:
            email: Free-text email address as submitted

        Returns:
            Result with PasswordResetRequestResponse, or Error(VALIDATION_ERROR)
            when no email was given
        """
        if not isinstance(email, str) or not email.strip():
            return Return.err(Error("VALIDATION_ERROR", "Email required"))

        email = email.strip()

        try:
            response, delivery = await self._issue(email)
        except SQLAlchemyError:
            logger.exception(f"{self.operation} failed for {email}")
            return Return.ok(PasswordResetRequestResponse())

        if delivery is not None:
            recipient, raw_token = delivery
            try:
                await self.mail_gateway.send_reset_link(recipient, raw_token)
            except MailDeliveryError as exc:
                logger.error(f"{self.operation}: reset email to {recipient} failed: {exc}")

        return Return.ok(response)

    async def _issue(
        self, email: str
    ) -> Tuple[PasswordResetRequestResponse, Optional[Tuple[str, str]]]:
        async with self.uow:
            user = await self.uow.users.find_by_email_insensitive(email)

            if user is None:
                return PasswordResetRequestResponse(), None

            now = utcnow()

            latest = await self.uow.password_reset_tokens.get_latest_for_user(user.id)
            if latest is not None and latest.last_sent_at is not None:
                elapsed = (now - latest.last_sent_at).total_seconds()
                if elapsed < self.resend_cooldown_seconds:
                    logger.info(
                        f"{self.operation}: cooldown active for user {user.id} ({elapsed:.0f}s)"
                    )
                    return PasswordResetRequestResponse(cooldown=True), None

            raw_token = generate_token()
            reset_token = PasswordResetToken(
                user_id=user.id,
                token_hash=hash_token(raw_token),
                used=False,
                expires_at=now + timedelta(minutes=self.token_expire_minutes),
                last_sent_at=now,
                created_at=now,
            )
            await self.uow.password_reset_tokens.create(reset_token)
            await self.uow.commit()

            logger.info(f"{self.operation}: issued reset token for user {user.id}")
            return PasswordResetRequestResponse(), (user.email, raw_token)
