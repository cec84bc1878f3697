"""
Login Use Case

Verifies credentials and issues a session JWT.
"""

import bcrypt

from libs.result import Error, Result, Return
from config import ApplicationConfig
from src.app.services.token_service import verify_password
from src.app.services.unit_of_work import UnitOfWork
from .dtos import AuthResponse, UserInfo


class LoginUseCase:
    """
    Use case for user login.

    Business Rules:
    - Email lookup is case-insensitive
    - Passwords are only ever compared through bcrypt
    - Unknown email and wrong password produce the same error
    - A dummy hash check runs for unknown emails to keep timing similar
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, email: str, password: str) -> Result[AuthResponse]:
        """
        Execute login use case.

        Args:
            email: User email
            password: Plain text password

        Returns:
            Result with AuthResponse, or Error(INVALID_CREDENTIALS)
        """
        async with self.uow:
            user = await self.uow.users.find_by_email_insensitive(email)

            if user is None:
                # Hash dummy password to maintain constant time
                bcrypt.checkpw(b"dummy_password", bcrypt.gensalt(ApplicationConfig.BCRYPT_ROUNDS))
                return Return.err(
                    Error("INVALID_CREDENTIALS", "Invalid email or password")
                )

            if not verify_password(password, user.password_hash):
                return Return.err(
                    Error("INVALID_CREDENTIALS", "Invalid email or password")
                )

            from src.api.utils.jwt import generate_jwt

            access_token = generate_jwt(user.id, user.role.value, user.position.value)
            return Return.ok(
                AuthResponse(user=UserInfo.from_user(user), access_token=access_token)
            )
