import logging

from sqlalchemy.exc import IntegrityError

from libs.result import Error, Result, Return
from config import ApplicationConfig
from src.app.services.token_service import hash_password
from src.app.services.unit_of_work import UnitOfWork
from src.domain.entities import User
from .dtos import AuthResponse, RegisterCommand, UserInfo

logger = logging.getLogger(__name__)


class RegisterUseCase:
    """
    Register Use Case

    Business Logic:
    1. Reject passwords shorter than MIN_PASSWORD_LENGTH
    2. Reject emails already registered (case-insensitive)
    3. Hash password with bcrypt (BCRYPT_ROUNDS)
    4. Create User and commit
    5. Issue a session JWT for the new user
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, command: RegisterCommand) -> Result[AuthResponse]:
        name = command.name.strip()
        email = command.email.strip()

        if not name:
            return Return.err(Error("VALIDATION_ERROR", "Name is required"))

        if len(command.password) < ApplicationConfig.MIN_PASSWORD_LENGTH:
            return Return.err(
                Error(
                    "INVALID_PASSWORD",
                    f"Password must be at least {ApplicationConfig.MIN_PASSWORD_LENGTH} characters long",
                )
            )

        async with self.uow:
            existing_user = await self.uow.users.find_by_email_insensitive(email)
            if existing_user:
                return Return.err(
                    Error("EMAIL_ALREADY_EXISTS", "User with this email already exists")
                )

            user = User(
                name=name,
                email=email,
                password_hash=hash_password(command.password),
                role=command.role,
                position=command.position,
            )
            try:
                user = await self.uow.users.create(user)
                await self.uow.commit()
            except IntegrityError:
                # Lost a race with a concurrent registration for the same email
                return Return.err(
                    Error("EMAIL_ALREADY_EXISTS", "User with this email already exists")
                )

            logger.info(f"Registered user {user.id}")

            # Import JWT utility here to avoid circular dependency
            from src.api.utils.jwt import generate_jwt

            access_token = generate_jwt(user.id, user.role.value, user.position.value)
            return Return.ok(
                AuthResponse(user=UserInfo.from_user(user), access_token=access_token)
            )
