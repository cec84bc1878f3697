"""
Update Profile Use Case

Applies partial profile changes to the caller's own user record.
"""

import logging

from libs.result import Error, Result, Return
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.auth.dtos import UserInfo
from src.domain.base import utcnow
from .dtos import UpdateProfileCommand

logger = logging.getLogger(__name__)

PROFILE_FIELDS = (
    "name",
    "position",
    "bio",
    "avatar_url",
    "github_url",
    "linkedin_url",
    "last_notification_read_at",
)


class UpdateProfileUseCase:
    """
    Business Rules:
    - Users may only update their own record
    - Email change is rejected if another user already has that email
    - Only supplied, non-empty fields change
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, current_user_id: int, command: UpdateProfileCommand) -> Result[UserInfo]:
        if command.id != current_user_id:
            return Return.err(Error("FORBIDDEN", "You can only update your own profile"))

        async with self.uow:
            user = await self.uow.users.get_by_id(command.id)
            if user is None:
                return Return.err(Error("USER_NOT_FOUND", "User not found"))

            new_email = command.email.strip() if command.email else None
            if new_email and new_email.lower() != user.email.lower():
                existing = await self.uow.users.find_by_email_insensitive(new_email)
                if existing is not None and existing.id != user.id:
                    return Return.err(Error("EMAIL_ALREADY_EXISTS", "Email already exists"))
            if new_email:
                user.email = new_email

            for field in PROFILE_FIELDS:
                value = getattr(command, field)
                if type(value) is str:
                    value = value.strip()
                if value not in (None, ""):
                    setattr(user, field, value)

            user.updated_at = utcnow()
            user = await self.uow.users.update(user)
            await self.uow.commit()

            logger.info(f"Updated profile for user {user.id}")
            return Return.ok(UserInfo.from_user(user))
