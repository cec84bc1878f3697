from libs.result import Error, Result, Return
from src.app.services.unit_of_work import UnitOfWork
from src.domain.base import utcnow
from .dtos import NotificationsReadResponse


class MarkNotificationsReadUseCase:
    """Stamp last_notification_read_at with the current time"""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, current_user_id: int) -> Result[NotificationsReadResponse]:
        async with self.uow:
            user = await self.uow.users.get_by_id(current_user_id)
            if user is None:
                return Return.err(Error("USER_NOT_FOUND", "User not found"))

            now = utcnow()
            user.last_notification_read_at = now
            user.updated_at = now
            await self.uow.users.update(user)
            await self.uow.commit()

            return Return.ok(NotificationsReadResponse(last_notification_read_at=now))
