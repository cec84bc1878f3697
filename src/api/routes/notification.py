from fastapi import APIRouter, Depends, status

from src.api.error import raise_for_error
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.notifications import (
    ListNotificationsUseCase,
    MarkNotificationsReadUseCase,
    NotificationListResponse,
    NotificationsReadResponse,
)
from src.depends import get_current_user, get_unit_of_work

router = APIRouter(prefix="/notifications", tags=["Notifications"])


@router.get("", status_code=status.HTTP_200_OK, response_model=NotificationListResponse)
async def list_notifications(
    current_user: dict = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Task notifications for the signed-in user, newest first.

    Raises:
        - 401 Unauthorized: No or invalid session
        - 404 Not Found: Session user no longer exists
    """
    result = await ListNotificationsUseCase(uow).execute(int(current_user["user_id"]))

    if result.is_err():
        raise_for_error(result.error)

    return result.value


@router.post("/read", status_code=status.HTTP_200_OK, response_model=NotificationsReadResponse)
async def mark_notifications_read(
    current_user: dict = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    result = await MarkNotificationsReadUseCase(uow).execute(int(current_user["user_id"]))

    if result.is_err():
        raise_for_error(result.error)

    return result.value
