"""
List Notifications Use Case

Notifications are derived from the tasks a user is on, not stored.
"""

from typing import Optional

from libs.result import Error, Result, Return
from src.app.repositories.task_repository import TaskFilter
from src.app.services.unit_of_work import UnitOfWork
from src.domain.entities import Task, TaskStatus
from .dtos import NotificationInfo, NotificationListResponse


def notification_for(task: Task, user_id: int) -> Optional[NotificationInfo]:
    """
    Map a task to the notification the given user sees for it.

    - Assignee: the task was assigned to them (stamped at creation)
    - Assigner: the assignee completed it or started on it (stamped at last update)
    - Anything else produces no notification
    """
    if task.assignee_id == user_id:
        return NotificationInfo(
            id=f"task-{task.id}-assigned",
            type="task_assigned",
            title="New task assigned to you",
            message=f'"{task.title}" has been assigned to you by {task.assigner_name}',
            task_id=task.id,
            timestamp=task.created_at,
            read=False,
        )
    if task.assigner_id == user_id and task.assignee_id is not None:
        if task.status == TaskStatus.completed:
            return NotificationInfo(
                id=f"task-{task.id}-completed",
                type="task_completed",
                title="Task completed",
                message=f'"{task.title}" has been completed by {task.assignee_name}',
                task_id=task.id,
                timestamp=task.updated_at,
                read=False,
            )
        if task.status == TaskStatus.in_progress:
            return NotificationInfo(
                id=f"task-{task.id}-progress",
                type="task_updated",
                title="Task in progress",
                message=f'"{task.title}" is now in progress by {task.assignee_name}',
                task_id=task.id,
                timestamp=task.updated_at,
                read=False,
            )
    return None


class ListNotificationsUseCase:
    """
    Business Rules:
    - Built from the user's most recent tasks, either side of the assignment
    - A notification is read when its timestamp is not after the user's
      last_notification_read_at
    - Newest first
    """

    def __init__(self, uow: UnitOfWork, limit: int = 20):
        self.uow = uow
        self.limit = limit

    async def execute(self, current_user_id: int) -> Result[NotificationListResponse]:
        async with self.uow:
            user = await self.uow.users.get_by_id(current_user_id)
            if user is None:
                return Return.err(Error("USER_NOT_FOUND", "User not found"))

            tasks = await self.uow.tasks.list(
                TaskFilter(involving_user_id=user.id, limit=self.limit)
            )
            read_at = user.last_notification_read_at
            notifications = []
            for task in tasks:
                notification = notification_for(task, user.id)
                if notification is None:
                    continue
                notification.read = read_at is not None and notification.timestamp <= read_at
                notifications.append(notification)

            notifications.sort(key=lambda n: n.timestamp, reverse=True)
            return Return.ok(
                NotificationListResponse(
                    notifications=notifications,
                    unread_count=sum(1 for n in notifications if not n.read),
                )
            )
