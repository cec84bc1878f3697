"""
Update Task Use Case
"""

import logging

from libs.result import Error, Result, Return
from src.app.services.unit_of_work import UnitOfWork
from src.domain.base import utcnow
from src.domain.entities import UserRole
from .dtos import TaskInfo, UpdateTaskCommand

logger = logging.getLogger(__name__)

ASSIGNEE_EDITABLE_FIELDS = {"status"}


class UpdateTaskUseCase:
    """
    Business Rules:
    - The task's assigner may change any field
    - The task's assignee may change only the status
    - Anyone else is forbidden
    - A new assignee must exist and have role=assignee
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, current_user_id: int, task_id: int, command: UpdateTaskCommand
    ) -> Result[TaskInfo]:
        changes = command.model_dump(exclude_none=True)

        async with self.uow:
            task = await self.uow.tasks.get_by_id(task_id)
            if task is None:
                return Return.err(Error("TASK_NOT_FOUND", "Task not found"))

            if current_user_id != task.assigner_id:
                if current_user_id != task.assignee_id:
                    return Return.err(Error("FORBIDDEN", "You cannot modify this task"))
                if set(changes) - ASSIGNEE_EDITABLE_FIELDS:
                    return Return.err(
                        Error("FORBIDDEN", "Assignees can only change the task status")
                    )

            if "assignee_id" in changes:
                assignee = await self.uow.users.get_by_id(changes.pop("assignee_id"))
                if assignee is None or assignee.role != UserRole.assignee:
                    return Return.err(Error("ASSIGNEE_NOT_FOUND", "Assignee not found"))
                task.assignee_id = assignee.id
                task.assignee_name = assignee.name

            for field in ("title", "description"):
                if field in changes:
                    value = changes.pop(field).strip()
                    if not value:
                        return Return.err(
                            Error("VALIDATION_ERROR", f"{field.capitalize()} cannot be empty")
                        )
                    setattr(task, field, value)

            for field in ("status", "priority", "due_date"):
                if field in changes:
                    setattr(task, field, getattr(command, field))

            task.updated_at = utcnow()
            task = await self.uow.tasks.update(task)
            await self.uow.commit()

            logger.info(f"User {current_user_id} updated task {task.id}")
            return Return.ok(TaskInfo.from_task(task))
