"""
Create Task Use Case
"""

import logging

from libs.result import Error, Result, Return
from src.app.services.unit_of_work import UnitOfWork
from src.domain.entities import Task, UserRole
from .dtos import CreateTaskCommand, TaskInfo

logger = logging.getLogger(__name__)


class CreateTaskUseCase:
    """
    Business Rules:
    - Only users with role=assigner may create tasks
    - Title and description are required
    - Assignee, when given, must exist and have role=assignee
    - Assigner and assignee names are copied onto the task
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, current_user_id: int, command: CreateTaskCommand) -> Result[TaskInfo]:
        title = command.title.strip()
        description = command.description.strip()
        if not title or not description:
            return Return.err(Error("VALIDATION_ERROR", "Title and description are required"))

        async with self.uow:
            assigner = await self.uow.users.get_by_id(current_user_id)
            if assigner is None:
                return Return.err(Error("USER_NOT_FOUND", "User not found"))
            if assigner.role != UserRole.assigner:
                return Return.err(
                    Error("INSUFFICIENT_ROLE", "Only assigners can create tasks")
                )

            assignee = None
            if command.assignee_id is not None:
                assignee = await self.uow.users.get_by_id(command.assignee_id)
                if assignee is None or assignee.role != UserRole.assignee:
                    return Return.err(Error("ASSIGNEE_NOT_FOUND", "Assignee not found"))

            task = Task(
                title=title,
                description=description,
                status=command.status,
                priority=command.priority,
                due_date=command.due_date,
                assigner_id=assigner.id,
                assigner_name=assigner.name,
                assignee_id=assignee.id if assignee else None,
                assignee_name=assignee.name if assignee else None,
            )
            task = await self.uow.tasks.create(task)
            await self.uow.commit()

            logger.info(f"User {assigner.id} created task {task.id}")
            return Return.ok(TaskInfo.from_task(task))
