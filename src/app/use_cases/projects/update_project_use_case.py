"""
Update and Delete Project Use Cases
"""

import logging

from libs.result import Error, Result, Return
from src.app.services.unit_of_work import UnitOfWork
from src.domain.base import utcnow
from .access import load_project_for_manager
from .dtos import ProjectInfo, UpdateProjectCommand

logger = logging.getLogger(__name__)


class UpdateProjectUseCase:
    """
    Business Rules:
    - Only the team lead or a head/overall coordinator may change a project
    - Only supplied fields change
    - The resulting end_date, when set, must fall after start_date
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, current_user_id: int, project_id: int, command: UpdateProjectCommand
    ) -> Result[ProjectInfo]:
        changes = command.model_dump(exclude_none=True)

        async with self.uow:
            access = await load_project_for_manager(self.uow, current_user_id, project_id)
            if access.is_err():
                return access
            _, project = access.value

            for field in ("title", "description"):
                if field in changes:
                    value = changes.pop(field).strip()
                    if not value:
                        return Return.err(
                            Error("VALIDATION_ERROR", f"{field.capitalize()} cannot be empty")
                        )
                    setattr(project, field, value)

            start_date = changes.get("start_date", project.start_date)
            end_date = changes.get("end_date", project.end_date)
            if end_date is not None and end_date <= start_date:
                return Return.err(Error("VALIDATION_ERROR", "End date must be after start date"))

            for field, value in changes.items():
                setattr(project, field, value)

            project.updated_at = utcnow()
            project = await self.uow.projects.update(project)
            await self.uow.commit()

            logger.info(f"User {current_user_id} updated project {project.id}")
            return Return.ok(ProjectInfo.from_project(project))


class DeleteProjectUseCase:
    """Removes the project with its members, milestones and updates"""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, current_user_id: int, project_id: int) -> Result[None]:
        async with self.uow:
            access = await load_project_for_manager(self.uow, current_user_id, project_id)
            if access.is_err():
                return access
            _, project = access.value

            await self.uow.projects.delete(project)
            await self.uow.commit()

            logger.info(f"User {current_user_id} deleted project {project_id}")
            return Return.ok(None)
