import logging

from libs.result import Error, Result, Return
from src.app.services.unit_of_work import UnitOfWork
from src.domain.entities import ProjectUpdate
from .access import can_manage_project, load_project
from .dtos import PostProjectUpdateCommand, ProjectUpdateInfo, ProjectUpdateListResponse

logger = logging.getLogger(__name__)


class ListProjectUpdatesUseCase:
    """Latest updates first"""

    def __init__(self, uow: UnitOfWork, limit: int = 10):
        self.uow = uow
        self.limit = limit

    async def execute(self, project_id: int) -> Result[ProjectUpdateListResponse]:
        async with self.uow:
            project_result = await load_project(self.uow, project_id)
            if project_result.is_err():
                return project_result

            updates = await self.uow.project_updates.list_recent(project_id, self.limit)
            return Return.ok(
                ProjectUpdateListResponse(updates=[ProjectUpdateInfo.from_update(u) for u in updates])
            )


class PostProjectUpdateUseCase:
    """
    Business Rules:
    - Active members, the team lead and head/overall coordinators may post
    - Title and description are required
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, current_user_id: int, project_id: int, command: PostProjectUpdateCommand
    ) -> Result[ProjectUpdateInfo]:
        title = command.title.strip()
        description = command.description.strip()
        if not title or not description:
            return Return.err(Error("VALIDATION_ERROR", "Title and description are required"))

        async with self.uow:
            project_result = await load_project(self.uow, project_id)
            if project_result.is_err():
                return project_result
            project = project_result.value

            user = await self.uow.users.get_by_id(current_user_id)
            if user is None:
                return Return.err(Error("USER_NOT_FOUND", "User not found"))
            if not can_manage_project(user, project):
                member = await self.uow.project_members.get(project_id, user.id)
                if member is None or not member.is_active:
                    return Return.err(
                        Error("FORBIDDEN", "Only project members can post updates")
                    )

            update = await self.uow.project_updates.create(
                ProjectUpdate(
                    project_id=project_id,
                    user_id=user.id,
                    title=title,
                    description=description,
                    update_type=command.update_type,
                )
            )
            await self.uow.commit()

            logger.info(f"User {user.id} posted update {update.id} on project {project_id}")
            return Return.ok(ProjectUpdateInfo.from_update(update))
