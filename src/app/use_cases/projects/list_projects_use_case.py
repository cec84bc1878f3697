from libs.result import Result, Return
from src.app.repositories.project_repository import ProjectFilter
from src.app.repositories.user_repository import UserFilter
from src.app.services.unit_of_work import UnitOfWork
from .access import load_project
from .dtos import (
    MemberInfo,
    MilestoneInfo,
    ProjectDetail,
    ProjectInfo,
    ProjectListResponse,
    ProjectUpdateInfo,
)

RECENT_UPDATES = 10


class ListProjectsUseCase:
    """List projects, most recently updated first, narrowed by the optional filter"""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, project_filter: ProjectFilter) -> Result[ProjectListResponse]:
        async with self.uow:
            projects = await self.uow.projects.list(project_filter)
            return Return.ok(
                ProjectListResponse(projects=[ProjectInfo.from_project(p) for p in projects])
            )


class GetProjectUseCase:
    """Project with its active members, milestones and latest updates"""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, project_id: int) -> Result[ProjectDetail]:
        async with self.uow:
            project_result = await load_project(self.uow, project_id)
            if project_result.is_err():
                return project_result
            project = project_result.value

            members = await self.uow.project_members.list_active(project.id)
            users = {}
            if members:
                found = await self.uow.users.list(UserFilter(ids=[m.user_id for m in members]))
                users = {user.id: user for user in found}
            milestones = await self.uow.milestones.list_for_project(project.id)
            updates = await self.uow.project_updates.list_recent(project.id, RECENT_UPDATES)

            return Return.ok(
                ProjectDetail(
                    **ProjectInfo.from_project(project).model_dump(),
                    members=[MemberInfo.from_member(m, users.get(m.user_id)) for m in members],
                    milestones=[MilestoneInfo.from_milestone(m) for m in milestones],
                    updates=[ProjectUpdateInfo.from_update(u) for u in updates],
                )
            )
