"""
Shared lookups for project use cases.

Each helper runs inside the caller's open unit of work.
"""

from typing import Optional, Tuple

from libs.result import Error, Result, Return
from src.app.services.unit_of_work import UnitOfWork
from src.domain.entities import PROJECT_MANAGER_POSITIONS, Project, User


def can_manage_project(user: User, project: Project) -> bool:
    """Team lead of the project, or a head/overall coordinator"""
    return user.id == project.team_lead_id or user.position in PROJECT_MANAGER_POSITIONS


async def load_project(uow: UnitOfWork, project_id: int) -> Result[Project]:
    project = await uow.projects.get_by_id(project_id)
    if project is None:
        return Return.err(Error("PROJECT_NOT_FOUND", "Project not found"))
    return Return.ok(project)


async def load_project_for_manager(
    uow: UnitOfWork, current_user_id: int, project_id: int
) -> Result[Tuple[User, Project]]:
    project_result = await load_project(uow, project_id)
    if project_result.is_err():
        return project_result
    project = project_result.value

    user: Optional[User] = await uow.users.get_by_id(current_user_id)
    if user is None:
        return Return.err(Error("USER_NOT_FOUND", "User not found"))
    if not can_manage_project(user, project):
        return Return.err(Error("FORBIDDEN", "Permission denied"))
    return Return.ok((user, project))
