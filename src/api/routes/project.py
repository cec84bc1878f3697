from typing import Optional

from fastapi import APIRouter, Depends, Query, status

from src.api.error import raise_for_error
from src.app.repositories.project_repository import ProjectFilter
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.projects import (
    AddMemberCommand,
    AddProjectMemberUseCase,
    CreateMilestoneCommand,
    CreateMilestoneUseCase,
    CreateProjectCommand,
    CreateProjectUseCase,
    DeleteMilestoneUseCase,
    DeleteProjectUseCase,
    GetMilestoneUseCase,
    GetProjectUseCase,
    ListMilestonesUseCase,
    ListProjectMembersUseCase,
    ListProjectsUseCase,
    ListProjectUpdatesUseCase,
    MemberInfo,
    MemberListResponse,
    MilestoneInfo,
    MilestoneListResponse,
    PostProjectUpdateCommand,
    PostProjectUpdateUseCase,
    ProjectDetail,
    ProjectInfo,
    ProjectListResponse,
    ProjectUpdateInfo,
    ProjectUpdateListResponse,
    RemoveProjectMemberUseCase,
    UpdateMemberCommand,
    UpdateMilestoneCommand,
    UpdateMilestoneUseCase,
    UpdateProjectCommand,
    UpdateProjectMemberUseCase,
    UpdateProjectUseCase,
)
from src.depends import get_current_user, get_unit_of_work
from src.domain.entities import ProjectCategory, ProjectPriority, ProjectStatus

router = APIRouter(prefix="/projects", tags=["Projects"])


def _unwrap(result):
    if result.is_err():
        raise_for_error(result.error)
    return result.value


# ============================================================================
# Projects
# ============================================================================


@router.get("", status_code=status.HTTP_200_OK, response_model=ProjectListResponse)
async def list_projects(
    status_filter: Optional[ProjectStatus] = Query(None, alias="status"),
    category: Optional[ProjectCategory] = Query(None),
    priority: Optional[ProjectPriority] = Query(None),
    team_lead_id: Optional[int] = Query(None),
    featured: Optional[bool] = Query(None),
    search: Optional[str] = Query(None),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """Public project list, most recently updated first"""
    project_filter = ProjectFilter(
        status=status_filter,
        category=category,
        priority=priority,
        team_lead_id=team_lead_id,
        featured=featured,
        search=search,
    )
    return _unwrap(await ListProjectsUseCase(uow).execute(project_filter))


@router.post("", status_code=status.HTTP_201_CREATED, response_model=ProjectInfo)
async def create_project(
    request: CreateProjectCommand,
    current_user: dict = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Create a project. Head and overall coordinators only.

    Raises:
        - 400 Bad Request: Invalid fields or end date not after start date
        - 403 Forbidden: Caller's position cannot create projects
        - 404 Not Found: Team lead not found
    """
    use_case = CreateProjectUseCase(uow)
    return _unwrap(await use_case.execute(int(current_user["user_id"]), request))


@router.get("/{project_id}", status_code=status.HTTP_200_OK, response_model=ProjectDetail)
async def get_project(project_id: int, uow: UnitOfWork = Depends(get_unit_of_work)):
    return _unwrap(await GetProjectUseCase(uow).execute(project_id))


@router.put("/{project_id}", status_code=status.HTTP_200_OK, response_model=ProjectInfo)
async def update_project(
    project_id: int,
    request: UpdateProjectCommand,
    current_user: dict = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Update a project.

    Raises:
        - 403 Forbidden: Caller is neither the team lead nor a head/overall coordinator
        - 404 Not Found: Project not found
    """
    use_case = UpdateProjectUseCase(uow)
    return _unwrap(await use_case.execute(int(current_user["user_id"]), project_id, request))


@router.delete("/{project_id}", status_code=status.HTTP_200_OK)
async def delete_project(
    project_id: int,
    current_user: dict = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    _unwrap(await DeleteProjectUseCase(uow).execute(int(current_user["user_id"]), project_id))
    return {"ok": True}


# ============================================================================
# Members
# ============================================================================


@router.get("/{project_id}/members", status_code=status.HTTP_200_OK, response_model=MemberListResponse)
async def list_members(project_id: int, uow: UnitOfWork = Depends(get_unit_of_work)):
    return _unwrap(await ListProjectMembersUseCase(uow).execute(project_id))


@router.post(
    "/{project_id}/members", status_code=status.HTTP_201_CREATED, response_model=MemberInfo
)
async def add_member(
    project_id: int,
    request: AddMemberCommand,
    current_user: dict = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Add a user to the project roster.

    Raises:
        - 403 Forbidden: Caller cannot manage the project
        - 404 Not Found: Project or user not found
        - 409 Conflict: User is already an active member
    """
    use_case = AddProjectMemberUseCase(uow)
    return _unwrap(await use_case.execute(int(current_user["user_id"]), project_id, request))


@router.put(
    "/{project_id}/members/{user_id}", status_code=status.HTTP_200_OK, response_model=MemberInfo
)
async def update_member(
    project_id: int,
    user_id: int,
    request: UpdateMemberCommand,
    current_user: dict = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    use_case = UpdateProjectMemberUseCase(uow)
    return _unwrap(
        await use_case.execute(int(current_user["user_id"]), project_id, user_id, request)
    )


@router.delete("/{project_id}/members/{user_id}", status_code=status.HTTP_200_OK)
async def remove_member(
    project_id: int,
    user_id: int,
    current_user: dict = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    use_case = RemoveProjectMemberUseCase(uow)
    _unwrap(await use_case.execute(int(current_user["user_id"]), project_id, user_id))
    return {"ok": True}


# ============================================================================
# Milestones
# ============================================================================


@router.get(
    "/{project_id}/milestones", status_code=status.HTTP_200_OK, response_model=MilestoneListResponse
)
async def list_milestones(project_id: int, uow: UnitOfWork = Depends(get_unit_of_work)):
    return _unwrap(await ListMilestonesUseCase(uow).execute(project_id))


@router.post(
    "/{project_id}/milestones", status_code=status.HTTP_201_CREATED, response_model=MilestoneInfo
)
async def create_milestone(
    project_id: int,
    request: CreateMilestoneCommand,
    current_user: dict = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    use_case = CreateMilestoneUseCase(uow)
    return _unwrap(await use_case.execute(int(current_user["user_id"]), project_id, request))


@router.get(
    "/{project_id}/milestones/{milestone_id}",
    status_code=status.HTTP_200_OK,
    response_model=MilestoneInfo,
)
async def get_milestone(
    project_id: int, milestone_id: int, uow: UnitOfWork = Depends(get_unit_of_work)
):
    return _unwrap(await GetMilestoneUseCase(uow).execute(project_id, milestone_id))


@router.put(
    "/{project_id}/milestones/{milestone_id}",
    status_code=status.HTTP_200_OK,
    response_model=MilestoneInfo,
)
async def update_milestone(
    project_id: int,
    milestone_id: int,
    request: UpdateMilestoneCommand,
    current_user: dict = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    use_case = UpdateMilestoneUseCase(uow)
    return _unwrap(
        await use_case.execute(int(current_user["user_id"]), project_id, milestone_id, request)
    )


@router.delete("/{project_id}/milestones/{milestone_id}", status_code=status.HTTP_200_OK)
async def delete_milestone(
    project_id: int,
    milestone_id: int,
    current_user: dict = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    use_case = DeleteMilestoneUseCase(uow)
    _unwrap(await use_case.execute(int(current_user["user_id"]), project_id, milestone_id))
    return {"ok": True}


# ============================================================================
# Updates
# ============================================================================


@router.get(
    "/{project_id}/updates",
    status_code=status.HTTP_200_OK,
    response_model=ProjectUpdateListResponse,
)
async def list_updates(project_id: int, uow: UnitOfWork = Depends(get_unit_of_work)):
    return _unwrap(await ListProjectUpdatesUseCase(uow).execute(project_id))


@router.post(
    "/{project_id}/updates", status_code=status.HTTP_201_CREATED, response_model=ProjectUpdateInfo
)
async def post_update(
    project_id: int,
    request: PostProjectUpdateCommand,
    current_user: dict = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Post a progress update.

    Raises:
        - 403 Forbidden: Caller is not on the project
        - 404 Not Found: Project not found
    """
    use_case = PostProjectUpdateUseCase(uow)
    return _unwrap(await use_case.execute(int(current_user["user_id"]), project_id, request))
