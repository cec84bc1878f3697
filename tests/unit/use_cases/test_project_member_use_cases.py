"""
Unit tests for the project roster use cases
"""
from datetime import date
from unittest.mock import AsyncMock

import pytest

from src.app.use_cases.projects import (
    AddMemberCommand,
    AddProjectMemberUseCase,
    ListProjectMembersUseCase,
    RemoveProjectMemberUseCase,
    UpdateMemberCommand,
    UpdateProjectMemberUseCase,
)
from src.domain.entities import Position, Project, ProjectCategory, ProjectMember, User, UserRole

LEAD = User(id=2, name="Grace", email="grace@robotix.club", password_hash="x",
            role=UserRole.assigner, position=Position.core_coordinator)
ALAN = User(id=3, name="Alan", email="alan@robotix.club", password_hash="x",
            role=UserRole.assignee, position=Position.member)
EVE = User(id=4, name="Eve", email="eve@robotix.club", password_hash="x",
           role=UserRole.assignee, position=Position.executive)

USERS = {user.id: user for user in (LEAD, ALAN, EVE)}

PROJECT = Project(
    id=7,
    title="Line follower",
    description="Competition line follower robot",
    category=ProjectCategory.robotics,
    start_date=date(2026, 1, 10),
    team_lead_id=2,
    team_lead_name="Grace",
)


@pytest.fixture
def project(mock_uow):
    mock_uow.users.get_by_id = AsyncMock(side_effect=lambda user_id: USERS.get(user_id))
    mock_uow.projects.get_by_id = AsyncMock(
        side_effect=lambda project_id: PROJECT if project_id == 7 else None
    )
    return PROJECT


@pytest.mark.asyncio
async def test_team_lead_adds_member(mock_uow, project):
    result = await AddProjectMemberUseCase(mock_uow).execute(
        2, 7, AddMemberCommand(user_id=3, role=" firmware ")
    )

    assert result.is_ok()
    member = result.value
    assert member.user_id == 3
    assert member.name == "Alan"
    assert member.role == "firmware"
    assert member.is_active
    mock_uow.project_members.create.assert_called_once()
    mock_uow.commit.assert_called_once()


@pytest.mark.asyncio
async def test_adding_active_member_twice_conflicts(mock_uow, project):
    mock_uow.project_members.get = AsyncMock(
        return_value=ProjectMember(id=1, project_id=7, user_id=3)
    )

    result = await AddProjectMemberUseCase(mock_uow).execute(2, 7, AddMemberCommand(user_id=3))

    assert result.is_err()
    assert result.error.code == "ALREADY_PROJECT_MEMBER"
    mock_uow.commit.assert_not_called()


@pytest.mark.asyncio
async def test_former_member_is_reactivated(mock_uow, project):
    former = ProjectMember(id=1, project_id=7, user_id=3, is_active=False, role="old")
    former.left_at = former.joined_at
    mock_uow.project_members.get = AsyncMock(return_value=former)

    result = await AddProjectMemberUseCase(mock_uow).execute(
        2, 7, AddMemberCommand(user_id=3, role="mechanics")
    )

    assert result.is_ok()
    assert result.value.is_active
    assert result.value.left_at is None
    assert result.value.role == "mechanics"
    mock_uow.project_members.create.assert_not_called()
    mock_uow.project_members.update.assert_called_once_with(former)


@pytest.mark.asyncio
async def test_non_manager_cannot_add_members(mock_uow, project):
    result = await AddProjectMemberUseCase(mock_uow).execute(4, 7, AddMemberCommand(user_id=3))

    assert result.is_err()
    assert result.error.code == "FORBIDDEN"


@pytest.mark.asyncio
async def test_add_unknown_user(mock_uow, project):
    result = await AddProjectMemberUseCase(mock_uow).execute(2, 7, AddMemberCommand(user_id=99))

    assert result.is_err()
    assert result.error.code == "USER_NOT_FOUND"


@pytest.mark.asyncio
async def test_add_member_to_missing_project(mock_uow, project):
    result = await AddProjectMemberUseCase(mock_uow).execute(2, 8, AddMemberCommand(user_id=3))

    assert result.is_err()
    assert result.error.code == "PROJECT_NOT_FOUND"


@pytest.mark.asyncio
async def test_list_members_joins_user_names(mock_uow, project):
    mock_uow.project_members.list_active = AsyncMock(
        return_value=[ProjectMember(project_id=7, user_id=3), ProjectMember(project_id=7, user_id=4)]
    )
    mock_uow.users.list = AsyncMock(return_value=[ALAN, EVE])

    result = await ListProjectMembersUseCase(mock_uow).execute(7)

    assert result.is_ok()
    assert [m.name for m in result.value.members] == ["Alan", "Eve"]
    user_filter = mock_uow.users.list.call_args.args[0]
    assert list(user_filter.ids) == [3, 4]


@pytest.mark.asyncio
async def test_deactivating_member_stamps_left_at(mock_uow, project):
    member = ProjectMember(id=1, project_id=7, user_id=3)
    mock_uow.project_members.get = AsyncMock(return_value=member)

    result = await UpdateProjectMemberUseCase(mock_uow).execute(
        2, 7, 3, UpdateMemberCommand(is_active=False, contributions="Wiring harness")
    )

    assert result.is_ok()
    assert not result.value.is_active
    assert result.value.left_at is not None
    assert result.value.contributions == "Wiring harness"


@pytest.mark.asyncio
async def test_update_unknown_member(mock_uow, project):
    result = await UpdateProjectMemberUseCase(mock_uow).execute(
        2, 7, 3, UpdateMemberCommand(role="lead")
    )

    assert result.is_err()
    assert result.error.code == "MEMBER_NOT_FOUND"


@pytest.mark.asyncio
async def test_member_can_leave_project(mock_uow, project):
    member = ProjectMember(id=1, project_id=7, user_id=3)
    mock_uow.project_members.get = AsyncMock(return_value=member)

    result = await RemoveProjectMemberUseCase(mock_uow).execute(3, 7, 3)

    assert result.is_ok()
    assert member.is_active is False
    assert member.left_at is not None
    mock_uow.commit.assert_called_once()


@pytest.mark.asyncio
async def test_other_member_cannot_remove_someone_else(mock_uow, project):
    mock_uow.project_members.get = AsyncMock(
        return_value=ProjectMember(id=1, project_id=7, user_id=3)
    )

    result = await RemoveProjectMemberUseCase(mock_uow).execute(4, 7, 3)

    assert result.is_err()
    assert result.error.code == "FORBIDDEN"
    mock_uow.project_members.update.assert_not_called()


@pytest.mark.asyncio
async def test_removing_inactive_member_is_not_found(mock_uow, project):
    mock_uow.project_members.get = AsyncMock(
        return_value=ProjectMember(id=1, project_id=7, user_id=3, is_active=False)
    )

    result = await RemoveProjectMemberUseCase(mock_uow).execute(2, 7, 3)

    assert result.is_err()
    assert result.error.code == "MEMBER_NOT_FOUND"
