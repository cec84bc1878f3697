"""
Unit tests for milestones and project updates
"""
from datetime import date
from unittest.mock import AsyncMock

import pytest

from src.app.use_cases.projects import (
    CreateMilestoneCommand,
    CreateMilestoneUseCase,
    DeleteMilestoneUseCase,
    GetMilestoneUseCase,
    ListMilestonesUseCase,
    ListProjectUpdatesUseCase,
    PostProjectUpdateCommand,
    PostProjectUpdateUseCase,
    UpdateMilestoneCommand,
    UpdateMilestoneUseCase,
)
from src.domain.entities import (
    Milestone,
    Position,
    Project,
    ProjectCategory,
    ProjectMember,
    ProjectUpdateType,
    User,
    UserRole,
)

LEAD = User(id=2, name="Grace", email="grace@robotix.club", password_hash="x",
            role=UserRole.assigner, position=Position.core_coordinator)
ALAN = User(id=3, name="Alan", email="alan@robotix.club", password_hash="x",
            role=UserRole.assignee, position=Position.member)

USERS = {user.id: user for user in (LEAD, ALAN)}

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


def make_milestone(**overrides) -> Milestone:
    fields = dict(id=5, project_id=7, title="Chassis", target_date=date(2026, 2, 1), created_by=2)
    fields.update(overrides)
    return Milestone(**fields)


def assign_id(row):
    row.id = 5
    return row


@pytest.mark.asyncio
async def test_team_lead_creates_milestone(mock_uow, project):
    mock_uow.milestones.create = AsyncMock(side_effect=assign_id)

    result = await CreateMilestoneUseCase(mock_uow).execute(
        2, 7, CreateMilestoneCommand(title=" Chassis ", target_date=date(2026, 2, 1))
    )

    assert result.is_ok()
    assert result.value.id == 5
    assert result.value.title == "Chassis"
    assert result.value.created_by == 2
    assert result.value.completed is False
    mock_uow.commit.assert_called_once()


@pytest.mark.asyncio
async def test_member_cannot_create_milestone(mock_uow, project):
    result = await CreateMilestoneUseCase(mock_uow).execute(
        3, 7, CreateMilestoneCommand(title="Chassis", target_date=date(2026, 2, 1))
    )

    assert result.is_err()
    assert result.error.code == "FORBIDDEN"
    mock_uow.milestones.create.assert_not_called()


@pytest.mark.asyncio
async def test_list_milestones_for_missing_project(mock_uow, project):
    result = await ListMilestonesUseCase(mock_uow).execute(8)

    assert result.is_err()
    assert result.error.code == "PROJECT_NOT_FOUND"


@pytest.mark.asyncio
async def test_get_unknown_milestone(mock_uow, project):
    result = await GetMilestoneUseCase(mock_uow).execute(7, 5)

    assert result.is_err()
    assert result.error.code == "MILESTONE_NOT_FOUND"


@pytest.mark.asyncio
async def test_complete_milestone(mock_uow, project):
    milestone = make_milestone()
    mock_uow.milestones.get = AsyncMock(return_value=milestone)

    result = await UpdateMilestoneUseCase(mock_uow).execute(
        2, 7, 5, UpdateMilestoneCommand(completed=True)
    )

    assert result.is_ok()
    assert result.value.completed is True
    assert result.value.title == "Chassis"
    mock_uow.milestones.update.assert_called_once_with(milestone)


@pytest.mark.asyncio
async def test_delete_milestone(mock_uow, project):
    milestone = make_milestone()
    mock_uow.milestones.get = AsyncMock(return_value=milestone)

    result = await DeleteMilestoneUseCase(mock_uow).execute(2, 7, 5)

    assert result.is_ok()
    mock_uow.milestones.delete.assert_called_once_with(milestone)
    mock_uow.commit.assert_called_once()


@pytest.mark.asyncio
async def test_active_member_posts_update(mock_uow, project):
    mock_uow.project_members.get = AsyncMock(
        return_value=ProjectMember(id=1, project_id=7, user_id=3)
    )
    mock_uow.project_updates.create = AsyncMock(side_effect=assign_id)

    result = await PostProjectUpdateUseCase(mock_uow).execute(
        3,
        7,
        PostProjectUpdateCommand(
            title="Motors in", description="Both motors mounted", update_type=ProjectUpdateType.milestone
        ),
    )

    assert result.is_ok()
    assert result.value.user_id == 3
    assert result.value.update_type == ProjectUpdateType.milestone
    mock_uow.commit.assert_called_once()


@pytest.mark.asyncio
async def test_outsider_cannot_post_update(mock_uow, project):
    result = await PostProjectUpdateUseCase(mock_uow).execute(
        3, 7, PostProjectUpdateCommand(title="Hello", description="Drive-by note")
    )

    assert result.is_err()
    assert result.error.code == "FORBIDDEN"
    assert result.error.message == "Only project members can post updates"
    mock_uow.project_updates.create.assert_not_called()


@pytest.mark.asyncio
async def test_list_updates_uses_limit(mock_uow, project):
    await ListProjectUpdatesUseCase(mock_uow, limit=3).execute(7)

    mock_uow.project_updates.list_recent.assert_called_once_with(7, 3)
