import pytest
from unittest.mock import AsyncMock, MagicMock


@pytest.fixture
def mock_uow():
    uow = MagicMock()
    uow.__aenter__ = AsyncMock(return_value=uow)
    uow.__aexit__ = AsyncMock(return_value=False)  # Must return False to not suppress exceptions
    uow.commit = AsyncMock()
    uow.rollback = AsyncMock()

    uow.users = MagicMock()
    uow.users.find_by_email_insensitive = AsyncMock(return_value=None)
    uow.users.get_by_id = AsyncMock(return_value=None)
    uow.users.create = AsyncMock(side_effect=lambda user: user)
    uow.users.update = AsyncMock(side_effect=lambda user: user)
    uow.users.list = AsyncMock(return_value=[])
    uow.users.count = AsyncMock(return_value=0)

    uow.password_reset_tokens = MagicMock()
    uow.password_reset_tokens.create = AsyncMock(side_effect=lambda token: token)
    uow.password_reset_tokens.get_latest_for_user = AsyncMock(return_value=None)
    uow.password_reset_tokens.get_by_user_and_hash = AsyncMock(return_value=None)
    uow.password_reset_tokens.mark_used = AsyncMock(return_value=True)

    uow.tasks = MagicMock()
    uow.tasks.get_by_id = AsyncMock(return_value=None)
    uow.tasks.list = AsyncMock(return_value=[])
    uow.tasks.create = AsyncMock(side_effect=lambda task: task)
    uow.tasks.update = AsyncMock(side_effect=lambda task: task)
    uow.tasks.delete = AsyncMock()
    uow.tasks.count_by_status = AsyncMock(return_value={})

    uow.projects = MagicMock()
    uow.projects.get_by_id = AsyncMock(return_value=None)
    uow.projects.list = AsyncMock(return_value=[])
    uow.projects.count_by_status = AsyncMock(return_value={})
    uow.projects.create = AsyncMock(side_effect=lambda project: project)
    uow.projects.update = AsyncMock(side_effect=lambda project: project)
    uow.projects.delete = AsyncMock()

    uow.project_members = MagicMock()
    uow.project_members.list_active = AsyncMock(return_value=[])
    uow.project_members.get = AsyncMock(return_value=None)
    uow.project_members.create = AsyncMock(side_effect=lambda member: member)
    uow.project_members.update = AsyncMock(side_effect=lambda member: member)

    uow.milestones = MagicMock()
    uow.milestones.list_for_project = AsyncMock(return_value=[])
    uow.milestones.get = AsyncMock(return_value=None)
    uow.milestones.create = AsyncMock(side_effect=lambda milestone: milestone)
    uow.milestones.update = AsyncMock(side_effect=lambda milestone: milestone)
    uow.milestones.delete = AsyncMock()

    uow.project_updates = MagicMock()
    uow.project_updates.list_recent = AsyncMock(return_value=[])
    uow.project_updates.create = AsyncMock(side_effect=lambda update: update)
    return uow


@pytest.fixture
def mock_mail_gateway():
    gateway = MagicMock()
    gateway.send_reset_link = AsyncMock()
    gateway.send_contact_message = AsyncMock()
    return gateway
