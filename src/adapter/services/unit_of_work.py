from sqlmodel.ext.asyncio.session import AsyncSession

from src.adapter.repositories.milestone_repository import MilestoneRepository
from src.adapter.repositories.password_reset_token_repository import PasswordResetTokenRepository
from src.adapter.repositories.project_member_repository import ProjectMemberRepository
from src.adapter.repositories.project_repository import ProjectRepository
from src.adapter.repositories.project_update_repository import ProjectUpdateRepository
from src.adapter.repositories.task_repository import TaskRepository
from src.adapter.repositories.user_repository import UserRepository
from src.app.services.unit_of_work import UnitOfWork


class SqlAlchemyUnitOfWork(UnitOfWork):
    """
    One AsyncSession per unit of work.

    Leaving the block rolls back whatever was not committed, so a use case that
    returns early on a rejected request never persists partial writes.
    """

    def __init__(self, session: AsyncSession):
        self.session = session

    async def __aenter__(self):
        self.users = UserRepository(self.session)
        self.password_reset_tokens = PasswordResetTokenRepository(self.session)
        self.tasks = TaskRepository(self.session)
        self.projects = ProjectRepository(self.session)
        self.project_members = ProjectMemberRepository(self.session)
        self.milestones = MilestoneRepository(self.session)
        self.project_updates = ProjectUpdateRepository(self.session)
        return self

    async def __aexit__(self, exc_type, exc, tb):
        await self.rollback()
        return False

    async def commit(self):
        await self.session.commit()

    async def rollback(self):
        await self.session.rollback()
