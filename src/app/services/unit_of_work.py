from abc import ABC, abstractmethod

from src.app.repositories.milestone_repository import IMilestoneRepository
from src.app.repositories.password_reset_token_repository import IPasswordResetTokenRepository
from src.app.repositories.project_member_repository import IProjectMemberRepository
from src.app.repositories.project_repository import IProjectRepository
from src.app.repositories.project_update_repository import IProjectUpdateRepository
from src.app.repositories.task_repository import ITaskRepository
from src.app.repositories.user_repository import IUserRepository


class UnitOfWork(ABC):
    """Abstract UnitOfWork - defines repository access and transaction management"""

    # Repository properties (initialized in __aenter__)
    users: IUserRepository
    password_reset_tokens: IPasswordResetTokenRepository
    tasks: ITaskRepository
    projects: IProjectRepository
    project_members: IProjectMemberRepository
    milestones: IMilestoneRepository
    project_updates: IProjectUpdateRepository

    @abstractmethod
    async def __aenter__(self):
        pass

    @abstractmethod
    async def __aexit__(self, *args):
        pass

    @abstractmethod
    async def commit(self):
        pass

    @abstractmethod
    async def rollback(self):
        pass
