from abc import ABC, abstractmethod
from typing import List, Optional

from src.domain.entities import ProjectMember


class IProjectMemberRepository(ABC):
    @abstractmethod
    async def list_active(self, project_id: int) -> List[ProjectMember]:
        """Active members in join order"""
        pass

    @abstractmethod
    async def get(self, project_id: int, user_id: int) -> Optional[ProjectMember]:
        """Membership row for the pair, active or not"""
        pass

    @abstractmethod
    async def create(self, member: ProjectMember) -> ProjectMember:
        pass

    @abstractmethod
    async def update(self, member: ProjectMember) -> ProjectMember:
        pass
