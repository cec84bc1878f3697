from abc import ABC, abstractmethod
from typing import List

from src.domain.entities import ProjectUpdate


class IProjectUpdateRepository(ABC):
    @abstractmethod
    async def list_recent(self, project_id: int, limit: int = 10) -> List[ProjectUpdate]:
        """Newest first"""
        pass

    @abstractmethod
    async def create(self, update: ProjectUpdate) -> ProjectUpdate:
        pass
