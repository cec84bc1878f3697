from abc import ABC, abstractmethod
from typing import List, Optional

from src.domain.entities import Milestone


class IMilestoneRepository(ABC):
    @abstractmethod
    async def list_for_project(self, project_id: int) -> List[Milestone]:
        """Milestones by target date, then creation"""
        pass

    @abstractmethod
    async def get(self, project_id: int, milestone_id: int) -> Optional[Milestone]:
        pass

    @abstractmethod
    async def create(self, milestone: Milestone) -> Milestone:
        pass

    @abstractmethod
    async def update(self, milestone: Milestone) -> Milestone:
        pass

    @abstractmethod
    async def delete(self, milestone: Milestone) -> None:
        pass
