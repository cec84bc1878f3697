from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Dict, List, Optional

from src.domain.entities import Project, ProjectCategory, ProjectPriority, ProjectStatus


@dataclass
class ProjectFilter:
    status: Optional[ProjectStatus] = None
    category: Optional[ProjectCategory] = None
    priority: Optional[ProjectPriority] = None
    team_lead_id: Optional[int] = None
    featured: Optional[bool] = None
    search: Optional[str] = None


class IProjectRepository(ABC):
    """Project repository interface - application layer"""

    @abstractmethod
    async def get_by_id(self, project_id: int) -> Optional[Project]:
        pass

    @abstractmethod
    async def list(self, project_filter: ProjectFilter) -> List[Project]:
        """List projects matching the filter, most recently updated first"""
        pass

    @abstractmethod
    async def count_by_status(self) -> Dict[ProjectStatus, int]:
        pass

    @abstractmethod
    async def create(self, project: Project) -> Project:
        pass

    @abstractmethod
    async def update(self, project: Project) -> Project:
        pass

    @abstractmethod
    async def delete(self, project: Project) -> None:
        """Delete the project together with its members, milestones and updates"""
        pass
