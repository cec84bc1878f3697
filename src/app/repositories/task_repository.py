from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Dict, List, Optional

from src.domain.entities import Task, TaskPriority, TaskStatus


@dataclass
class TaskFilter:
    status: Optional[TaskStatus] = None
    priority: Optional[TaskPriority] = None
    assignee_id: Optional[int] = None
    assigner_id: Optional[int] = None
    # Either side of the assignment
    involving_user_id: Optional[int] = None
    search: Optional[str] = None
    limit: Optional[int] = None


class ITaskRepository(ABC):
    """Task repository interface - application layer"""

    @abstractmethod
    async def get_by_id(self, task_id: int) -> Optional[Task]:
        pass

    @abstractmethod
    async def list(self, task_filter: TaskFilter) -> List[Task]:
        """List tasks matching the filter, newest first"""
        pass

    @abstractmethod
    async def count_by_status(self) -> Dict[TaskStatus, int]:
        pass

    @abstractmethod
    async def create(self, task: Task) -> Task:
        pass

    @abstractmethod
    async def update(self, task: Task) -> Task:
        pass

    @abstractmethod
    async def delete(self, task: Task) -> None:
        pass
