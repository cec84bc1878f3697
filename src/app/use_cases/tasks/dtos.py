"""
Task Use Case DTOs
"""

from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel

from src.domain.entities import Task, TaskPriority, TaskStatus


class CreateTaskCommand(BaseModel):
    title: str
    description: str
    priority: TaskPriority = TaskPriority.medium
    status: TaskStatus = TaskStatus.pending
    due_date: Optional[datetime] = None
    assignee_id: Optional[int] = None


class UpdateTaskCommand(BaseModel):
    """Partial update; None leaves the field untouched"""

    title: Optional[str] = None
    description: Optional[str] = None
    priority: Optional[TaskPriority] = None
    status: Optional[TaskStatus] = None
    due_date: Optional[datetime] = None
    assignee_id: Optional[int] = None


class TaskInfo(BaseModel):
    id: int
    title: str
    description: str
    status: TaskStatus
    priority: TaskPriority
    due_date: Optional[datetime] = None
    assigner_id: int
    assigner_name: str
    assignee_id: Optional[int] = None
    assignee_name: Optional[str] = None
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_task(cls, task: Task) -> "TaskInfo":
        return cls(
            id=task.id,
            title=task.title,
            description=task.description,
            status=task.status,
            priority=task.priority,
            due_date=task.due_date,
            assigner_id=task.assigner_id,
            assigner_name=task.assigner_name,
            assignee_id=task.assignee_id,
            assignee_name=task.assignee_name,
            created_at=task.created_at,
            updated_at=task.updated_at,
        )


class TaskListResponse(BaseModel):
    tasks: List[TaskInfo]
