"""
Task Entity

Work item handed from an assigner to an assignee.
"""

from datetime import datetime
from typing import Optional

from sqlmodel import Column, DateTime, Field, Index, SQLModel

from src.domain.base import utcnow
from .enums import TaskPriority, TaskStatus


class Task(SQLModel, table=True):
    """
    Task entity.

    Business Rules:
    - Created only by users with role=assigner
    - Assignee, when set, must have role=assignee
    - Names are denormalized at creation for list rendering
    """

    __tablename__ = "tasks"

    id: Optional[int] = Field(default=None, primary_key=True)
    title: str = Field(max_length=255)
    description: str

    status: TaskStatus = Field(default=TaskStatus.pending)
    priority: TaskPriority = Field(default=TaskPriority.medium)
    due_date: Optional[datetime] = Field(default=None, sa_column=Column(DateTime))

    assigner_id: int = Field(foreign_key="users.id", nullable=False)
    assigner_name: str = Field(max_length=255)
    assignee_id: Optional[int] = Field(default=None, foreign_key="users.id")
    assignee_name: Optional[str] = Field(default=None, max_length=255)

    # Timestamps
    created_at: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime))
    updated_at: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime))

    __table_args__ = (
        Index("idx_tasks_status", "status"),
        Index("idx_tasks_assigner", "assigner_id"),
        Index("idx_tasks_assignee", "assignee_id"),
    )
