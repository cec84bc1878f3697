"""
Project Entities

Club projects with their member roster, milestones and progress updates.
"""

from datetime import date, datetime
from typing import List, Optional

from sqlmodel import JSON, Column, Date, DateTime, Field, Index, SQLModel, UniqueConstraint

from src.domain.base import utcnow
from .enums import ProjectCategory, ProjectPriority, ProjectStatus, ProjectUpdateType


class Project(SQLModel, table=True):
    """
    Project entity.

    Business Rules:
    - Managed by its team lead or by a head/overall coordinator
    - Team lead name is denormalized at creation for list rendering
    - end_date, when set, falls after start_date
    """

    __tablename__ = "projects"

    id: Optional[int] = Field(default=None, primary_key=True)
    title: str = Field(max_length=100)
    description: str

    status: ProjectStatus = Field(default=ProjectStatus.planning)
    category: ProjectCategory
    priority: ProjectPriority = Field(default=ProjectPriority.medium)

    start_date: date = Field(sa_column=Column(Date, nullable=False))
    end_date: Optional[date] = Field(default=None, sa_column=Column(Date))

    team_lead_id: int = Field(foreign_key="users.id", nullable=False)
    team_lead_name: str = Field(max_length=255)

    technologies: List[str] = Field(default_factory=list, sa_column=Column(JSON))
    tags: List[str] = Field(default_factory=list, sa_column=Column(JSON))
    progress_percentage: int = Field(default=0)

    github_url: Optional[str] = Field(default=None, max_length=2048)
    demo_url: Optional[str] = Field(default=None, max_length=2048)
    image_url: Optional[str] = Field(default=None, max_length=2048)
    is_featured: bool = Field(default=False)

    # Timestamps
    created_at: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime))
    updated_at: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime))

    __table_args__ = (
        Index("idx_projects_status", "status"),
        Index("idx_projects_category", "category"),
        Index("idx_projects_team_lead", "team_lead_id"),
    )


class ProjectMember(SQLModel, table=True):
    """
    Membership of a user in a project.

    Business Rules:
    - One row per (project, user); leaving deactivates the row and stamps left_at
    - Rejoining reactivates the same row
    """

    __tablename__ = "project_members"

    id: Optional[int] = Field(default=None, primary_key=True)
    project_id: int = Field(foreign_key="projects.id", nullable=False)
    user_id: int = Field(foreign_key="users.id", nullable=False)
    role: str = Field(default="member", max_length=50)
    contributions: Optional[str] = Field(default=None, max_length=500)
    is_active: bool = Field(default=True)

    joined_at: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime))
    left_at: Optional[datetime] = Field(default=None, sa_column=Column(DateTime))
    created_at: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime))
    updated_at: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime))

    __table_args__ = (
        UniqueConstraint("project_id", "user_id", name="uq_project_members_project_user"),
        Index("idx_project_members_user", "user_id"),
    )


class Milestone(SQLModel, table=True):
    __tablename__ = "milestones"

    id: Optional[int] = Field(default=None, primary_key=True)
    project_id: int = Field(foreign_key="projects.id", nullable=False)
    title: str = Field(max_length=100)
    description: Optional[str] = Field(default=None, max_length=500)
    target_date: date = Field(sa_column=Column(Date, nullable=False))
    completed: bool = Field(default=False)
    created_by: Optional[int] = Field(default=None, foreign_key="users.id")

    created_at: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime))
    updated_at: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime))

    __table_args__ = (
        Index("idx_milestones_project", "project_id"),
        Index("idx_milestones_target_date", "target_date"),
    )


class ProjectUpdate(SQLModel, table=True):
    """Progress note posted to a project's feed"""

    __tablename__ = "project_updates"

    id: Optional[int] = Field(default=None, primary_key=True)
    project_id: int = Field(foreign_key="projects.id", nullable=False)
    user_id: int = Field(foreign_key="users.id", nullable=False)
    title: str = Field(max_length=200)
    description: Optional[str] = None
    update_type: ProjectUpdateType = Field(default=ProjectUpdateType.general)

    created_at: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime))
    updated_at: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime))

    __table_args__ = (Index("idx_project_updates_project", "project_id"),)
