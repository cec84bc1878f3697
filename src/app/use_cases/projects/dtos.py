"""
Project Use Case DTOs
"""

from datetime import date, datetime
from typing import List, Optional

from pydantic import BaseModel, Field

from src.domain.entities import (
    Milestone,
    Project,
    ProjectCategory,
    ProjectMember,
    ProjectPriority,
    ProjectStatus,
    ProjectUpdate,
    ProjectUpdateType,
    User,
)


# ============================================================================
# Commands
# ============================================================================


class CreateProjectCommand(BaseModel):
    """team_lead_id defaults to the caller"""

    title: str = Field(min_length=3, max_length=100)
    description: str = Field(min_length=10, max_length=2000)
    category: ProjectCategory
    status: ProjectStatus = ProjectStatus.planning
    priority: ProjectPriority = ProjectPriority.medium
    start_date: date
    end_date: Optional[date] = None
    team_lead_id: Optional[int] = None
    technologies: List[str] = Field(default_factory=list)
    tags: List[str] = Field(default_factory=list)
    progress_percentage: int = Field(default=0, ge=0, le=100)
    github_url: Optional[str] = None
    demo_url: Optional[str] = None
    image_url: Optional[str] = None
    is_featured: bool = False


class UpdateProjectCommand(BaseModel):
    """Partial update; None leaves the field untouched"""

    title: Optional[str] = Field(default=None, min_length=3, max_length=100)
    description: Optional[str] = Field(default=None, min_length=10, max_length=2000)
    category: Optional[ProjectCategory] = None
    status: Optional[ProjectStatus] = None
    priority: Optional[ProjectPriority] = None
    start_date: Optional[date] = None
    end_date: Optional[date] = None
    technologies: Optional[List[str]] = None
    tags: Optional[List[str]] = None
    progress_percentage: Optional[int] = Field(default=None, ge=0, le=100)
    github_url: Optional[str] = None
    demo_url: Optional[str] = None
    image_url: Optional[str] = None
    is_featured: Optional[bool] = None


class AddMemberCommand(BaseModel):
    user_id: int
    role: str = Field(default="member", min_length=1, max_length=50)
    contributions: Optional[str] = Field(default=None, max_length=500)


class UpdateMemberCommand(BaseModel):
    role: Optional[str] = Field(default=None, min_length=1, max_length=50)
    contributions: Optional[str] = Field(default=None, max_length=500)
    is_active: Optional[bool] = None


class CreateMilestoneCommand(BaseModel):
    title: str = Field(min_length=1, max_length=100)
    description: Optional[str] = Field(default=None, max_length=500)
    target_date: date
    completed: bool = False


class UpdateMilestoneCommand(BaseModel):
    title: Optional[str] = Field(default=None, min_length=1, max_length=100)
    description: Optional[str] = Field(default=None, max_length=500)
    target_date: Optional[date] = None
    completed: Optional[bool] = None


class PostProjectUpdateCommand(BaseModel):
    title: str = Field(min_length=1, max_length=200)
    description: str = Field(min_length=1, max_length=1000)
    update_type: ProjectUpdateType = ProjectUpdateType.general


# ============================================================================
# Response DTOs
# ============================================================================


class ProjectInfo(BaseModel):
    id: int
    title: str
    description: str
    status: ProjectStatus
    category: ProjectCategory
    priority: ProjectPriority
    start_date: date
    end_date: Optional[date] = None
    team_lead_id: int
    team_lead_name: str
    technologies: List[str]
    tags: List[str]
    progress_percentage: int
    github_url: Optional[str] = None
    demo_url: Optional[str] = None
    image_url: Optional[str] = None
    is_featured: bool
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_project(cls, project: Project) -> "ProjectInfo":
        return cls(
            id=project.id,
            title=project.title,
            description=project.description,
            status=project.status,
            category=project.category,
            priority=project.priority,
            start_date=project.start_date,
            end_date=project.end_date,
            team_lead_id=project.team_lead_id,
            team_lead_name=project.team_lead_name,
            technologies=list(project.technologies or []),
            tags=list(project.tags or []),
            progress_percentage=project.progress_percentage,
            github_url=project.github_url,
            demo_url=project.demo_url,
            image_url=project.image_url,
            is_featured=project.is_featured,
            created_at=project.created_at,
            updated_at=project.updated_at,
        )


class MemberInfo(BaseModel):
    user_id: int
    name: Optional[str] = None
    email: Optional[str] = None
    role: str
    contributions: Optional[str] = None
    is_active: bool
    joined_at: datetime
    left_at: Optional[datetime] = None

    @classmethod
    def from_member(cls, member: ProjectMember, user: Optional[User] = None) -> "MemberInfo":
        return cls(
            user_id=member.user_id,
            name=user.name if user else None,
            email=user.email if user else None,
            role=member.role,
            contributions=member.contributions,
            is_active=member.is_active,
            joined_at=member.joined_at,
            left_at=member.left_at,
        )


class MilestoneInfo(BaseModel):
    id: int
    project_id: int
    title: str
    description: Optional[str] = None
    target_date: date
    completed: bool
    created_by: Optional[int] = None
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_milestone(cls, milestone: Milestone) -> "MilestoneInfo":
        return cls(
            id=milestone.id,
            project_id=milestone.project_id,
            title=milestone.title,
            description=milestone.description,
            target_date=milestone.target_date,
            completed=milestone.completed,
            created_by=milestone.created_by,
            created_at=milestone.created_at,
            updated_at=milestone.updated_at,
        )


class ProjectUpdateInfo(BaseModel):
    id: int
    project_id: int
    user_id: int
    title: str
    description: Optional[str] = None
    update_type: ProjectUpdateType
    created_at: datetime

    @classmethod
    def from_update(cls, update: ProjectUpdate) -> "ProjectUpdateInfo":
        return cls(
            id=update.id,
            project_id=update.project_id,
            user_id=update.user_id,
            title=update.title,
            description=update.description,
            update_type=update.update_type,
            created_at=update.created_at,
        )


class ProjectListResponse(BaseModel):
    projects: List[ProjectInfo]


class ProjectDetail(ProjectInfo):
    """Project with its active roster, milestones and latest updates"""

    members: List[MemberInfo] = Field(default_factory=list)
    milestones: List[MilestoneInfo] = Field(default_factory=list)
    updates: List[ProjectUpdateInfo] = Field(default_factory=list)


class MemberListResponse(BaseModel):
    members: List[MemberInfo]


class MilestoneListResponse(BaseModel):
    milestones: List[MilestoneInfo]


class ProjectUpdateListResponse(BaseModel):
    updates: List[ProjectUpdateInfo]
