"""
Project Use Cases

Projects, their member roster, milestones and progress updates.
"""

from .create_project_use_case import CreateProjectUseCase
from .list_projects_use_case import GetProjectUseCase, ListProjectsUseCase
from .update_project_use_case import DeleteProjectUseCase, UpdateProjectUseCase
from .project_member_use_cases import (
    AddProjectMemberUseCase,
    ListProjectMembersUseCase,
    RemoveProjectMemberUseCase,
    UpdateProjectMemberUseCase,
)
from .milestone_use_cases import (
    CreateMilestoneUseCase,
    DeleteMilestoneUseCase,
    GetMilestoneUseCase,
    ListMilestonesUseCase,
    UpdateMilestoneUseCase,
)
from .project_update_use_cases import ListProjectUpdatesUseCase, PostProjectUpdateUseCase
from .dtos import (
    AddMemberCommand,
    CreateMilestoneCommand,
    CreateProjectCommand,
    MemberInfo,
    MemberListResponse,
    MilestoneInfo,
    MilestoneListResponse,
    PostProjectUpdateCommand,
    ProjectDetail,
    ProjectInfo,
    ProjectListResponse,
    ProjectUpdateInfo,
    ProjectUpdateListResponse,
    UpdateMemberCommand,
    UpdateMilestoneCommand,
    UpdateProjectCommand,
)

__all__ = [
    "CreateProjectUseCase",
    "ListProjectsUseCase",
    "GetProjectUseCase",
    "UpdateProjectUseCase",
    "DeleteProjectUseCase",
    "ListProjectMembersUseCase",
    "AddProjectMemberUseCase",
    "UpdateProjectMemberUseCase",
    "RemoveProjectMemberUseCase",
    "ListMilestonesUseCase",
    "GetMilestoneUseCase",
    "CreateMilestoneUseCase",
    "UpdateMilestoneUseCase",
    "DeleteMilestoneUseCase",
    "ListProjectUpdatesUseCase",
    "PostProjectUpdateUseCase",
    "CreateProjectCommand",
    "UpdateProjectCommand",
    "AddMemberCommand",
    "UpdateMemberCommand",
    "CreateMilestoneCommand",
    "UpdateMilestoneCommand",
    "PostProjectUpdateCommand",
    "ProjectInfo",
    "ProjectDetail",
    "ProjectListResponse",
    "MemberInfo",
    "MemberListResponse",
    "MilestoneInfo",
    "MilestoneListResponse",
    "ProjectUpdateInfo",
    "ProjectUpdateListResponse",
]
