"""
Use Cases

Organized into domain folders:
- auth/: Registration, login and password reset
- users/: Profile management and member listings
- tasks/: Task assignment
- projects/: Projects, members, milestones and updates
- notifications/: Task-derived notifications
- stats/: Landing page counts
- contact/: Public contact form
"""

from .auth import (
    RegisterUseCase,
    LoginUseCase,
    RequestPasswordResetUseCase,
    ResendPasswordResetUseCase,
    RedeemPasswordResetUseCase,
)
from .users import (
    GetProfileUseCase,
    UpdateProfileUseCase,
    ListUsersUseCase,
    ListAssigneesUseCase,
    ListAssignableUsersUseCase,
    ListFeaturedTeamUseCase,
)
from .tasks import (
    CreateTaskUseCase,
    ListTasksUseCase,
    GetTaskUseCase,
    UpdateTaskUseCase,
    DeleteTaskUseCase,
)
from .projects import (
    CreateProjectUseCase,
    ListProjectsUseCase,
    GetProjectUseCase,
    UpdateProjectUseCase,
    DeleteProjectUseCase,
    ListProjectMembersUseCase,
    AddProjectMemberUseCase,
    UpdateProjectMemberUseCase,
    RemoveProjectMemberUseCase,
    ListMilestonesUseCase,
    GetMilestoneUseCase,
    CreateMilestoneUseCase,
    UpdateMilestoneUseCase,
    DeleteMilestoneUseCase,
    ListProjectUpdatesUseCase,
    PostProjectUpdateUseCase,
)
from .notifications import ListNotificationsUseCase, MarkNotificationsReadUseCase
from .stats import GetStatsUseCase
from .contact import SubmitContactMessageUseCase

__all__ = [
    # Auth
    "RegisterUseCase",
    "LoginUseCase",
    "RequestPasswordResetUseCase",
    "ResendPasswordResetUseCase",
    "RedeemPasswordResetUseCase",
    # Users
    "GetProfileUseCase",
    "UpdateProfileUseCase",
    "ListUsersUseCase",
    "ListAssigneesUseCase",
    "ListAssignableUsersUseCase",
    "ListFeaturedTeamUseCase",
    # Tasks
    "CreateTaskUseCase",
    "ListTasksUseCase",
    "GetTaskUseCase",
    "UpdateTaskUseCase",
    "DeleteTaskUseCase",
    # Projects
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
    # Notifications
    "ListNotificationsUseCase",
    "MarkNotificationsReadUseCase",
    # Stats
    "GetStatsUseCase",
    # Contact
    "SubmitContactMessageUseCase",
]
