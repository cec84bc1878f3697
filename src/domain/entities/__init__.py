"""
Domain Entities

Each entity in its own file.
"""

from .enums import (
    POSITION_RANK,
    PROJECT_MANAGER_POSITIONS,
    Position,
    ProjectCategory,
    ProjectPriority,
    ProjectStatus,
    ProjectUpdateType,
    TaskPriority,
    TaskStatus,
    UserRole,
)
from .user import User
from .password_reset_token import PasswordResetToken
from .task import Task
from .project import Milestone, Project, ProjectMember, ProjectUpdate

__all__ = [
    # Enums
    "UserRole",
    "Position",
    "TaskStatus",
    "TaskPriority",
    "ProjectStatus",
    "ProjectCategory",
    "ProjectPriority",
    "ProjectUpdateType",
    "POSITION_RANK",
    "PROJECT_MANAGER_POSITIONS",
    # Entities
    "User",
    "PasswordResetToken",
    "Task",
    "Project",
    "ProjectMember",
    "Milestone",
    "ProjectUpdate",
]
