"""
Domain Enums

All enumeration types used across domain entities.
"""

from enum import Enum


class UserRole(str, Enum):
    """Task-workflow role of a user"""

    assigner = "assigner"
    assignee = "assignee"


class Position(str, Enum):
    """Club position shown on the member profile"""

    overall_coordinator = "overall-coordinator"
    head_coordinator = "head-coordinator"
    core_coordinator = "core-coordinator"
    executive = "executive"
    member = "member"


class TaskStatus(str, Enum):
    pending = "pending"
    in_progress = "in-progress"
    completed = "completed"
    cancelled = "cancelled"


class TaskPriority(str, Enum):
    low = "low"
    medium = "medium"
    high = "high"
    urgent = "urgent"


class ProjectStatus(str, Enum):
    planning = "planning"
    in_progress = "in-progress"
    completed = "completed"
    on_hold = "on-hold"


class ProjectCategory(str, Enum):
    robotics = "robotics"
    ai_ml = "ai-ml"
    iot = "iot"
    automation = "automation"
    research = "research"
    competition = "competition"
    web = "web"


class ProjectPriority(str, Enum):
    low = "low"
    medium = "medium"
    high = "high"


class ProjectUpdateType(str, Enum):
    general = "general"
    milestone = "milestone"
    issue = "issue"
    achievement = "achievement"


# Seniority used for assignment and team listings; higher outranks lower
POSITION_RANK = {
    Position.head_coordinator: 4,
    Position.overall_coordinator: 3,
    Position.core_coordinator: 2,
    Position.executive: 1,
    Position.member: 0,
}

# Positions allowed to create projects and manage any project
PROJECT_MANAGER_POSITIONS = frozenset(
    {Position.head_coordinator, Position.overall_coordinator}
)
