"""
User Management Use Cases

Profile reads and updates, and the member directory listings.
"""

from .get_profile_use_case import GetProfileUseCase
from .update_profile_use_case import UpdateProfileUseCase
from .list_users_use_case import (
    ListAssignableUsersUseCase,
    ListAssigneesUseCase,
    ListFeaturedTeamUseCase,
    ListUsersUseCase,
)
from .dtos import UpdateProfileCommand, UserListResponse

__all__ = [
    "GetProfileUseCase",
    "UpdateProfileUseCase",
    "ListUsersUseCase",
    "ListAssigneesUseCase",
    "ListAssignableUsersUseCase",
    "ListFeaturedTeamUseCase",
    "UpdateProfileCommand",
    "UserListResponse",
]
