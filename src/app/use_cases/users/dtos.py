from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel

from src.app.use_cases.auth.dtos import UserInfo
from src.domain.entities import Position


class UpdateProfileCommand(BaseModel):
    """Profile changes; None or empty values leave the field untouched"""

    id: int
    name: Optional[str] = None
    email: Optional[str] = None
    position: Optional[Position] = None
    bio: Optional[str] = None
    avatar_url: Optional[str] = None
    github_url: Optional[str] = None
    linkedin_url: Optional[str] = None
    last_notification_read_at: Optional[datetime] = None


class UserListResponse(BaseModel):
    users: List[UserInfo]
