from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Collection, List, Optional

from src.domain.entities import Position, User, UserRole


@dataclass
class UserFilter:
    role: Optional[UserRole] = None
    positions: Optional[Collection[Position]] = None
    ids: Optional[Collection[int]] = None
    exclude_id: Optional[int] = None
    order_by_name: bool = False


class IUserRepository(ABC):
    """User repository interface - application layer"""

    @abstractmethod
    async def find_by_email_insensitive(self, email: str) -> Optional[User]:
        """Get user by email address, ignoring case"""
        pass

    @abstractmethod
    async def get_by_id(self, user_id: int) -> Optional[User]:
        """Get user by ID"""
        pass

    @abstractmethod
    async def list(self, user_filter: UserFilter) -> List[User]:
        """List users matching the filter, oldest account first unless ordered by name"""
        pass

    @abstractmethod
    async def count(self) -> int:
        pass

    @abstractmethod
    async def create(self, user: User) -> User:
        """Create a new user"""
        pass

    @abstractmethod
    async def update(self, user: User) -> User:
        """Update existing user"""
        pass
