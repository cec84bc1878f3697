from typing import List, Optional

from sqlalchemy import func
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from src.app.repositories.user_repository import IUserRepository, UserFilter
from src.domain.entities import User


class UserRepository(IUserRepository):
    """User repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def find_by_email_insensitive(self, email: str) -> Optional[User]:
        """Get user by email address, ignoring case"""
        stmt = (
            select(User)
            .where(func.lower(User.email) == email.strip().lower())
            .order_by(User.id)
            .limit(1)
        )
        result = await self.session.exec(stmt)
        return result.first()

    async def get_by_id(self, user_id: int) -> Optional[User]:
        """Get user by ID"""
        stmt = select(User).where(User.id == user_id)
        result = await self.session.exec(stmt)
        return result.one_or_none()

    async def list(self, user_filter: UserFilter) -> List[User]:
        stmt = select(User)
        if user_filter.role is not None:
            stmt = stmt.where(User.role == user_filter.role)
        if user_filter.positions is not None:
            stmt = stmt.where(User.position.in_(list(user_filter.positions)))
        if user_filter.ids is not None:
            stmt = stmt.where(User.id.in_(list(user_filter.ids)))
        if user_filter.exclude_id is not None:
            stmt = stmt.where(User.id != user_filter.exclude_id)
        if user_filter.order_by_name:
            stmt = stmt.order_by(User.name, User.id)
        else:
            stmt = stmt.order_by(User.created_at, User.id)
        result = await self.session.exec(stmt)
        return list(result.all())

    async def count(self) -> int:
        result = await self.session.exec(select(func.count()).select_from(User))
        return result.one()

    async def create(self, user: User) -> User:
        """Create a new user"""
        self.session.add(user)
        await self.session.flush()
        await self.session.refresh(user)
        return user

    async def update(self, user: User) -> User:
        """Update existing user"""
        self.session.add(user)
        await self.session.flush()
        await self.session.refresh(user)
        return user
