"""
User Listing Use Cases

Directory views over the member list: everyone, task assignees, the users
the caller may hand work to, and the featured team.
"""

from libs.result import Error, Result, Return
from src.app.repositories.user_repository import UserFilter
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.auth.dtos import UserInfo
from src.domain.entities import POSITION_RANK, Position, UserRole
from .dtos import UserListResponse


def _response(users) -> Result[UserListResponse]:
    return Return.ok(UserListResponse(users=[UserInfo.from_user(u) for u in users]))


class ListUsersUseCase:
    """All members, oldest account first"""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self) -> Result[UserListResponse]:
        async with self.uow:
            return _response(await self.uow.users.list(UserFilter()))


class ListAssigneesUseCase:
    """Users with role=assignee, by name"""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self) -> Result[UserListResponse]:
        async with self.uow:
            users = await self.uow.users.list(
                UserFilter(role=UserRole.assignee, order_by_name=True)
            )
            return _response(users)


class ListAssignableUsersUseCase:
    """
    Business Rules:
    - Lists users whose position ranks at or below the caller's
    - The caller is never in their own list
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, current_user_id: int) -> Result[UserListResponse]:
        async with self.uow:
            current = await self.uow.users.get_by_id(current_user_id)
            if current is None:
                return Return.err(Error("USER_NOT_FOUND", "User not found"))

            rank = POSITION_RANK[current.position]
            allowed = [position for position, r in POSITION_RANK.items() if r <= rank]
            users = await self.uow.users.list(
                UserFilter(positions=allowed, exclude_id=current.id, order_by_name=True)
            )
            return _response(users)


class ListFeaturedTeamUseCase:
    """Members holding a coordinator or executive position, most senior first"""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self) -> Result[UserListResponse]:
        async with self.uow:
            featured = [p for p in POSITION_RANK if p != Position.member]
            users = await self.uow.users.list(UserFilter(positions=featured, order_by_name=True))
            users.sort(key=lambda u: -POSITION_RANK[u.position])
            return _response(users)
