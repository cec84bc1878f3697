from typing import List, Optional

from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from src.app.repositories.project_member_repository import IProjectMemberRepository
from src.domain.entities import ProjectMember


class ProjectMemberRepository(IProjectMemberRepository):
    def __init__(self, session: AsyncSession):
        self.session = session

    async def list_active(self, project_id: int) -> List[ProjectMember]:
        stmt = (
            select(ProjectMember)
            .where(ProjectMember.project_id == project_id, ProjectMember.is_active == True)  # noqa: E712
            .order_by(ProjectMember.joined_at, ProjectMember.id)
        )
        result = await self.session.exec(stmt)
        return list(result.all())

    async def get(self, project_id: int, user_id: int) -> Optional[ProjectMember]:
        stmt = select(ProjectMember).where(
            ProjectMember.project_id == project_id, ProjectMember.user_id == user_id
        )
        result = await self.session.exec(stmt)
        return result.one_or_none()

    async def create(self, member: ProjectMember) -> ProjectMember:
        self.session.add(member)
        await self.session.flush()
        await self.session.refresh(member)
        return member

    async def update(self, member: ProjectMember) -> ProjectMember:
        self.session.add(member)
        await self.session.flush()
        await self.session.refresh(member)
        return member
