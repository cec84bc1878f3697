from typing import List

from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from src.app.repositories.project_update_repository import IProjectUpdateRepository
from src.domain.entities import ProjectUpdate


class ProjectUpdateRepository(IProjectUpdateRepository):
    def __init__(self, session: AsyncSession):
        self.session = session

    async def list_recent(self, project_id: int, limit: int = 10) -> List[ProjectUpdate]:
        stmt = (
            select(ProjectUpdate)
            .where(ProjectUpdate.project_id == project_id)
            .order_by(ProjectUpdate.created_at.desc(), ProjectUpdate.id.desc())
            .limit(limit)
        )
        result = await self.session.exec(stmt)
        return list(result.all())

    async def create(self, update: ProjectUpdate) -> ProjectUpdate:
        self.session.add(update)
        await self.session.flush()
        await self.session.refresh(update)
        return update
