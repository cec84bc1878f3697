from typing import List, Optional

from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from src.app.repositories.milestone_repository import IMilestoneRepository
from src.domain.entities import Milestone


class MilestoneRepository(IMilestoneRepository):
    def __init__(self, session: AsyncSession):
        self.session = session

    async def list_for_project(self, project_id: int) -> List[Milestone]:
        stmt = (
            select(Milestone)
            .where(Milestone.project_id == project_id)
            .order_by(Milestone.target_date, Milestone.created_at, Milestone.id)
        )
        result = await self.session.exec(stmt)
        return list(result.all())

    async def get(self, project_id: int, milestone_id: int) -> Optional[Milestone]:
        stmt = select(Milestone).where(
            Milestone.id == milestone_id, Milestone.project_id == project_id
        )
        result = await self.session.exec(stmt)
        return result.one_or_none()

    async def create(self, milestone: Milestone) -> Milestone:
        self.session.add(milestone)
        await self.session.flush()
        await self.session.refresh(milestone)
        return milestone

    async def update(self, milestone: Milestone) -> Milestone:
        self.session.add(milestone)
        await self.session.flush()
        await self.session.refresh(milestone)
        return milestone

    async def delete(self, milestone: Milestone) -> None:
        await self.session.delete(milestone)
        await self.session.flush()
