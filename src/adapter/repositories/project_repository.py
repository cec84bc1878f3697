from typing import Dict, List, Optional

from sqlalchemy import delete, func, or_
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from src.app.repositories.project_repository import IProjectRepository, ProjectFilter
from src.domain.entities import Milestone, Project, ProjectMember, ProjectStatus, ProjectUpdate


class ProjectRepository(IProjectRepository):
    """Project repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_id(self, project_id: int) -> Optional[Project]:
        stmt = select(Project).where(Project.id == project_id)
        result = await self.session.exec(stmt)
        return result.one_or_none()

    async def list(self, project_filter: ProjectFilter) -> List[Project]:
        stmt = select(Project)
        if project_filter.status is not None:
            stmt = stmt.where(Project.status == project_filter.status)
        if project_filter.category is not None:
            stmt = stmt.where(Project.category == project_filter.category)
        if project_filter.priority is not None:
            stmt = stmt.where(Project.priority == project_filter.priority)
        if project_filter.team_lead_id is not None:
            stmt = stmt.where(Project.team_lead_id == project_filter.team_lead_id)
        if project_filter.featured is not None:
            stmt = stmt.where(Project.is_featured == project_filter.featured)
        if project_filter.search:
            pattern = f"%{project_filter.search}%"
            stmt = stmt.where(
                or_(Project.title.ilike(pattern), Project.description.ilike(pattern))
            )
        stmt = stmt.order_by(Project.updated_at.desc(), Project.id.desc())
        result = await self.session.exec(stmt)
        return list(result.all())

    async def count_by_status(self) -> Dict[ProjectStatus, int]:
        stmt = select(Project.status, func.count()).group_by(Project.status)
        result = await self.session.exec(stmt)
        return {ProjectStatus(status): count for status, count in result.all()}

    async def create(self, project: Project) -> Project:
        self.session.add(project)
        await self.session.flush()
        await self.session.refresh(project)
        return project

    async def update(self, project: Project) -> Project:
        self.session.add(project)
        await self.session.flush()
        await self.session.refresh(project)
        return project

    async def delete(self, project: Project) -> None:
        # Child rows first; SQLite does not enforce ON DELETE CASCADE by default
        for child in (ProjectMember, Milestone, ProjectUpdate):
            await self.session.execute(delete(child).where(child.project_id == project.id))
        await self.session.delete(project)
        await self.session.flush()
