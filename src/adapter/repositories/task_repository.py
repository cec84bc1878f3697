from typing import Dict, List, Optional

from sqlalchemy import func, or_
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from src.app.repositories.task_repository import ITaskRepository, TaskFilter
from src.domain.entities import Task, TaskStatus


class TaskRepository(ITaskRepository):
    """Task repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_id(self, task_id: int) -> Optional[Task]:
        stmt = select(Task).where(Task.id == task_id)
        result = await self.session.exec(stmt)
        return result.one_or_none()

    async def list(self, task_filter: TaskFilter) -> List[Task]:
        stmt = select(Task)
        if task_filter.status is not None:
            stmt = stmt.where(Task.status == task_filter.status)
        if task_filter.priority is not None:
            stmt = stmt.where(Task.priority == task_filter.priority)
        if task_filter.assignee_id is not None:
            stmt = stmt.where(Task.assignee_id == task_filter.assignee_id)
        if task_filter.assigner_id is not None:
            stmt = stmt.where(Task.assigner_id == task_filter.assigner_id)
        if task_filter.involving_user_id is not None:
            stmt = stmt.where(
                or_(
                    Task.assignee_id == task_filter.involving_user_id,
                    Task.assigner_id == task_filter.involving_user_id,
                )
            )
        if task_filter.search:
            pattern = f"%{task_filter.search}%"
            stmt = stmt.where(or_(Task.title.ilike(pattern), Task.description.ilike(pattern)))
        stmt = stmt.order_by(Task.created_at.desc(), Task.id.desc())
        if task_filter.limit is not None:
            stmt = stmt.limit(task_filter.limit)
        result = await self.session.exec(stmt)
        return list(result.all())

    async def count_by_status(self) -> Dict[TaskStatus, int]:
        stmt = select(Task.status, func.count()).group_by(Task.status)
        result = await self.session.exec(stmt)
        return {TaskStatus(status): count for status, count in result.all()}

    async def create(self, task: Task) -> Task:
        self.session.add(task)
        await self.session.flush()
        await self.session.refresh(task)
        return task

    async def update(self, task: Task) -> Task:
        self.session.add(task)
        await self.session.flush()
        await self.session.refresh(task)
        return task

    async def delete(self, task: Task) -> None:
        await self.session.delete(task)
        await self.session.flush()
