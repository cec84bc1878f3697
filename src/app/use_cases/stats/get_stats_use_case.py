from datetime import datetime

from pydantic import BaseModel

from libs.result import Result, Return
from src.app.services.unit_of_work import UnitOfWork
from src.domain.base import utcnow
from src.domain.entities import ProjectStatus, TaskStatus


class TaskStats(BaseModel):
    pending: int
    in_progress: int
    completed: int
    cancelled: int


class ProjectStats(BaseModel):
    planning: int
    in_progress: int
    completed: int
    on_hold: int


class StatsResponse(BaseModel):
    user_count: int
    task_count: int
    task_stats: TaskStats
    project_count: int
    project_stats: ProjectStats
    timestamp: datetime


class GetStatsUseCase:
    """Headline counts for the landing page"""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self) -> Result[StatsResponse]:
        async with self.uow:
            user_count = await self.uow.users.count()
            tasks = await self.uow.tasks.count_by_status()
            projects = await self.uow.projects.count_by_status()

        return Return.ok(
            StatsResponse(
                user_count=user_count,
                task_count=sum(tasks.values()),
                task_stats=TaskStats(
                    pending=tasks.get(TaskStatus.pending, 0),
                    in_progress=tasks.get(TaskStatus.in_progress, 0),
                    completed=tasks.get(TaskStatus.completed, 0),
                    cancelled=tasks.get(TaskStatus.cancelled, 0),
                ),
                project_count=sum(projects.values()),
                project_stats=ProjectStats(
                    planning=projects.get(ProjectStatus.planning, 0),
                    in_progress=projects.get(ProjectStatus.in_progress, 0),
                    completed=projects.get(ProjectStatus.completed, 0),
                    on_hold=projects.get(ProjectStatus.on_hold, 0),
                ),
                timestamp=utcnow(),
            )
        )
