from libs.result import Error, Result, Return
from src.app.repositories.task_repository import TaskFilter
from src.app.services.unit_of_work import UnitOfWork
from .dtos import TaskInfo, TaskListResponse


class ListTasksUseCase:
    """List tasks, newest first, narrowed by the optional filter"""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, task_filter: TaskFilter) -> Result[TaskListResponse]:
        async with self.uow:
            tasks = await self.uow.tasks.list(task_filter)
            return Return.ok(TaskListResponse(tasks=[TaskInfo.from_task(t) for t in tasks]))


class GetTaskUseCase:
    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, task_id: int) -> Result[TaskInfo]:
        async with self.uow:
            task = await self.uow.tasks.get_by_id(task_id)
            if task is None:
                return Return.err(Error("TASK_NOT_FOUND", "Task not found"))
            return Return.ok(TaskInfo.from_task(task))
