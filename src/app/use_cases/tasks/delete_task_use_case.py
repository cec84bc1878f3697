import logging

from libs.result import Error, Result, Return
from src.app.services.unit_of_work import UnitOfWork

logger = logging.getLogger(__name__)


class DeleteTaskUseCase:
    """Only the assigner who created a task may delete it"""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, current_user_id: int, task_id: int) -> Result[None]:
        async with self.uow:
            task = await self.uow.tasks.get_by_id(task_id)
            if task is None:
                return Return.err(Error("TASK_NOT_FOUND", "Task not found"))
            if task.assigner_id != current_user_id:
                return Return.err(
                    Error("FORBIDDEN", "Only the task's assigner can delete it")
                )

            await self.uow.tasks.delete(task)
            await self.uow.commit()

            logger.info(f"User {current_user_id} deleted task {task_id}")
            return Return.ok(None)
