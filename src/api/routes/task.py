from typing import Optional

from fastapi import APIRouter, Depends, Query, status

from src.api.error import raise_for_error
from src.app.repositories.task_repository import TaskFilter
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.tasks import (
    CreateTaskCommand,
    CreateTaskUseCase,
    DeleteTaskUseCase,
    GetTaskUseCase,
    ListTasksUseCase,
    TaskInfo,
    TaskListResponse,
    UpdateTaskCommand,
    UpdateTaskUseCase,
)
from src.depends import get_current_user, get_unit_of_work
from src.domain.entities import TaskPriority, TaskStatus

router = APIRouter(prefix="/tasks", tags=["Tasks"])


@router.post("", status_code=status.HTTP_201_CREATED, response_model=TaskInfo)
async def create_task(
    request: CreateTaskCommand,
    current_user: dict = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Create a task. Assigners only.

    Raises:
        - 400 Bad Request: Missing title or description
        - 403 Forbidden: Caller is not an assigner
        - 404 Not Found: Assignee not found
    """
    use_case = CreateTaskUseCase(uow)
    result = await use_case.execute(int(current_user["user_id"]), request)

    if result.is_err():
        raise_for_error(result.error)

    return result.value


@router.get("", status_code=status.HTTP_200_OK, response_model=TaskListResponse)
async def list_tasks(
    status_filter: Optional[TaskStatus] = Query(None, alias="status"),
    priority: Optional[TaskPriority] = Query(None),
    assignee_id: Optional[int] = Query(None),
    assigner_id: Optional[int] = Query(None),
    search: Optional[str] = Query(None),
    current_user: dict = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """List tasks, newest first"""
    task_filter = TaskFilter(
        status=status_filter,
        priority=priority,
        assignee_id=assignee_id,
        assigner_id=assigner_id,
        search=search,
    )
    use_case = ListTasksUseCase(uow)
    result = await use_case.execute(task_filter)

    if result.is_err():
        raise_for_error(result.error)

    return result.value


@router.get("/{task_id}", status_code=status.HTTP_200_OK, response_model=TaskInfo)
async def get_task(
    task_id: int,
    current_user: dict = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    use_case = GetTaskUseCase(uow)
    result = await use_case.execute(task_id)

    if result.is_err():
        raise_for_error(result.error)

    return result.value


@router.patch("/{task_id}", status_code=status.HTTP_200_OK, response_model=TaskInfo)
async def update_task(
    task_id: int,
    request: UpdateTaskCommand,
    current_user: dict = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Update a task.

    Raises:
        - 403 Forbidden: Caller is neither the assigner nor (for status) the assignee
        - 404 Not Found: Task or new assignee not found
    """
    use_case = UpdateTaskUseCase(uow)
    result = await use_case.execute(int(current_user["user_id"]), task_id, request)

    if result.is_err():
        raise_for_error(result.error)

    return result.value


@router.delete("/{task_id}", status_code=status.HTTP_200_OK)
async def delete_task(
    task_id: int,
    current_user: dict = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    use_case = DeleteTaskUseCase(uow)
    result = await use_case.execute(int(current_user["user_id"]), task_id)

    if result.is_err():
        raise_for_error(result.error)

    return {"ok": True}
