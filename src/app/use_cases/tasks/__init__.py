"""
Task Use Cases
"""

from .create_task_use_case import CreateTaskUseCase
from .list_tasks_use_case import GetTaskUseCase, ListTasksUseCase
from .update_task_use_case import UpdateTaskUseCase
from .delete_task_use_case import DeleteTaskUseCase
from .dtos import CreateTaskCommand, TaskInfo, TaskListResponse, UpdateTaskCommand

__all__ = [
    "CreateTaskUseCase",
    "ListTasksUseCase",
    "GetTaskUseCase",
    "UpdateTaskUseCase",
    "DeleteTaskUseCase",
    "CreateTaskCommand",
    "UpdateTaskCommand",
    "TaskInfo",
    "TaskListResponse",
]
