"""
Tasks module.

Per-user task CRUD with ownership checks.

Public API:
- ITaskService / ITaskRepository: Interfaces
- Task, TaskStatus: Data models
- Task exceptions: TaskNotFoundError, TaskAccessDeniedError, InvalidTaskStatusError
"""

from .interfaces import ITaskRepository, ITaskService
from .models import (
    Task,
    TaskStatus,
    CreateTaskRequest,
    UpdateTaskRequest,
    TaskResponse,
    TaskListResponse,
    DeleteTaskResponse,
)
from .exceptions import TaskNotFoundError, TaskAccessDeniedError, InvalidTaskStatusError

__all__ = [
    # Interfaces
    "ITaskRepository",
    "ITaskService",
    # Models
    "Task",
    "TaskStatus",
    "CreateTaskRequest",
    "UpdateTaskRequest",
    "TaskResponse",
    "TaskListResponse",
    "DeleteTaskResponse",
    # Exceptions
    "TaskNotFoundError",
    "TaskAccessDeniedError",
    "InvalidTaskStatusError",
]
