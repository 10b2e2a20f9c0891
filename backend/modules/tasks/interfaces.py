"""
Tasks module interfaces.

The API layer depends on ITaskService for all task operations.
"""

from typing import Protocol, Optional, Any, Mapping, runtime_checkable

from .models import CreateTaskRequest, Task, TaskStatus, UpdateTaskRequest


@runtime_checkable
class ITaskRepository(Protocol):
    """Record store primitives for tasks."""

    def create(
        self,
        user_id: str,
        title: str,
        description: Optional[str] = None,
        status: TaskStatus = TaskStatus.ACTIVE,
    ) -> Task:
        ...

    def list_by_user(self, user_id: str) -> list[Task]:
        ...

    def find_by_id(self, task_id: str) -> Optional[Task]:
        ...

    def update(self, task_id: str, changes: Mapping[str, Any]) -> Optional[Task]:
        ...

    def delete(self, task_id: str) -> bool:
        ...


@runtime_checkable
class ITaskService(Protocol):
    """
    Interface for task operations.

    Every method takes the authenticated user's ID. Operations on a
    single task check existence first, then ownership.
    """

    async def list_tasks(
        self,
        user_id: str,
        search: Optional[str] = None,
        status: Optional[TaskStatus] = None,
    ) -> list[Task]:
        """
        List a user's tasks, newest first.

        Args:
            user_id: Owner
            search: Case-insensitive substring of title or description
            status: Only tasks with this status
        """
        ...

    async def create_task(self, user_id: str, request: CreateTaskRequest) -> Task:
        """
        Create a task owned by the user.

        Raises:
            ValidationError: If the title is missing
            InvalidTaskStatusError: If the status is unknown
        """
        ...

    async def get_task(self, task_id: str, user_id: str) -> Task:
        """
        Raises:
            TaskNotFoundError: If the task doesn't exist
            TaskAccessDeniedError: If the user doesn't own it
        """
        ...

    async def update_task(
        self,
        task_id: str,
        user_id: str,
        request: UpdateTaskRequest,
    ) -> Task:
        """
        Raises:
            TaskNotFoundError: If the task doesn't exist
            TaskAccessDeniedError: If the user doesn't own it
            ValidationError: If a supplied field is invalid
        """
        ...

    async def delete_task(self, task_id: str, user_id: str) -> bool:
        """
        Raises:
            TaskNotFoundError: If the task doesn't exist
            TaskAccessDeniedError: If the user doesn't own it
        """
        ...
