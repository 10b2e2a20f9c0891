"""
Tasks service implementation.

Per-user task CRUD. Single-task operations go through the ownership
gate: the task must exist (404), then belong to the caller (403).
"""

import logging
from typing import Optional, Any

from modules.auth.ownership import is_owner
from shared.exceptions import ServerError, ValidationError
from shared.validation import is_blank, validate_required_fields

from .exceptions import InvalidTaskStatusError, TaskAccessDeniedError, TaskNotFoundError
from .interfaces import ITaskRepository, ITaskService
from .models import CreateTaskRequest, Task, TaskStatus, UpdateTaskRequest

logger = logging.getLogger(__name__)


def parse_status(value: Optional[str]) -> Optional[TaskStatus]:
    """Map a raw status to TaskStatus; None passes through."""
    if value is None:
        return None
    try:
        return TaskStatus(value)
    except ValueError:
        raise InvalidTaskStatusError() from None


def matches_search(task: Task, search: str) -> bool:
    needle = search.lower()
    if needle in task.title.lower():
        return True
    return bool(task.description) and needle in task.description.lower()


class TaskService(ITaskService):
    """Task service on top of a task repository."""

    def __init__(self, tasks: ITaskRepository):
        self._tasks = tasks

    async def list_tasks(
        self,
        user_id: str,
        search: Optional[str] = None,
        status: Optional[TaskStatus] = None,
    ) -> list[Task]:
        tasks = self._tasks.list_by_user(user_id)
        if search:
            tasks = [t for t in tasks if matches_search(t, search)]
        if status is not None:
            tasks = [t for t in tasks if t.status == status]
        return tasks

    async def create_task(self, user_id: str, request: CreateTaskRequest) -> Task:
        validate_required_fields(request.model_dump(), ["title"]).raise_for_errors()
        status = parse_status(request.status) or TaskStatus.ACTIVE

        task = self._tasks.create(
            user_id=user_id,
            title=request.title,
            description=request.description,
            status=status,
        )
        logger.info("User %s created task %s", user_id, task.id)
        return task

    async def get_task(self, task_id: str, user_id: str) -> Task:
        return self._get_owned_task(task_id, user_id)

    async def update_task(
        self,
        task_id: str,
        user_id: str,
        request: UpdateTaskRequest,
    ) -> Task:
        self._get_owned_task(task_id, user_id)

        provided = request.model_fields_set
        changes: dict[str, Any] = {}

        if "title" in provided and request.title is not None:
            if is_blank(request.title):
                raise ValidationError(
                    "Validation failed",
                    details={"title": ["Title cannot be empty"]},
                )
            changes["title"] = request.title

        if "description" in provided:
            changes["description"] = request.description

        if "status" in provided and request.status is not None:
            changes["status"] = parse_status(request.status)

        updated = self._tasks.update(task_id, changes)
        if updated is None:
            raise ServerError("Failed to update task")

        logger.info("User %s updated task %s", user_id, task_id)
        return updated

    async def delete_task(self, task_id: str, user_id: str) -> bool:
        self._get_owned_task(task_id, user_id)

        if not self._tasks.delete(task_id):
            raise ServerError("Failed to delete task")

        logger.info("User %s deleted task %s", user_id, task_id)
        return True

    def _get_owned_task(self, task_id: str, user_id: str) -> Task:
        task = self._tasks.find_by_id(task_id)
        if task is None:
            raise TaskNotFoundError(task_id)
        if not is_owner(task.user_id, user_id):
            raise TaskAccessDeniedError(task_id)
        return task
