"""
Task API endpoints.

Provides REST endpoints for the authenticated user's tasks.
"""

from typing import Optional

from fastapi import APIRouter, Depends, Query

from api.dependencies import get_task_service
from api.errors import guard_operation
from api.middleware.auth import get_current_user
from shared.models import AuthenticatedUser

from .interfaces import ITaskService
from .models import (
    CreateTaskRequest,
    DeleteTaskResponse,
    TaskListResponse,
    TaskResponse,
    UpdateTaskRequest,
)
from .service import parse_status

router = APIRouter()


@router.get("", response_model=TaskListResponse)
async def list_tasks(
    search: Optional[str] = Query(default=None, description="Match title or description"),
    status: Optional[str] = Query(default=None, description="Filter by status"),
    user: AuthenticatedUser = Depends(get_current_user),
    service: ITaskService = Depends(get_task_service),
) -> TaskListResponse:
    """
    List the current user's tasks.

    Most recent first. ``search`` is case-insensitive.
    """
    with guard_operation("An error occurred while fetching tasks"):
        tasks = await service.list_tasks(
            user.user_id, search=search, status=parse_status(status or None)
        )
        return TaskListResponse(tasks=tasks)


@router.post("", response_model=TaskResponse, status_code=201)
async def create_task(
    request: CreateTaskRequest,
    user: AuthenticatedUser = Depends(get_current_user),
    service: ITaskService = Depends(get_task_service),
) -> TaskResponse:
    """
    Create a new task.

    Status defaults to 'active'.
    """
    with guard_operation("An error occurred while creating task"):
        return TaskResponse(task=await service.create_task(user.user_id, request))


@router.get("/{task_id}", response_model=TaskResponse)
async def get_task(
    task_id: str,
    user: AuthenticatedUser = Depends(get_current_user),
    service: ITaskService = Depends(get_task_service),
) -> TaskResponse:
    """Get a specific task."""
    with guard_operation("An error occurred while fetching task"):
        return TaskResponse(task=await service.get_task(task_id, user.user_id))


@router.put("/{task_id}", response_model=TaskResponse)
async def update_task(
    task_id: str,
    request: UpdateTaskRequest,
    user: AuthenticatedUser = Depends(get_current_user),
    service: ITaskService = Depends(get_task_service),
) -> TaskResponse:
    """Update a task's title, description or status."""
    with guard_operation("An error occurred while updating task"):
        task = await service.update_task(task_id, user.user_id, request)
        return TaskResponse(task=task)


@router.delete("/{task_id}", response_model=DeleteTaskResponse)
async def delete_task(
    task_id: str,
    user: AuthenticatedUser = Depends(get_current_user),
    service: ITaskService = Depends(get_task_service),
) -> DeleteTaskResponse:
    """Delete a task."""
    with guard_operation("An error occurred while deleting task"):
        await service.delete_task(task_id, user.user_id)
        return DeleteTaskResponse(success=True)
