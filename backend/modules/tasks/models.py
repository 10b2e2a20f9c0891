"""
Tasks module data models.
"""

from datetime import datetime
from enum import Enum
from typing import Optional
from pydantic import BaseModel, Field


class TaskStatus(str, Enum):
    """Task lifecycle status."""

    ACTIVE = "active"        # Default for new tasks
    COMPLETED = "completed"
    ARCHIVED = "archived"


TASK_STATUS_VALUES = [s.value for s in TaskStatus]


class Task(BaseModel):
    """A stored task. ``user_id`` is the owner and never changes."""

    id: str = Field(..., description="Task ID (UUID)")
    user_id: str = Field(..., description="Owning user ID")
    title: str = Field(..., min_length=1)
    description: Optional[str] = None
    status: TaskStatus = TaskStatus.ACTIVE
    created_at: datetime
    updated_at: datetime


class CreateTaskRequest(BaseModel):
    """
    Request to create a task.

    ``status`` is a plain string so an unknown value can be reported
    with the task-specific error message.
    """

    title: Optional[str] = Field(None, description="Task title")
    description: Optional[str] = Field(None, description="Optional details")
    status: Optional[str] = Field(None, description="active, completed or archived")


class UpdateTaskRequest(BaseModel):
    """
    Request to change a task.

    Only fields present in the body are applied. An explicit null
    description clears it; null title or status is ignored.
    """

    title: Optional[str] = None
    description: Optional[str] = None
    status: Optional[str] = None


class TaskResponse(BaseModel):
    """Response wrapping a single task."""

    task: Task


class TaskListResponse(BaseModel):
    """A user's tasks, newest first."""

    tasks: list[Task]


class DeleteTaskResponse(BaseModel):
    """Acknowledgement of a deletion."""

    success: bool = True
