"""
Tasks module exceptions.
"""

from shared.exceptions import (
    AuthorizationError,
    NotFoundError,
    ValidationError,
)

from .models import TASK_STATUS_VALUES


class TaskNotFoundError(NotFoundError):
    """Raised when a task is not found."""

    def __init__(self, task_id: str):
        super().__init__(
            "Task not found",
            code="TASK_NOT_FOUND",
            details={"task_id": task_id},
        )


class TaskAccessDeniedError(AuthorizationError):
    """Raised when a user tries to touch a task they don't own."""

    def __init__(self, task_id: str):
        super().__init__(
            "Access denied",
            code="TASK_ACCESS_DENIED",
            details={"task_id": task_id},
        )


class InvalidTaskStatusError(ValidationError):
    """Raised when a status is not one of the known values."""

    def __init__(self):
        super().__init__(
            "Invalid status value",
            code="INVALID_TASK_STATUS",
            details={
                "status": [f"Status must be one of: {', '.join(TASK_STATUS_VALUES)}"]
            },
        )
