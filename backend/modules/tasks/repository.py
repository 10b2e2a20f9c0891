"""
Task repository for record store access.

Encapsulates all reads and writes of the ``tasks`` collection.
"""

import uuid
from typing import Optional, Any, Mapping

from shared.repository import BaseRepository, utc_now
from .models import Task, TaskStatus

COLLECTION = "tasks"

UPDATABLE_FIELDS = ("title", "description", "status")


class TaskRepository(BaseRepository[Task]):
    """
    Repository for task data access.

    Note: This repository does NOT perform authorization checks.
    The service layer is responsible for verifying user ownership.
    """

    def create(
        self,
        user_id: str,
        title: str,
        description: Optional[str] = None,
        status: TaskStatus = TaskStatus.ACTIVE,
    ) -> Task:
        now = utc_now()
        task = Task(
            id=str(uuid.uuid4()),
            user_id=user_id,
            title=title,
            description=description or None,
            status=status,
            created_at=now,
            updated_at=now,
        )
        self._db.collection(COLLECTION).append(task.model_dump(mode="json"))
        self._db.save()
        return task

    def list_by_user(self, user_id: str) -> list[Task]:
        """All tasks owned by a user, most recently created first."""
        owned = [
            (index, Task.model_validate(row))
            for index, row in enumerate(self._db.collection(COLLECTION))
            if row["user_id"] == user_id
        ]
        owned.sort(key=lambda item: (item[1].created_at, item[0]), reverse=True)
        return [task for _, task in owned]

    def find_by_id(self, task_id: str) -> Optional[Task]:
        row = self._find_row(task_id)
        return Task.model_validate(row) if row is not None else None

    def update(self, task_id: str, changes: Mapping[str, Any]) -> Optional[Task]:
        """
        Apply changes to title, description and/or status.

        Args:
            task_id: The task UUID.
            changes: Field values to set; other keys are ignored.

        Returns:
            The updated task, or None if no task has this ID.
        """
        row = self._find_row(task_id)
        if row is None:
            return None

        for name in UPDATABLE_FIELDS:
            if name in changes:
                value = changes[name]
                row[name] = value.value if isinstance(value, TaskStatus) else value
        row["updated_at"] = utc_now().isoformat()

        self._db.save()
        return Task.model_validate(row)

    def delete(self, task_id: str) -> bool:
        """
        Remove a task.

        Returns:
            True if a task was removed.
        """
        rows = self._db.collection(COLLECTION)
        remaining = [row for row in rows if row["id"] != task_id]
        if len(remaining) == len(rows):
            return False

        self._db.replace_collection(COLLECTION, remaining)
        self._db.save()
        return True

    def _find_row(self, task_id: str) -> Optional[dict[str, Any]]:
        for row in self._db.collection(COLLECTION):
            if row["id"] == task_id:
                return row
        return None
