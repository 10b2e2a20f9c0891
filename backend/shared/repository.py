"""
Base repository class for record store access.

Provides a common abstraction layer for all repositories, encapsulating
database access and providing shared utilities for data operations.
"""

from datetime import datetime, timezone
from typing import TypeVar, Generic

from .database import JsonDatabase


T = TypeVar("T")


def utc_now() -> datetime:
    """Current time as an aware UTC datetime."""
    return datetime.now(timezone.utc)


class BaseRepository(Generic[T]):
    """
    Base class for all repositories.

    Provides common functionality for record operations:
    - Database access via self._db
    - Generic type parameter for model type hints

    Subclasses should implement domain-specific data access methods
    and handle dict-to-Pydantic model mapping internally.

    Example:
        class TaskRepository(BaseRepository[Task]):
            def find_by_id(self, task_id: str) -> Optional[Task]:
                for row in self._db.collection("tasks"):
                    if row["id"] == task_id:
                        return Task.model_validate(row)
                return None
    """

    def __init__(self, db: JsonDatabase) -> None:
        """
        Initialize the repository with a database.

        Args:
            db: Record store holding the repository's collection.
        """
        self._db = db
