"""
User repository for record store access.

Encapsulates all reads and writes of the ``users`` collection.
Email lookups compare case-insensitively; the address is stored as given.
"""

import uuid
from typing import Optional, Any

from shared.repository import BaseRepository, utc_now
from .exceptions import EmailAlreadyExistsError
from .models import User

COLLECTION = "users"


def normalize_email(email: str) -> str:
    return email.strip().lower()


class UserRepository(BaseRepository[User]):
    """
    Repository for user data access.

    Note: This repository does NOT perform authorization checks.
    The service layer is responsible for verifying the caller.
    """

    def create(self, email: str, password_hash: str, name: str) -> User:
        """
        Create a new user record.

        Raises:
            EmailAlreadyExistsError: If another user has the same email.
        """
        if self._find_row_by_email(email) is not None:
            raise EmailAlreadyExistsError(email)

        now = utc_now()
        user = User(
            id=str(uuid.uuid4()),
            email=email,
            password_hash=password_hash,
            name=name,
            created_at=now,
            updated_at=now,
        )
        self._db.collection(COLLECTION).append(user.model_dump(mode="json"))
        self._db.save()
        return user

    def find_by_email(self, email: str) -> Optional[User]:
        row = self._find_row_by_email(email)
        return User.model_validate(row) if row is not None else None

    def find_by_id(self, user_id: str) -> Optional[User]:
        row = self._find_row_by_id(user_id)
        return User.model_validate(row) if row is not None else None

    def update(
        self,
        user_id: str,
        name: Optional[str] = None,
        email: Optional[str] = None,
    ) -> Optional[User]:
        """
        Update a user's name and/or email.

        Returns:
            The updated user, or None if no user has this ID.
        """
        row = self._find_row_by_id(user_id)
        if row is None:
            return None

        if name is not None:
            row["name"] = name
        if email is not None:
            row["email"] = email
        row["updated_at"] = utc_now().isoformat()

        self._db.save()
        return User.model_validate(row)

    def _find_row_by_id(self, user_id: str) -> Optional[dict[str, Any]]:
        for row in self._db.collection(COLLECTION):
            if row["id"] == user_id:
                return row
        return None

    def _find_row_by_email(self, email: str) -> Optional[dict[str, Any]]:
        wanted = normalize_email(email)
        for row in self._db.collection(COLLECTION):
            if normalize_email(row["email"]) == wanted:
                return row
        return None
