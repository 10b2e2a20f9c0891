"""
Users module interfaces.

The API layer depends on IUserService; services depend on IUserRepository,
so any store offering these primitives can replace the JSON-file one.
"""

from typing import Protocol, Optional, runtime_checkable

from .models import User, UserView, UpdateProfileRequest


@runtime_checkable
class IUserRepository(Protocol):
    """Record store primitives for users."""

    def create(self, email: str, password_hash: str, name: str) -> User:
        ...

    def find_by_email(self, email: str) -> Optional[User]:
        ...

    def find_by_id(self, user_id: str) -> Optional[User]:
        ...

    def update(
        self,
        user_id: str,
        name: Optional[str] = None,
        email: Optional[str] = None,
    ) -> Optional[User]:
        ...


@runtime_checkable
class IUserService(Protocol):
    """
    Interface for profile operations.

    All methods return the credential-safe UserView.
    """

    async def get_profile(self, user_id: str) -> UserView:
        """
        Get a user's profile.

        Args:
            user_id: ID of the authenticated user

        Raises:
            UserNotFoundError: If the user no longer exists
        """
        ...

    async def update_profile(
        self,
        user_id: str,
        request: UpdateProfileRequest,
    ) -> UserView:
        """
        Update the name and/or email of a user.

        Args:
            user_id: ID of the authenticated user
            request: Fields to change

        Raises:
            ValidationError: If a field is invalid
            EmailInUseError: If the email belongs to another user
            UserNotFoundError: If the user no longer exists
        """
        ...
