"""
Users service implementation.

Profile reads and updates for the authenticated user.
"""

import logging

from shared.exceptions import ValidationError
from shared.validation import validate_email

from .exceptions import EmailInUseError, UserNotFoundError
from .interfaces import IUserRepository, IUserService
from .models import UpdateProfileRequest, UserView

logger = logging.getLogger(__name__)


class UserService(IUserService):
    """Profile service on top of a user repository."""

    def __init__(self, users: IUserRepository):
        self._users = users

    async def get_profile(self, user_id: str) -> UserView:
        user = self._users.find_by_id(user_id)
        if user is None:
            raise UserNotFoundError(user_id)
        return user.to_view()

    async def update_profile(
        self,
        user_id: str,
        request: UpdateProfileRequest,
    ) -> UserView:
        """Validate the changes, check email collisions, then persist."""
        email = request.email
        if email:
            result = validate_email(email)
            if not result.valid:
                raise ValidationError(
                    "Validation failed",
                    details={"email": [result.error]},
                )

            existing = self._users.find_by_email(email)
            if existing is not None and existing.id != user_id:
                raise EmailInUseError()
        else:
            # An empty email means "leave it unchanged"
            email = None

        name = request.name
        if name is not None:
            name = name.strip()
            if not name:
                raise ValidationError(
                    "Validation failed",
                    details={"name": ["Name cannot be empty"]},
                )

        updated = self._users.update(user_id, name=name, email=email)
        if updated is None:
            raise UserNotFoundError(user_id)

        logger.info("Updated profile for user %s", user_id)
        return updated.to_view()
