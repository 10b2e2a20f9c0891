"""
Users module exceptions.
"""

from shared.exceptions import ConflictError, NotFoundError


class UserNotFoundError(NotFoundError):
    """Raised when the authenticated user no longer exists."""

    def __init__(self, user_id: str):
        super().__init__(
            "User not found",
            code="USER_NOT_FOUND",
            details={"user_id": user_id},
        )


class EmailAlreadyExistsError(ConflictError):
    """Raised by the repository when an email is already taken."""

    def __init__(self, email: str):
        super().__init__(
            f"Email already exists: {email}",
            code="EMAIL_ALREADY_EXISTS",
            details={"email": ["This email is already registered"]},
        )


class EmailInUseError(ConflictError):
    """Raised when a profile update would take another user's email."""

    def __init__(self):
        super().__init__(
            "Email already in use",
            code="EMAIL_IN_USE",
            details={"email": ["This email is already registered to another account"]},
        )
