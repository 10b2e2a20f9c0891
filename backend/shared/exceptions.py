"""
Base exception classes for the Taskboard backend.

Each module should define its own exceptions that inherit from these bases.
This enables consistent error handling across the application: the API
layer maps every TaskboardError to its status code and error body.
"""

from typing import Optional, Any


class TaskboardError(Exception):
    """
    Base exception for all Taskboard errors.

    All custom exceptions should inherit from this class.
    """

    status_code: int = 500
    category: str = "Server Error"

    def __init__(
        self,
        message: str,
        code: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code or self.__class__.__name__
        self.details = details or {}

    def to_dict(self) -> dict[str, Any]:
        """Convert exception to a dictionary for API responses."""
        return {
            "error": self.category,
            "code": self.code,
            "message": self.message,
            "details": self.details,
        }


class ValidationError(TaskboardError):
    """Input validation failed."""

    status_code = 400
    category = "Validation Error"


class ConflictError(ValidationError):
    """Input collides with an existing record (e.g. duplicate email)."""

    pass


class AuthenticationError(TaskboardError):
    """Authentication failed (invalid or missing credentials)."""

    status_code = 401
    category = "Authentication Error"


class AuthorizationError(TaskboardError):
    """Authorization failed (authenticated, but not allowed)."""

    status_code = 403
    category = "Authorization Error"


class NotFoundError(TaskboardError):
    """Resource not found."""

    status_code = 404
    category = "Not Found"


class ServerError(TaskboardError):
    """Unexpected failure. The message must stay generic."""

    pass


class DatabaseError(ServerError):
    """The record store could not be read or written."""

    pass


class ConfigurationError(ServerError):
    """The application is misconfigured and must not serve requests."""

    pass
