"""
Authentication module exceptions.

These exceptions are raised by the auth module and caught by the API
error handlers to return appropriate HTTP responses.
"""

from shared.exceptions import AuthenticationError, ConflictError


class InvalidTokenError(AuthenticationError):
    """Raised when a token is malformed, tampered with, or expired."""

    def __init__(self, message: str = "Invalid or expired token"):
        super().__init__(message, code="INVALID_TOKEN")


class ExpiredTokenError(InvalidTokenError):
    """Raised when an otherwise valid token has expired."""

    def __init__(self, message: str = "Invalid or expired token"):
        super().__init__(message)
        self.code = "TOKEN_EXPIRED"


class MissingTokenError(AuthenticationError):
    """Raised when no authentication token is provided."""

    def __init__(self, message: str = "No authentication token provided"):
        super().__init__(message, code="MISSING_TOKEN")


class InvalidCredentialsError(AuthenticationError):
    """
    Raised on a failed login.

    The message is the same for an unknown email and a wrong password
    so the response does not reveal which accounts exist.
    """

    def __init__(self):
        super().__init__("Invalid credentials", code="INVALID_CREDENTIALS")


class EmailAlreadyRegisteredError(ConflictError):
    """Raised when registering with an email that already has an account."""

    def __init__(self):
        super().__init__(
            "Email already registered",
            code="EMAIL_ALREADY_REGISTERED",
            details={"email": ["This email is already registered"]},
        )
