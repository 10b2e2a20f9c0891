"""
Authentication module interface.

Other modules should depend on IAuthService, not the concrete implementation.
This enables testing with mocks.
"""

from typing import Protocol, runtime_checkable

from shared.models import AuthenticatedUser

from .models import AuthResponse, LoginRequest, RegisterRequest


@runtime_checkable
class IAuthService(Protocol):
    """
    Interface for authentication operations.

    This protocol defines the contract that the auth module exposes
    to other modules. Implementations must provide all these methods.
    """

    async def register(self, request: RegisterRequest) -> AuthResponse:
        """
        Create an account and sign it in.

        Args:
            request: Name, email and password

        Returns:
            AuthResponse with a fresh token and the new user

        Raises:
            ValidationError: If a field is missing or malformed
            EmailAlreadyRegisteredError: If the email is taken
        """
        ...

    async def login(self, request: LoginRequest) -> AuthResponse:
        """
        Exchange email and password for a token.

        Raises:
            ValidationError: If a field is missing
            InvalidCredentialsError: If the email is unknown or the
                password is wrong (indistinguishably)
        """
        ...

    async def validate_token(self, token: str) -> AuthenticatedUser:
        """
        Validate a bearer token and return the authenticated user.

        Raises:
            MissingTokenError: If the token is empty
            InvalidTokenError: If the token is invalid or expired
        """
        ...
