"""
Authentication service implementation.

Registers users, checks their passwords and issues bearer tokens.
"""

import logging

from shared.models import AuthenticatedUser
from shared.validation import validate_credentials, validate_required_fields

from modules.users.exceptions import EmailAlreadyExistsError
from modules.users.interfaces import IUserRepository

from .exceptions import (
    EmailAlreadyRegisteredError,
    InvalidCredentialsError,
    MissingTokenError,
)
from .interfaces import IAuthService
from .models import AuthResponse, LoginRequest, RegisterRequest
from .passwords import DEFAULT_ROUNDS, hash_password, verify_password
from .tokens import TokenService

logger = logging.getLogger(__name__)


class AuthService(IAuthService):
    """
    Implementation of the authentication service.

    Uses bcrypt password hashes stored through the user repository and
    stateless signed tokens from the token service.
    """

    def __init__(
        self,
        users: IUserRepository,
        tokens: TokenService,
        password_rounds: int = DEFAULT_ROUNDS,
    ):
        self._users = users
        self._tokens = tokens
        self._password_rounds = password_rounds

    async def register(self, request: RegisterRequest) -> AuthResponse:
        body = request.model_dump()
        validate_required_fields(body, ["name", "email", "password"]).raise_for_errors()
        validate_credentials(request.email, request.password).raise_for_errors()

        if self._users.find_by_email(request.email) is not None:
            raise EmailAlreadyRegisteredError()

        password_hash = hash_password(request.password, rounds=self._password_rounds)
        try:
            user = self._users.create(
                email=request.email,
                password_hash=password_hash,
                name=request.name,
            )
        except EmailAlreadyExistsError as e:
            raise EmailAlreadyRegisteredError() from e

        logger.info("Registered user %s", user.id)
        token = self._tokens.issue(user.id, user.email)
        return AuthResponse(token=token, user=user.to_view())

    async def login(self, request: LoginRequest) -> AuthResponse:
        validate_required_fields(request.model_dump(), ["email", "password"]).raise_for_errors()

        user = self._users.find_by_email(request.email)
        if user is None or not verify_password(request.password, user.password_hash):
            logger.warning("Failed login attempt")
            raise InvalidCredentialsError()

        logger.info("Login: %s", user.id)
        token = self._tokens.issue(user.id, user.email)
        return AuthResponse(token=token, user=user.to_view())

    async def validate_token(self, token: str) -> AuthenticatedUser:
        if not token:
            raise MissingTokenError()

        payload = self._tokens.verify(token)
        return AuthenticatedUser(user_id=payload.user_id, email=payload.email)
