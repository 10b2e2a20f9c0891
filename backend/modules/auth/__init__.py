"""
Authentication module.

Handles password hashing, bearer tokens, ownership checks and
registration/login.

Public API:
- IAuthService: Interface for auth operations
- TokenService / TokenConfig: Token issuance and verification
- hash_password / verify_password: Credential hashing
- is_owner: Ownership check
- Auth exceptions: InvalidTokenError, ExpiredTokenError, etc.
"""

from .interfaces import IAuthService
from .models import AuthResponse, LoginRequest, RegisterRequest
from .ownership import is_owner
from .passwords import hash_password, verify_password
from .tokens import (
    TokenConfig,
    TokenPayload,
    TokenService,
    build_token_config,
    extract_token_from_header,
)
from .exceptions import (
    InvalidTokenError,
    ExpiredTokenError,
    MissingTokenError,
    InvalidCredentialsError,
    EmailAlreadyRegisteredError,
)

__all__ = [
    # Interface
    "IAuthService",
    # Models
    "AuthResponse",
    "LoginRequest",
    "RegisterRequest",
    "TokenConfig",
    "TokenPayload",
    # Components
    "TokenService",
    "build_token_config",
    "extract_token_from_header",
    "hash_password",
    "verify_password",
    "is_owner",
    # Exceptions
    "InvalidTokenError",
    "ExpiredTokenError",
    "MissingTokenError",
    "InvalidCredentialsError",
    "EmailAlreadyRegisteredError",
]
