"""
Users module.

Stores user records and serves the authenticated user's profile.

Public API:
- IUserService / IUserRepository: Interfaces
- User, UserView: Stored record and its credential-safe projection
- Users exceptions: UserNotFoundError, EmailInUseError, EmailAlreadyExistsError
"""

from .interfaces import IUserRepository, IUserService
from .models import User, UserView, UpdateProfileRequest, UserResponse
from .exceptions import UserNotFoundError, EmailInUseError, EmailAlreadyExistsError

__all__ = [
    "IUserRepository",
    "IUserService",
    "User",
    "UserView",
    "UpdateProfileRequest",
    "UserResponse",
    "UserNotFoundError",
    "EmailInUseError",
    "EmailAlreadyExistsError",
]
