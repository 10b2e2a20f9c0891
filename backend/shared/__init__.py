"""
Shared infrastructure for Taskboard backend.

This package contains cross-cutting concerns that are used by multiple modules:
- config: Centralized settings management
- database: JSON-file record store and its cached factory
- exceptions: Base exception classes
- validation: Field-level input validation rules

Note: Business logic should NOT go here. This is for infrastructure only.
"""

from .config import Settings, get_settings
from .database import JsonDatabase, get_database, reset_database_cache
from .exceptions import (
    TaskboardError,
    ValidationError,
    ConflictError,
    AuthenticationError,
    AuthorizationError,
    NotFoundError,
    ServerError,
    DatabaseError,
    ConfigurationError,
)
from .models import AuthenticatedUser

__all__ = [
    "Settings",
    "get_settings",
    "JsonDatabase",
    "get_database",
    "reset_database_cache",
    "TaskboardError",
    "ValidationError",
    "ConflictError",
    "AuthenticationError",
    "AuthorizationError",
    "NotFoundError",
    "ServerError",
    "DatabaseError",
    "ConfigurationError",
    "AuthenticatedUser",
]
