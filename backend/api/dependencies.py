"""
Dependency injection setup for FastAPI.

This module provides the "container" that wires together all module
implementations. Each module exposes its service through an interface,
and this file creates the concrete implementations.

Tests swap the whole graph by overriding ``get_container`` with a
container built from test settings and an in-memory database.
"""

from typing import TYPE_CHECKING, Optional

from fastapi import Depends

from shared.config import Settings, get_settings
from shared.database import JsonDatabase, get_database

# Type checking imports for interfaces (avoids circular imports)
if TYPE_CHECKING:
    from modules.auth.interfaces import IAuthService
    from modules.auth.tokens import TokenService
    from modules.tasks.interfaces import ITaskRepository, ITaskService
    from modules.users.interfaces import IUserRepository, IUserService


class ServiceContainer:
    """
    Container for all service instances.

    This class manages the lifecycle of service instances and their
    dependencies. Services are created lazily on first access.

    All services are cached as singletons within the container.
    Use reset() to clear all cached services for testing.
    """

    def __init__(
        self,
        settings: Optional[Settings] = None,
        database: Optional[JsonDatabase] = None,
    ) -> None:
        self._settings = settings
        self._database = database
        self._token_service: "TokenService | None" = None
        self._user_repository: "IUserRepository | None" = None
        self._task_repository: "ITaskRepository | None" = None
        self._auth_service: "IAuthService | None" = None
        self._user_service: "IUserService | None" = None
        self._task_service: "ITaskService | None" = None

    @property
    def settings(self) -> Settings:
        if self._settings is None:
            self._settings = get_settings()
        return self._settings

    @property
    def database(self) -> JsonDatabase:
        if self._database is None:
            self._database = get_database()
        return self._database

    @property
    def tokens(self) -> "TokenService":
        """
        Get the token service.

        Raises:
            ConfigurationError: If no signing secret is set in production.
        """
        if self._token_service is None:
            from modules.auth.tokens import TokenService, build_token_config
            self._token_service = TokenService(build_token_config(self.settings))
        return self._token_service

    @property
    def user_repository(self) -> "IUserRepository":
        if self._user_repository is None:
            from modules.users.repository import UserRepository
            self._user_repository = UserRepository(self.database)
        return self._user_repository

    @property
    def task_repository(self) -> "ITaskRepository":
        if self._task_repository is None:
            from modules.tasks.repository import TaskRepository
            self._task_repository = TaskRepository(self.database)
        return self._task_repository

    @property
    def auth(self) -> "IAuthService":
        """Get the auth service instance."""
        if self._auth_service is None:
            from modules.auth.service import AuthService
            self._auth_service = AuthService(
                users=self.user_repository,
                tokens=self.tokens,
                password_rounds=self.settings.bcrypt_rounds,
            )
        return self._auth_service

    @property
    def users(self) -> "IUserService":
        """Get the user (profile) service instance."""
        if self._user_service is None:
            from modules.users.service import UserService
            self._user_service = UserService(self.user_repository)
        return self._user_service

    @property
    def tasks(self) -> "ITaskService":
        """Get the task service instance."""
        if self._task_service is None:
            from modules.tasks.service import TaskService
            self._task_service = TaskService(self.task_repository)
        return self._task_service

    def reset(self) -> None:
        """
        Reset all cached services.

        This is primarily for testing - allows tests to get fresh
        service instances with different mock dependencies.
        """
        self._token_service = None
        self._user_repository = None
        self._task_repository = None
        self._auth_service = None
        self._user_service = None
        self._task_service = None


# Module-level container singleton
_container: ServiceContainer | None = None


def get_container() -> ServiceContainer:
    """Get the singleton service container."""
    global _container
    if _container is None:
        _container = ServiceContainer()
    return _container


def reset_container() -> None:
    """
    Reset the service container.

    This clears the cached container, so the next call to get_container()
    will create a fresh container with new service instances.

    Primarily used for testing.
    """
    global _container
    _container = None


# FastAPI dependency functions
# These are the functions that should be used in route Depends() calls


def get_auth_service(
    container: ServiceContainer = Depends(get_container),
) -> "IAuthService":
    """FastAPI dependency for auth service."""
    return container.auth


def get_user_service(
    container: ServiceContainer = Depends(get_container),
) -> "IUserService":
    """FastAPI dependency for user service."""
    return container.users


def get_task_service(
    container: ServiceContainer = Depends(get_container),
) -> "ITaskService":
    """FastAPI dependency for task service."""
    return container.tasks


def get_database_dependency(
    container: ServiceContainer = Depends(get_container),
) -> JsonDatabase:
    """FastAPI dependency for the record store."""
    return container.database
