"""
FastAPI application factory.

Creates and configures the FastAPI application instance.
"""

import logging
from contextlib import asynccontextmanager
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from shared.config import get_settings
from modules.auth.routes import router as auth_router
from modules.auth.tokens import build_token_config
from modules.tasks.routes import router as tasks_router
from modules.users.routes import router as profile_router

from .errors import register_exception_handlers
from .routes import health

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan handler.

    Refuses to start when the token signing key is not configured
    for production.
    """
    # Startup
    settings = get_settings()
    build_token_config(settings)
    logger.info(
        "Starting %s on %s:%s (%s)",
        settings.app_name,
        settings.host,
        settings.port,
        settings.environment,
    )
    yield
    # Shutdown
    logger.info("Shutting down %s", settings.app_name)


def create_app() -> FastAPI:
    """
    Create and configure the FastAPI application.

    Returns:
        Configured FastAPI instance
    """
    settings = get_settings()

    app = FastAPI(
        title=settings.app_name,
        description="Multi-user task tracking API",
        version=settings.app_version,
        lifespan=lifespan,
        docs_url="/api/docs" if settings.debug else None,
        redoc_url="/api/redoc" if settings.debug else None,
    )

    # Configure CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=settings.cors_allow_credentials,
        allow_methods=settings.cors_allow_methods,
        allow_headers=settings.cors_allow_headers,
    )

    register_exception_handlers(app)

    # Register routes
    app.include_router(health.router, prefix="/api", tags=["health"])
    app.include_router(auth_router, prefix="/api/auth", tags=["auth"])
    app.include_router(profile_router, prefix="/api/profile", tags=["profile"])
    app.include_router(tasks_router, prefix="/api/tasks", tags=["tasks"])

    return app


# Application instance for uvicorn
app = create_app()
