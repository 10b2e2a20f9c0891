"""
Auth API endpoints.

Route prefix: /api/auth
"""

import logging

from fastapi import APIRouter, Depends

from api.dependencies import get_auth_service, get_user_service
from api.errors import guard_operation
from api.middleware.auth import get_current_user
from modules.users.interfaces import IUserService
from modules.users.models import UserResponse
from shared.models import AuthenticatedUser

from .interfaces import IAuthService
from .models import AuthResponse, LoginRequest, RegisterRequest

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("/register", response_model=AuthResponse, status_code=201)
async def register(
    request: RegisterRequest,
    service: IAuthService = Depends(get_auth_service),
) -> AuthResponse:
    """Register a new user and return a token."""
    with guard_operation("An error occurred during registration"):
        return await service.register(request)


@router.post("/login", response_model=AuthResponse)
async def login(
    request: LoginRequest,
    service: IAuthService = Depends(get_auth_service),
) -> AuthResponse:
    """Login with email + password."""
    with guard_operation("An error occurred during login"):
        return await service.login(request)


@router.get("/me", response_model=UserResponse)
async def get_me(
    user: AuthenticatedUser = Depends(get_current_user),
    service: IUserService = Depends(get_user_service),
) -> UserResponse:
    """
    Get the current user.

    Requires authentication.
    """
    with guard_operation("An error occurred"):
        return UserResponse(user=await service.get_profile(user.user_id))
