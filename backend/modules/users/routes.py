"""
Profile API endpoints.

Route prefix: /api/profile
"""

from fastapi import APIRouter, Depends

from api.dependencies import get_user_service
from api.errors import guard_operation
from api.middleware.auth import get_current_user
from shared.models import AuthenticatedUser

from .interfaces import IUserService
from .models import UpdateProfileRequest, UserResponse

router = APIRouter()


@router.get("", response_model=UserResponse)
async def get_profile(
    user: AuthenticatedUser = Depends(get_current_user),
    service: IUserService = Depends(get_user_service),
) -> UserResponse:
    """Get the current user's profile (without the password hash)."""
    with guard_operation("An error occurred while fetching profile"):
        return UserResponse(user=await service.get_profile(user.user_id))


@router.put("", response_model=UserResponse)
async def update_profile(
    request: UpdateProfileRequest,
    user: AuthenticatedUser = Depends(get_current_user),
    service: IUserService = Depends(get_user_service),
) -> UserResponse:
    """Update the current user's name and/or email."""
    with guard_operation("An error occurred while updating profile"):
        return UserResponse(user=await service.update_profile(user.user_id, request))
