"""
Users module data models.

``User`` is the stored record and carries the password hash. Anything that
leaves the service layer is converted to ``UserView`` first.
"""

from datetime import datetime
from typing import Optional
from pydantic import BaseModel, Field


class UserView(BaseModel):
    """Credential-safe projection of a user, returned to clients."""

    id: str = Field(..., description="User ID (UUID)")
    email: str = Field(..., description="Email address")
    name: str = Field(..., description="Display name")
    created_at: datetime = Field(..., description="Account creation time")
    updated_at: datetime = Field(..., description="Last update time")


class User(BaseModel):
    """A stored user record."""

    id: str
    email: str
    password_hash: str
    name: str
    created_at: datetime
    updated_at: datetime

    def to_view(self) -> UserView:
        """Strip the password hash."""
        return UserView(**self.model_dump(exclude={"password_hash"}))


class UpdateProfileRequest(BaseModel):
    """Profile changes. Omitted fields are left as they are."""

    name: Optional[str] = None
    email: Optional[str] = None


class UserResponse(BaseModel):
    """Response wrapping a single user."""

    user: UserView
