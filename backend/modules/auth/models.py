"""
Authentication module data models.

Request bodies keep every field optional so that missing fields are
reported by the validation rules as field-level errors instead of
being rejected wholesale by the framework.
"""

from typing import Optional
from pydantic import BaseModel, Field

from modules.users.models import UserView


class RegisterRequest(BaseModel):
    """Request to create an account."""

    name: Optional[str] = Field(None, description="Display name")
    email: Optional[str] = Field(None, description="Email address")
    password: Optional[str] = Field(None, description="Plaintext password")


class LoginRequest(BaseModel):
    """Request to sign in."""

    email: Optional[str] = None
    password: Optional[str] = None


class AuthResponse(BaseModel):
    """Issued token plus the credential-safe user."""

    token: str = Field(..., description="Bearer token")
    user: UserView
