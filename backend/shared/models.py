"""
Shared data models used across modules.

These models are shared infrastructure, not business logic.
Module-specific models should stay in their respective module directories.
"""

from pydantic import BaseModel, Field


class AuthenticatedUser(BaseModel):
    """
    Represents an authenticated user in the system.

    This model is populated from verified token claims and made available
    to route handlers via dependency injection. It never touches the
    record store, so the user may have been removed since the token
    was issued.
    """

    user_id: str = Field(..., description="User ID from the token")
    email: str = Field(..., description="Email the token was issued for")

    model_config = {
        "frozen": True,  # Make immutable for safety
    }
