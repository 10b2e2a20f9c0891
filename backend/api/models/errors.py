"""
Error response models.

Standardized error responses for the API.
"""

from pydantic import BaseModel, Field
from typing import Any


class ErrorResponse(BaseModel):
    """Standard error response format."""

    error: str = Field(..., description="Error category, e.g. 'Validation Error'")
    code: str = Field(..., description="Machine-readable error code")
    message: str
    details: dict[str, Any] = Field(default_factory=dict)
