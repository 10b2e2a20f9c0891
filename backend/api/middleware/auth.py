"""
Bearer token authentication.

Resolves the ``Authorization: Bearer <token>`` header to an
AuthenticatedUser. Every protected route depends on get_current_user.
"""

from typing import Optional

from fastapi import Depends, Header

from modules.auth.exceptions import MissingTokenError
from modules.auth.interfaces import IAuthService
from modules.auth.tokens import extract_token_from_header
from shared.models import AuthenticatedUser

from ..dependencies import get_auth_service


async def authenticate(
    authorization: Optional[str],
    auth: IAuthService,
) -> AuthenticatedUser:
    """
    Resolve a raw Authorization header value to a user.

    Reads only the header; the record store is not consulted.

    Raises:
        MissingTokenError: If no token can be extracted
        InvalidTokenError: If the token is invalid or expired
    """
    token = extract_token_from_header(authorization)
    if not token:
        raise MissingTokenError()

    return await auth.validate_token(token)


async def get_current_user(
    authorization: Optional[str] = Header(default=None),
    auth: IAuthService = Depends(get_auth_service),
) -> AuthenticatedUser:
    """
    Dependency that requires authentication.

    Use this for endpoints that require a logged-in user.

    Usage:
        @router.get("/protected")
        async def protected_route(user: AuthenticatedUser = Depends(get_current_user)):
            return {"user_id": user.user_id}
    """
    return await authenticate(authorization, auth)
