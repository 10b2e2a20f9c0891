"""
Bearer token issuance and verification.

Tokens are HS256 JWTs carrying ``userId``, ``email``, ``iat`` and ``exp``.
They are stateless: nothing is stored server-side and a token stays valid
until it expires. The signing key comes from an immutable TokenConfig that
is built once from settings and handed to TokenService.
"""

from datetime import datetime, timedelta, timezone
from typing import Optional

import jwt
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from shared.config import Settings, SEVEN_DAYS, resolve_jwt_secret

from .exceptions import ExpiredTokenError, InvalidTokenError

BEARER_PREFIX = "Bearer "


class TokenConfig(BaseModel):
    """Signing parameters. Frozen once built."""

    model_config = ConfigDict(frozen=True)

    secret: str = Field(..., min_length=1)
    algorithm: str = "HS256"
    expiry_seconds: int = Field(default=SEVEN_DAYS, gt=0)


class TokenPayload(BaseModel):
    """Decoded token claims."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    user_id: str = Field(..., alias="userId", min_length=1)
    email: str = Field(..., min_length=1)
    iat: int = Field(..., description="Issued at (unix seconds)")
    exp: int = Field(..., description="Expires at (unix seconds)")


def build_token_config(settings: Settings) -> TokenConfig:
    """
    Build the token configuration from settings.

    Raises:
        ConfigurationError: If no secret is configured in production.
    """
    return TokenConfig(
        secret=resolve_jwt_secret(settings),
        algorithm=settings.jwt_algorithm,
        expiry_seconds=settings.jwt_expiry_seconds,
    )


def extract_token_from_header(header_value: Optional[str]) -> Optional[str]:
    """
    Return the token from an ``Authorization: Bearer <token>`` value.

    The prefix match is exact and case-sensitive. Anything after the
    single space, extra spaces included, is returned as the token.
    """
    if not header_value or not header_value.startswith(BEARER_PREFIX):
        return None
    return header_value[len(BEARER_PREFIX):]


class TokenService:
    """Issues and verifies signed bearer tokens."""

    def __init__(self, config: TokenConfig):
        self._config = config

    @property
    def expiry_seconds(self) -> int:
        return self._config.expiry_seconds

    def issue(self, user_id: str, email: str) -> str:
        """Create a token for a user, valid for the configured window."""
        now = datetime.now(timezone.utc)
        claims = {
            "userId": user_id,
            "email": email,
            "iat": now,
            "exp": now + timedelta(seconds=self._config.expiry_seconds),
        }
        return jwt.encode(claims, self._config.secret, algorithm=self._config.algorithm)

    def verify(self, token: str) -> TokenPayload:
        """
        Verify a token's signature and expiry and return its claims.

        Raises:
            ExpiredTokenError: If the token has expired
            InvalidTokenError: If the token is malformed, tampered with,
                or missing the userId/email claims
        """
        try:
            claims = jwt.decode(
                token,
                self._config.secret,
                algorithms=[self._config.algorithm],
                options={"require": ["exp", "iat"]},
            )
        except jwt.ExpiredSignatureError as e:
            raise ExpiredTokenError() from e
        except jwt.InvalidTokenError as e:
            raise InvalidTokenError() from e

        try:
            return TokenPayload.model_validate(claims)
        except ValidationError as e:
            raise InvalidTokenError() from e
