"""
Supabase access token verification.

Edge functions that act on behalf of a player take the Supabase session JWT
from the ``Authorization: Bearer`` header. Tokens are HS256-signed with the
project's JWT secret; the ``sub`` claim is the auth user id.
"""

from __future__ import annotations

from typing import Annotated, Optional

import jwt
from fastapi import Depends, Header

from rockmundo.core.logging_config import get_logger
from rockmundo.errors import AuthenticationError
from rockmundo.server.core.config import SupabaseAuthConfig, settings

logger = get_logger(__name__)


def get_auth_config() -> SupabaseAuthConfig:
    return settings.supabase_auth


def extract_bearer(authorization: Optional[str]) -> str:
    if not authorization:
        raise AuthenticationError("Authorization required")
    if not authorization.startswith("Bearer "):
        raise AuthenticationError("Invalid authorization header")
    token = authorization[len("Bearer ") :].strip()
    if not token:
        raise AuthenticationError("Authorization required")
    return token


def verify_access_token(token: str, config: SupabaseAuthConfig) -> str:
    """
    Decode a Supabase access token and return its subject.

    Args:
        token: Raw JWT taken from the bearer header
        config: Secret, audience and algorithm to verify against

    Returns:
        The auth user id from the ``sub`` claim.

    Raises:
        AuthenticationError: If the secret is not configured or the token is
            expired, tampered with, for another audience or has no subject.
    """
    if not config.jwt_secret:
        logger.error("SUPABASE_JWT_SECRET is not configured; rejecting bearer token")
        raise AuthenticationError("Invalid token")

    try:
        claims = jwt.decode(
            token,
            config.jwt_secret,
            algorithms=[config.jwt_algorithm],
            audience=config.jwt_audience,
        )
    except jwt.ExpiredSignatureError as e:
        raise AuthenticationError("Token expired") from e
    except jwt.InvalidTokenError as e:
        logger.debug(f"Rejected access token: {e}")
        raise AuthenticationError("Invalid token") from e

    subject = claims.get("sub")
    if not subject:
        raise AuthenticationError("Invalid token")
    return subject


async def get_current_user_id(
    config: Annotated[SupabaseAuthConfig, Depends(get_auth_config)],
    authorization: Annotated[Optional[str], Header()] = None,
) -> str:
    """Dependency resolving the calling auth user id."""
    return verify_access_token(extract_bearer(authorization), config)
