"""
FastAPI dependencies.

Provides dependency injection for database sessions, authentication, and services.
"""

import uuid
from typing import Annotated

from fastapi import Depends, Header, HTTPException, status
from sqlalchemy.ext.asyncio import AsyncSession

from chirpy_core.auth import JWTConfig, Unauthorized, authenticate
from chirpy_core.services import AuthService, ChirpService, RefreshTokenService, UserService
from chirpy_database.session import get_session

from .config import settings


def unauthorized() -> HTTPException:
    """Build the one 401 response used for every authentication failure."""
    return HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail="Unauthorized",
        headers={"WWW-Authenticate": "Bearer"},
    )


def get_jwt_config() -> JWTConfig:
    """
    Get JWT configuration.

    Returns:
        JWT configuration instance.
    """
    return JWTConfig(
        secret_key=settings.jwt_secret.get_secret_value(),
        access_token_expire_minutes=settings.jwt_access_token_expire_minutes,
        refresh_token_expire_days=settings.refresh_token_expire_days,
    )


def get_current_user_id(
    jwt_config: Annotated[JWTConfig, Depends(get_jwt_config)],
    authorization: Annotated[str | None, Header()] = None,
) -> uuid.UUID:
    """
    Get the authenticated user id from the access token.

    Validation is stateless; no database lookup happens here.

    Args:
        jwt_config: JWT configuration.
        authorization: Raw Authorization header.

    Returns:
        Current user id.

    Raises:
        HTTPException: 401 for any header or token problem.
    """
    try:
        return authenticate(authorization, jwt_config.secret_key)
    except Unauthorized:
        raise unauthorized() from None


# Service dependencies
def get_auth_service(
    session: Annotated[AsyncSession, Depends(get_session)],
    jwt_config: Annotated[JWTConfig, Depends(get_jwt_config)],
) -> AuthService:
    """Get authentication service instance."""
    return AuthService(session, jwt_config)


def get_user_service(session: Annotated[AsyncSession, Depends(get_session)]) -> UserService:
    """Get user service instance."""
    return UserService(session)


def get_chirp_service(session: Annotated[AsyncSession, Depends(get_session)]) -> ChirpService:
    """Get chirp service instance."""
    return ChirpService(session)


def get_refresh_token_service(
    session: Annotated[AsyncSession, Depends(get_session)],
) -> RefreshTokenService:
    """Get refresh token store instance."""
    return RefreshTokenService(session)
