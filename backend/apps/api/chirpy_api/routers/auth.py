"""
Authentication router.

Provides endpoints for login, access token refresh and refresh token revocation.
"""

from typing import Annotated

from fastapi import APIRouter, Depends, Header, HTTPException, status

from chirpy_core import get_logger
from chirpy_core.auth import PasswordError, Unauthorized
from chirpy_core.schemas import LoginRequest, LoginResponse, TokenResponse
from chirpy_core.services import AuthService

from ..dependencies import get_auth_service, unauthorized

logger = get_logger(__name__)

router = APIRouter()


@router.post("/login")
async def login(
    data: LoginRequest,
    auth_service: Annotated[AuthService, Depends(get_auth_service)],
) -> LoginResponse:
    """
    Authenticate user and issue tokens.

    Args:
        data: User login credentials.
        auth_service: Authentication service.

    Returns:
        User profile with access and refresh tokens.

    Raises:
        HTTPException: 401 if credentials are invalid.
    """
    try:
        user, tokens = await auth_service.login(data)
    except Unauthorized:
        raise unauthorized() from None
    except PasswordError:
        logger.exception("Password verification failed during login")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail="Internal Server Error"
        ) from None

    return LoginResponse(
        **user.model_dump(),
        token=tokens.access_token,
        refresh_token=tokens.refresh_token,
    )


@router.post("/refresh")
async def refresh_token(
    auth_service: Annotated[AuthService, Depends(get_auth_service)],
    authorization: Annotated[str | None, Header()] = None,
) -> TokenResponse:
    """
    Mint a new access token from the refresh token in the Authorization header.

    Args:
        auth_service: Authentication service.
        authorization: `Bearer <refresh token>`.

    Returns:
        New access token.

    Raises:
        HTTPException: 401 if the refresh token is unknown, expired or revoked.
    """
    try:
        token = await auth_service.refresh(authorization)
    except Unauthorized:
        raise unauthorized() from None

    return TokenResponse(token=token)


@router.post("/revoke", status_code=status.HTTP_204_NO_CONTENT)
async def revoke_token(
    auth_service: Annotated[AuthService, Depends(get_auth_service)],
    authorization: Annotated[str | None, Header()] = None,
) -> None:
    """
    Revoke the refresh token in the Authorization header.

    Unknown and already revoked tokens also answer 204.

    Args:
        auth_service: Authentication service.
        authorization: `Bearer <refresh token>`.

    Raises:
        HTTPException: 401 if the header is missing or malformed.
    """
    try:
        await auth_service.revoke(authorization)
    except Unauthorized:
        raise unauthorized() from None
