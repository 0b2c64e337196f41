"""
Authentication entry points.

Composes header parsing, access tokens, refresh tokens and password
verification into the operations the API needs. Every authentication
failure leaves this module as `Unauthorized`; the specific reason is only
logged.
"""

import uuid
from collections.abc import Awaitable, Callable
from datetime import timedelta
from typing import NamedTuple

from chirpy_core.logging_config import get_logger

from .bearer import get_bearer_token
from .errors import BearerError, TokenError, Unauthorized
from .jwt import ACCESS_TOKEN_LIFETIME, Secret, create_access_token, validate_access_token
from .password import verify_password
from .refresh import generate_refresh_token

logger = get_logger(__name__)

RefreshLookup = Callable[[str], Awaitable[uuid.UUID | None]]
RefreshRevoke = Callable[[str], Awaitable[bool]]


class TokenPair(NamedTuple):
    """Tokens issued on login."""

    access_token: str
    refresh_token: str


def _extract(header_value: str | None) -> str:
    try:
        return get_bearer_token(header_value)
    except BearerError as e:
        logger.info("Rejected authorization header", extra={"reason": type(e).__name__})
        raise Unauthorized() from e


def authenticate(header_value: str | None, secret: Secret) -> uuid.UUID:
    """
    Authenticate a request from its Authorization header.

    Args:
        header_value: Raw Authorization header value.
        secret: Access token secret.

    Returns:
        The authenticated user id.

    Raises:
        Unauthorized: For any header or token failure.
    """
    token = _extract(header_value)
    try:
        return validate_access_token(token, secret)
    except TokenError as e:
        logger.info("Rejected access token", extra={"reason": type(e).__name__})
        raise Unauthorized() from e


def login(
    password: str,
    stored_hash: str,
    user_id: uuid.UUID,
    secret: Secret,
    *,
    access_ttl: timedelta = ACCESS_TOKEN_LIFETIME,
) -> TokenPair:
    """
    Check a password and issue a token pair.

    The caller must persist the refresh token before handing it out.

    Args:
        password: Submitted password.
        stored_hash: The user's stored password hash.
        user_id: The user's id.
        secret: Access token secret.
        access_ttl: Access token lifetime.

    Returns:
        Fresh access and refresh tokens.

    Raises:
        Unauthorized: If the password does not match.
        VerificationFailure: If the stored hash is malformed.
    """
    if not verify_password(password, stored_hash):
        logger.info("Password mismatch", extra={"user_id": str(user_id)})
        raise Unauthorized()

    return TokenPair(
        access_token=create_access_token(user_id, secret, access_ttl),
        refresh_token=generate_refresh_token(),
    )


async def refresh(
    header_value: str | None,
    secret: Secret,
    lookup: RefreshLookup,
    *,
    access_ttl: timedelta = ACCESS_TOKEN_LIFETIME,
) -> str:
    """
    Mint a new access token from a refresh token.

    The refresh token itself is not rotated.

    Args:
        header_value: Authorization header carrying the refresh token.
        secret: Access token secret.
        lookup: Returns the owner of a live refresh token, or None.
        access_ttl: Access token lifetime.

    Returns:
        A new access token.

    Raises:
        Unauthorized: If the header is bad or the token is unknown,
            expired or revoked.
    """
    token = _extract(header_value)

    user_id = await lookup(token)
    if user_id is None:
        logger.info("Rejected refresh token")
        raise Unauthorized()

    return create_access_token(user_id, secret, access_ttl)


async def revoke(header_value: str | None, revoke_token: RefreshRevoke) -> None:
    """
    Revoke the refresh token in the Authorization header.

    Unknown and already revoked tokens are treated as success.

    Args:
        header_value: Authorization header carrying the refresh token.
        revoke_token: Marks a token revoked; returns whether a live token was found.

    Raises:
        Unauthorized: If the header is missing or malformed.
    """
    token = _extract(header_value)

    if not await revoke_token(token):
        logger.debug("Revoke requested for unknown or revoked refresh token")
