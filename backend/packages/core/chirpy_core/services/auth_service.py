"""
Authentication service.

Handles login, token refresh and revocation against the database.
"""

import uuid
from datetime import UTC, datetime

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from chirpy_core import auth
from chirpy_core.auth import JWTConfig, TokenPair, Unauthorized, verify_dummy_password
from chirpy_core.schemas import LoginRequest, UserResponse
from chirpy_database.models import User

from .refresh_token_service import RefreshTokenService


class AuthService:
    """Authentication service."""

    def __init__(self, session: AsyncSession, jwt_config: JWTConfig):
        """
        Initialize authentication service.

        Args:
            session: Database session.
            jwt_config: JWT configuration.
        """
        self.session = session
        self.jwt_config = jwt_config
        self.refresh_tokens = RefreshTokenService(session)

    async def login(self, request: LoginRequest) -> tuple[UserResponse, TokenPair]:
        """
        Authenticate a user and issue tokens.

        The refresh token is committed before it is returned.

        Args:
            request: Login request data.

        Returns:
            Tuple of (user response, token pair).

        Raises:
            Unauthorized: If the email is unknown or the password is wrong.
            VerificationFailure: If the stored hash is malformed.
        """
        stmt = select(User).where(User.email == request.email)
        result = await self.session.execute(stmt)
        user = result.scalar_one_or_none()

        if user is None:
            verify_dummy_password(request.password)
            raise Unauthorized()

        tokens = auth.login(
            request.password,
            user.hashed_password,
            uuid.UUID(user.id),
            self.jwt_config.secret_key,
            access_ttl=self.jwt_config.access_token_ttl,
        )
        user_response = UserResponse.model_validate(user)

        await self.refresh_tokens.insert(
            tokens.refresh_token,
            user.id,
            datetime.now(UTC) + self.jwt_config.refresh_token_ttl,
        )
        await self.session.commit()

        return user_response, tokens

    async def refresh(self, authorization: str | None) -> str:
        """
        Mint a new access token from a refresh token header.

        Args:
            authorization: Authorization header carrying the refresh token.

        Returns:
            New access token.

        Raises:
            Unauthorized: If the refresh token is unknown, expired or revoked.
        """
        return await auth.refresh(
            authorization,
            self.jwt_config.secret_key,
            self.refresh_tokens.get_user_id,
            access_ttl=self.jwt_config.access_token_ttl,
        )

    async def revoke(self, authorization: str | None) -> None:
        """
        Revoke the refresh token in the header.

        Args:
            authorization: Authorization header carrying the refresh token.

        Raises:
            Unauthorized: If the header is missing or malformed.
        """
        await auth.revoke(authorization, self.refresh_tokens.revoke)
