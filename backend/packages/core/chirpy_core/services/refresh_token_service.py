"""
Refresh token store.

Persists refresh tokens and answers whether a token is still usable.
Expiry and revocation are evaluated in SQL so stored timestamps are never
compared in Python.
"""

import uuid
from dataclasses import dataclass
from datetime import UTC, datetime

from sqlalchemy import delete, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from chirpy_database.models import RefreshToken


@dataclass(frozen=True)
class RefreshTokenRecord:
    """Stored state of a refresh token."""

    user_id: uuid.UUID
    expires_at: datetime
    revoked: bool


class RefreshTokenService:
    """Refresh token persistence."""

    def __init__(self, session: AsyncSession):
        """
        Initialize refresh token service.

        Args:
            session: Database session.
        """
        self.session = session

    async def insert(self, token: str, user_id: uuid.UUID | str, expires_at: datetime) -> None:
        """
        Store a new refresh token. The caller commits.

        Args:
            token: Refresh token value.
            user_id: Owning user.
            expires_at: Expiration timestamp.
        """
        self.session.add(RefreshToken(token=token, user_id=str(user_id), expires_at=expires_at))
        await self.session.flush()

    async def lookup(self, token: str) -> RefreshTokenRecord | None:
        """
        Get the stored state of a token regardless of validity.

        Args:
            token: Refresh token value.

        Returns:
            The record, or None if the token was never stored.
        """
        result = await self.session.execute(
            select(RefreshToken).where(RefreshToken.token == token)
        )
        row = result.scalar_one_or_none()
        if row is None:
            return None
        return RefreshTokenRecord(
            user_id=uuid.UUID(row.user_id),
            expires_at=row.expires_at,
            revoked=row.revoked_at is not None,
        )

    async def get_user_id(self, token: str) -> uuid.UUID | None:
        """
        Get the owner of a live token.

        Args:
            token: Refresh token value.

        Returns:
            The owning user id if the token exists, is unexpired and unrevoked.
        """
        stmt = select(RefreshToken.user_id).where(
            RefreshToken.token == token,
            RefreshToken.expires_at > datetime.now(UTC),
            RefreshToken.revoked_at.is_(None),
        )
        result = await self.session.execute(stmt)
        user_id = result.scalar_one_or_none()
        return uuid.UUID(user_id) if user_id else None

    async def revoke(self, token: str) -> bool:
        """
        Mark a token revoked.

        Args:
            token: Refresh token value.

        Returns:
            True if an unrevoked token was found and revoked.
        """
        now = datetime.now(UTC)
        result = await self.session.execute(
            update(RefreshToken)
            .where(RefreshToken.token == token, RefreshToken.revoked_at.is_(None))
            .values(revoked_at=now, updated_at=now)
        )
        await self.session.commit()
        return result.rowcount > 0

    async def delete_all(self) -> int:
        """
        Purge every refresh token. The caller commits.

        Returns:
            Number of deleted tokens.
        """
        result = await self.session.execute(delete(RefreshToken))
        return result.rowcount
