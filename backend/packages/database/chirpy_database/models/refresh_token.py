"""
Refresh token model definition.

This module defines the RefreshToken model backing long-lived,
revocable refresh tokens.
"""

from datetime import datetime

from sqlalchemy import DateTime, ForeignKey, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from .base import Base, TimestampMixin


class RefreshToken(Base, TimestampMixin):
    """
    Refresh token model.

    The token value itself is the primary key. A token is usable while it
    exists, `expires_at` is in the future and `revoked_at` is null.

    Attributes:
        token: Opaque 64-character hex token.
        user_id: Owner of the token (foreign key to users).
        expires_at: Expiration timestamp.
        revoked_at: Revocation timestamp (null = active).
    """

    __tablename__ = "refresh_tokens"

    token: Mapped[str] = mapped_column(String(64), primary_key=True)

    user_id: Mapped[str] = mapped_column(
        String(36), ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True
    )

    expires_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)
    revoked_at: Mapped[datetime | None] = mapped_column(DateTime(timezone=True))

    # Relationships
    user = relationship("User", back_populates="refresh_tokens")
