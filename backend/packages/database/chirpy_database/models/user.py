"""
User model definition.

This module defines the User model for account credentials and
membership status.
"""

from sqlalchemy import Boolean, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from .base import Base, TimestampMixin, generate_uuid


class User(Base, TimestampMixin):
    """
    User account model.

    Attributes:
        id: Unique user identifier (UUID).
        email: Login email (unique, indexed).
        hashed_password: Argon2id PHC string.
        is_chirpy_red: Whether the user has the paid Chirpy Red membership.
    """

    __tablename__ = "users"

    # Primary key
    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=generate_uuid)

    # Credentials
    email: Mapped[str] = mapped_column(String(255), unique=True, nullable=False, index=True)
    hashed_password: Mapped[str] = mapped_column(String(255), nullable=False)

    # Membership
    is_chirpy_red: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False)

    # Relationships
    chirps = relationship("Chirp", back_populates="user", cascade="all, delete-orphan")
    refresh_tokens = relationship(
        "RefreshToken", back_populates="user", cascade="all, delete-orphan"
    )
