"""
Chirp model definition.

This module defines the Chirp model for short text posts.
"""

from sqlalchemy import ForeignKey, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from .base import Base, TimestampMixin, generate_uuid

MAX_CHIRP_LENGTH = 140


class Chirp(Base, TimestampMixin):
    """
    Chirp model.

    Attributes:
        id: Unique chirp identifier (UUID).
        body: Cleaned post text, at most 140 characters.
        user_id: Author (foreign key to users).
    """

    __tablename__ = "chirps"

    # Primary key
    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=generate_uuid)

    body: Mapped[str] = mapped_column(String(MAX_CHIRP_LENGTH), nullable=False)

    # Foreign key
    user_id: Mapped[str] = mapped_column(
        String(36), ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True
    )

    # Relationships
    user = relationship("User", back_populates="chirps")
