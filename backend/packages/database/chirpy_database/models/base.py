"""
Base model definitions.

This module provides the declarative base and shared column mixins
used by all Chirpy models.
"""

import uuid
from datetime import UTC, datetime

from sqlalchemy import DateTime, func
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column


def generate_uuid() -> str:
    """Generate a new UUID4 string for primary keys."""
    return str(uuid.uuid4())


def utcnow() -> datetime:
    """Return the current UTC time."""
    return datetime.now(UTC)


class Base(DeclarativeBase):
    """Declarative base for all models."""


class TimestampMixin:
    """
    Mixin adding creation and update timestamps.

    Attributes:
        created_at: Row creation timestamp.
        updated_at: Last modification timestamp.
    """

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=utcnow, server_default=func.now(), nullable=False
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=utcnow,
        onupdate=utcnow,
        server_default=func.now(),
        nullable=False,
    )
