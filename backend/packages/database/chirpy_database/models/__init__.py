"""
Database models package.

This module exports all SQLAlchemy models for the Chirpy application.
"""

from .base import Base, TimestampMixin
from .chirp import MAX_CHIRP_LENGTH, Chirp
from .refresh_token import RefreshToken
from .user import User

__all__ = [
    "Base",
    "TimestampMixin",
    "User",
    "Chirp",
    "MAX_CHIRP_LENGTH",
    "RefreshToken",
]
