"""
API router modules.

This package contains all API route handlers organized by domain.
"""

from . import admin, auth, chirps, users, webhooks

__all__ = [
    "admin",
    "auth",
    "chirps",
    "users",
    "webhooks",
]
