"""
Service layer.

Business logic services for the application.
"""

from .auth_service import AuthService
from .chirp_service import ChirpService, clean_chirp_body
from .refresh_token_service import RefreshTokenRecord, RefreshTokenService
from .user_service import UserService

__all__ = [
    "AuthService",
    "UserService",
    "ChirpService",
    "clean_chirp_body",
    "RefreshTokenService",
    "RefreshTokenRecord",
]
