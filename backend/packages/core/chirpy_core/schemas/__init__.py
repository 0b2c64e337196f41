"""
Pydantic schemas for API requests and responses.
"""

from .auth import LoginRequest, LoginResponse, TokenResponse
from .chirp import ChirpCreate, ChirpResponse
from .user import UserCreate, UserResponse, UserUpdate
from .webhook import USER_UPGRADED_EVENT, PolkaWebhookData, PolkaWebhookRequest

__all__ = [
    # Auth
    "LoginRequest",
    "LoginResponse",
    "TokenResponse",
    # User
    "UserCreate",
    "UserResponse",
    "UserUpdate",
    # Chirp
    "ChirpCreate",
    "ChirpResponse",
    # Webhook
    "USER_UPGRADED_EVENT",
    "PolkaWebhookData",
    "PolkaWebhookRequest",
]
