"""
Authentication schemas.

Request and response models for login and token refresh.
"""

from pydantic import BaseModel, EmailStr

from .user import UserResponse


class LoginRequest(BaseModel):
    """Login request."""

    email: EmailStr
    password: str


class LoginResponse(UserResponse):
    """User profile plus the issued access and refresh tokens."""

    token: str
    refresh_token: str


class TokenResponse(BaseModel):
    """Newly minted access token."""

    token: str
