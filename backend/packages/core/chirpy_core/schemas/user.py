"""
User schemas.

Request and response models for user-related operations.
"""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, EmailStr, Field


class UserResponse(BaseModel):
    """User response model."""

    model_config = ConfigDict(from_attributes=True)

    id: str
    created_at: datetime
    updated_at: datetime
    email: EmailStr
    is_chirpy_red: bool


class UserCreate(BaseModel):
    """User creation request."""

    email: EmailStr
    password: str = Field(..., min_length=1)


class UserUpdate(BaseModel):
    """Credential update request for the authenticated user."""

    email: EmailStr
    password: str = Field(..., min_length=1)
