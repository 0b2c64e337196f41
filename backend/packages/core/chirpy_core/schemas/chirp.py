"""
Chirp schemas.

Request and response models for chirps.
"""

from datetime import datetime

from pydantic import BaseModel, ConfigDict


class ChirpCreate(BaseModel):
    """Chirp creation request."""

    body: str


class ChirpResponse(BaseModel):
    """Chirp response model."""

    model_config = ConfigDict(from_attributes=True)

    id: str
    created_at: datetime
    updated_at: datetime
    body: str
    user_id: str
