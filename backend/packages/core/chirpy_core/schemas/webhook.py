"""
Payment webhook schemas.

Events delivered by Polka, the payment provider.
"""

import uuid
from typing import Any

from pydantic import BaseModel, Field

USER_UPGRADED_EVENT = "user.upgraded"


class PolkaWebhookData(BaseModel):
    """Payload of a `user.upgraded` event."""

    user_id: uuid.UUID


class PolkaWebhookRequest(BaseModel):
    """Webhook event envelope. The payload shape depends on the event."""

    event: str
    data: dict[str, Any] = Field(default_factory=dict)
