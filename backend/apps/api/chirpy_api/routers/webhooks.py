"""
Payment webhook router.

Receives membership events from Polka, authenticated by a shared API key.
The key is checked before the body is read.
"""

import hmac
from typing import Annotated

from fastapi import APIRouter, Depends, Header, HTTPException, Request, status
from pydantic import ValidationError

from chirpy_core import get_logger
from chirpy_core.auth import BearerError, get_api_key
from chirpy_core.schemas import USER_UPGRADED_EVENT, PolkaWebhookData, PolkaWebhookRequest
from chirpy_core.services import UserService

from ..config import settings
from ..dependencies import get_user_service

logger = get_logger(__name__)

router = APIRouter()


def require_polka_key(authorization: Annotated[str | None, Header()] = None) -> None:
    """
    Reject requests that do not carry the Polka API key.

    Args:
        authorization: `ApiKey <key>`.

    Raises:
        HTTPException: 401 for a missing, malformed or wrong key.
    """
    try:
        key = get_api_key(authorization)
    except BearerError:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED, detail="Unauthorized"
        ) from None

    expected = settings.polka_key.get_secret_value()
    if not expected or not hmac.compare_digest(key.encode(), expected.encode()):
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Unauthorized")


def _invalid_body() -> HTTPException:
    return HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Invalid body")


@router.post(
    "/webhooks",
    status_code=status.HTTP_204_NO_CONTENT,
    dependencies=[Depends(require_polka_key)],
)
async def polka_webhook(
    request: Request,
    user_service: Annotated[UserService, Depends(get_user_service)],
) -> None:
    """
    Handle a Polka event.

    Only `user.upgraded` has an effect and only its payload is validated;
    other events are acknowledged.

    Args:
        request: Incoming request carrying the JSON event.
        user_service: User service.

    Raises:
        HTTPException: 400 for an unreadable event, 404 if the user does not exist.
    """
    try:
        event = PolkaWebhookRequest.model_validate_json(await request.body())
    except ValidationError:
        raise _invalid_body() from None

    if event.event != USER_UPGRADED_EVENT:
        return

    try:
        payload = PolkaWebhookData.model_validate(event.data)
    except ValidationError:
        raise _invalid_body() from None

    if not await user_service.upgrade_to_chirpy_red(payload.user_id):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="User not found")

    logger.info("User upgraded to Chirpy Red", extra={"user_id": str(payload.user_id)})
