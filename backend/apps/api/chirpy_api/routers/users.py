"""
Users router.

Provides endpoints for account creation and credential updates.
"""

import uuid
from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, status

from chirpy_core import get_logger
from chirpy_core.auth import HashingFailure
from chirpy_core.schemas import UserCreate, UserResponse, UserUpdate
from chirpy_core.services import UserService

from ..dependencies import get_current_user_id, get_user_service

logger = get_logger(__name__)

router = APIRouter()


@router.post("", status_code=status.HTTP_201_CREATED)
async def create_user(
    data: UserCreate,
    user_service: Annotated[UserService, Depends(get_user_service)],
) -> UserResponse:
    """
    Register a new user account.

    Args:
        data: Email and password.
        user_service: User service.

    Returns:
        Created user profile.

    Raises:
        HTTPException: If email is already registered.
    """
    try:
        user = await user_service.create_user(data)
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    except HashingFailure:
        logger.exception("Password hashing failed during registration")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail="Internal Server Error"
        ) from None

    return UserResponse.model_validate(user)


@router.put("")
async def update_user(
    data: UserUpdate,
    current_user_id: Annotated[uuid.UUID, Depends(get_current_user_id)],
    user_service: Annotated[UserService, Depends(get_user_service)],
) -> UserResponse:
    """
    Replace the authenticated user's email and password.

    Args:
        data: New email and password.
        current_user_id: Authenticated user id.
        user_service: User service.

    Returns:
        Updated user profile.

    Raises:
        HTTPException: 400 if the email is taken, 404 if the user is gone.
    """
    try:
        return await user_service.update_credentials(current_user_id, data)
    except ValueError as e:
        code = (
            status.HTTP_404_NOT_FOUND
            if str(e) == "User not found"
            else status.HTTP_400_BAD_REQUEST
        )
        raise HTTPException(status_code=code, detail=str(e))
    except HashingFailure:
        logger.exception("Password hashing failed during credential update")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail="Internal Server Error"
        ) from None
