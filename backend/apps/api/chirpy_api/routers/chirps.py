"""
Chirps router.

Provides endpoints for posting, reading and deleting chirps.
"""

import uuid
from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, status

from chirpy_core.schemas import ChirpCreate, ChirpResponse
from chirpy_core.services import ChirpService

from ..dependencies import get_chirp_service, get_current_user_id

router = APIRouter()


def _parse_chirp_id(chirp_id: str) -> str:
    try:
        return str(uuid.UUID(chirp_id))
    except ValueError:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Invalid chirp ID")


@router.post("", status_code=status.HTTP_201_CREATED)
async def create_chirp(
    data: ChirpCreate,
    current_user_id: Annotated[uuid.UUID, Depends(get_current_user_id)],
    chirp_service: Annotated[ChirpService, Depends(get_chirp_service)],
) -> ChirpResponse:
    """
    Post a chirp as the authenticated user.

    Args:
        data: Chirp body.
        current_user_id: Authenticated user id.
        chirp_service: Chirp service.

    Returns:
        Created chirp.

    Raises:
        HTTPException: If the chirp is longer than 140 characters.
    """
    try:
        return await chirp_service.create_chirp(str(current_user_id), data)
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))


@router.get("")
async def list_chirps(
    chirp_service: Annotated[ChirpService, Depends(get_chirp_service)],
) -> list[ChirpResponse]:
    """
    Get all chirps, oldest first.

    Args:
        chirp_service: Chirp service.

    Returns:
        List of chirps.
    """
    return await chirp_service.list_chirps()


@router.get("/{chirp_id}")
async def get_chirp(
    chirp_id: str,
    chirp_service: Annotated[ChirpService, Depends(get_chirp_service)],
) -> ChirpResponse:
    """
    Get a specific chirp.

    Args:
        chirp_id: Chirp identifier.
        chirp_service: Chirp service.

    Returns:
        Chirp details.

    Raises:
        HTTPException: 400 for a malformed id, 404 if not found.
    """
    try:
        return await chirp_service.get_chirp(_parse_chirp_id(chirp_id))
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))


@router.delete("/{chirp_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_chirp(
    chirp_id: str,
    current_user_id: Annotated[uuid.UUID, Depends(get_current_user_id)],
    chirp_service: Annotated[ChirpService, Depends(get_chirp_service)],
) -> None:
    """
    Delete a chirp. Only its author may do so.

    Args:
        chirp_id: Chirp identifier.
        current_user_id: Authenticated user id.
        chirp_service: Chirp service.

    Raises:
        HTTPException: 400 for a malformed id, 403 if not the author, 404 if not found.
    """
    try:
        await chirp_service.delete_chirp(_parse_chirp_id(chirp_id), str(current_user_id))
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    except PermissionError as e:
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail=str(e))
