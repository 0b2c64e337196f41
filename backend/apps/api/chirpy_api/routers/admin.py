"""
Admin router.

Provides the file server hit counter and the development reset endpoint.
"""

from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Request, status
from fastapi.responses import HTMLResponse, PlainTextResponse

from chirpy_core import get_logger
from chirpy_core.services import RefreshTokenService, UserService

from ..config import settings
from ..dependencies import get_refresh_token_service, get_user_service

logger = get_logger(__name__)

router = APIRouter()

_METRICS_TEMPLATE = """<html>
  <body>
    <h1>Welcome, Chirpy Admin</h1>
    <p>Chirpy has been visited {hits} times!</p>
  </body>
</html>"""


@router.get("/metrics", response_class=HTMLResponse)
async def view_metrics(request: Request) -> str:
    """
    Show how many requests the file server has handled.

    Args:
        request: Incoming request.

    Returns:
        HTML page with the hit count.
    """
    return _METRICS_TEMPLATE.format(hits=request.app.state.fileserver_hits.value)


@router.post("/reset", response_class=PlainTextResponse)
async def reset(
    request: Request,
    user_service: Annotated[UserService, Depends(get_user_service)],
    refresh_tokens: Annotated[RefreshTokenService, Depends(get_refresh_token_service)],
) -> str:
    """
    Reset the hit counter and delete all users, chirps and refresh tokens.

    Only available when PLATFORM is "dev".

    Args:
        request: Incoming request.
        user_service: User service.
        refresh_tokens: Refresh token store.

    Returns:
        Plain text summary.

    Raises:
        HTTPException: 403 outside the dev platform.
    """
    if settings.platform != "dev":
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail="Forbidden")

    hits = request.app.state.fileserver_hits
    hits.reset()

    purged = await refresh_tokens.delete_all()
    deleted = await user_service.delete_all_users()
    await user_service.session.commit()

    logger.info(
        "Development reset completed",
        extra={"deleted_users": deleted, "purged_refresh_tokens": purged},
    )
    return f"Hits: {hits.value}\nDeleted all users.\n"
