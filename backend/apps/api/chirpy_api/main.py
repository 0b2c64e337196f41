"""
Chirpy API - FastAPI application entry point.

This module initializes the FastAPI application and configures
middleware, routers, static files, and lifecycle events.
"""

from collections.abc import AsyncGenerator, Awaitable, Callable
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, Response
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import PlainTextResponse
from fastapi.staticfiles import StaticFiles

from chirpy_core import get_logger, init_logging

from .config import settings
from .metrics import FileserverHits
from .routers import admin, auth, chirps, users, webhooks

logger = get_logger(__name__)

APP_PREFIX = "/app"


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    Application lifecycle manager.

    Handles startup and shutdown events for the application.

    Args:
        app: The FastAPI application instance.

    Yields:
        None during application runtime.
    """
    from chirpy_database.session import close_database, init_database

    init_logging(settings.log_level)
    logger.info("Starting Chirpy API", extra={"version": settings.version})
    init_database(settings.db_url, echo=settings.debug)

    yield

    await close_database()
    logger.info("Shutting down Chirpy API")


async def count_fileserver_hits(
    request: Request, call_next: Callable[[Request], Awaitable[Response]]
) -> Response:
    """Increment the hit counter for every request under /app."""
    path = request.url.path
    if path == APP_PREFIX or path.startswith(APP_PREFIX + "/"):
        request.app.state.fileserver_hits.increment()
    return await call_next(request)


def create_app() -> FastAPI:
    """
    Build a new application instance with its own hit counter.

    Returns:
        Configured FastAPI application.
    """
    app = FastAPI(
        title="Chirpy API",
        description="Chirpy - microblogging API",
        version=settings.version,
        lifespan=lifespan,
        docs_url="/api/docs" if settings.debug else None,
        redoc_url="/api/redoc" if settings.debug else None,
    )
    app.state.fileserver_hits = FileserverHits()

    # Configure CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.middleware("http")(count_fileserver_hits)

    # Register API routers
    app.include_router(auth.router, prefix="/api", tags=["Authentication"])
    app.include_router(users.router, prefix="/api/users", tags=["Users"])
    app.include_router(chirps.router, prefix="/api/chirps", tags=["Chirps"])
    app.include_router(webhooks.router, prefix="/api/polka", tags=["Webhooks"])
    app.include_router(admin.router, prefix="/admin", tags=["Admin"])

    @app.get("/api/healthz", response_class=PlainTextResponse)
    async def health_check() -> str:
        """
        Readiness endpoint.

        Returns:
            Plain "OK".
        """
        return "OK\n"

    app.mount(
        APP_PREFIX,
        StaticFiles(directory=settings.filepath_root, html=True, check_dir=False),
        name="app",
    )

    return app


app = create_app()
