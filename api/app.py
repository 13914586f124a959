"""
FastAPI application factory.

Creates and configures the FastAPI application instance.
"""

import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request, status
from fastapi.responses import RedirectResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from modules.auth.exceptions import LoginRequiredError
from shared.exceptions import AuthorizationError
from shared.log import configure_logging

from .dependencies import ServiceContainer
from .routes import admin, auth, health, pages
from .views import message_page

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan handler.

    Startup refuses to continue if storage is unreachable, then clears
    expired sessions and creates the first admin when one is configured.
    """
    container: ServiceContainer = app.state.container
    settings = container.settings
    configure_logging(settings.log_level)
    logger.info(f"Starting {settings.app_name} on {settings.host}:{settings.port}")

    try:
        container.check_storage()
    except Exception:
        logger.critical("Storage is unreachable; aborting startup", exc_info=True)
        raise

    purged = await container.sessions.purge_expired()
    if purged:
        logger.info(f"Purged {purged} expired sessions")

    if settings.bootstrap_admin_email and settings.bootstrap_admin_password:
        await container.admin.bootstrap_admin(
            name=settings.bootstrap_admin_name,
            email=settings.bootstrap_admin_email,
            password=settings.bootstrap_admin_password,
        )

    yield

    logger.info(f"Shutting down {settings.app_name}")


def register_exception_handlers(app: FastAPI) -> None:
    """Map gate failures and unhandled errors to pages."""

    @app.exception_handler(LoginRequiredError)
    async def login_required_handler(request: Request, exc: LoginRequiredError):
        return RedirectResponse(exc.redirect_to, status_code=status.HTTP_302_FOUND)

    @app.exception_handler(AuthorizationError)
    async def authorization_handler(request: Request, exc: AuthorizationError):
        logger.info(f"Forbidden {request.method} {request.url.path}: {exc.details}")
        return message_page(exc.message, status.HTTP_403_FORBIDDEN)

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException):
        if exc.status_code == status.HTTP_404_NOT_FOUND:
            return message_page("Page not found - 404", status.HTTP_404_NOT_FOUND)
        return message_page(str(exc.detail), exc.status_code)

    @app.exception_handler(Exception)
    async def unhandled_exception_handler(request: Request, exc: Exception):
        logger.exception(f"Unhandled error on {request.method} {request.url.path}")
        return message_page(
            "An unexpected error occurred. Please try again later.",
            status.HTTP_500_INTERNAL_SERVER_ERROR,
        )


def create_app(container: Optional[ServiceContainer] = None) -> FastAPI:
    """
    Create and configure the FastAPI application.

    Args:
        container: Service wiring to use; built from settings when omitted

    Returns:
        Configured FastAPI instance
    """
    container = container or ServiceContainer()
    settings = container.settings

    app = FastAPI(
        title=settings.app_name,
        description="Signup, login and role-based access for a small members site",
        version=settings.app_version,
        lifespan=lifespan,
        docs_url="/api/docs" if settings.debug else None,
        redoc_url="/api/redoc" if settings.debug else None,
        openapi_url="/api/openapi.json" if settings.debug else None,
    )
    app.state.container = container

    register_exception_handlers(app)

    # Register routes
    app.include_router(health.router, prefix="/api", tags=["health"])
    app.include_router(pages.router, tags=["pages"])
    app.include_router(auth.router, tags=["auth"])
    app.include_router(admin.router, prefix="/admin", tags=["admin"])

    return app
