"""Main FastAPI application."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from users_api.config import Settings, get_settings
from users_api.middleware import get_cors_headers, setup_middleware
from users_api.routes import api_router
from users_api.services import build_user_registry
from users_api.services.exceptions import UserNotFoundError

# Configure logging
logging.basicConfig(level=get_settings().log_level.upper())
logger = logging.getLogger(__name__)

USER_NOT_FOUND_MESSAGE = "Usuario no encontrado"


def create_app(settings: Settings | None = None) -> FastAPI:
    """Build the FastAPI application.

    Args:
        settings: Application settings, loaded from the environment when omitted

    Returns:
        Configured FastAPI instance with its own user registry
    """
    settings = settings or get_settings()

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        """Handle application lifespan events."""
        logger.info(f"{settings.app_name} v{settings.app_version} started")
        logger.info(f"Environment: {settings.environment}")
        logger.info(f"Servidor corriendo en {settings.public_url}")
        logger.info(f"Documentación en {settings.public_url}{settings.docs_url}")

        yield

        logger.info(f"{settings.app_name} shutting down")

    app = FastAPI(
        title=settings.app_name,
        description="CRUD básico con FastAPI y Swagger",
        version=settings.app_version,
        servers=[{"url": settings.public_url}],
        docs_url=settings.docs_url,
        redoc_url=None,
        lifespan=lifespan,
        redirect_slashes=False,
    )
    app.state.settings = settings
    app.state.user_registry = build_user_registry(settings)

    setup_middleware(app, ui_url=settings.ui_url)

    @app.exception_handler(UserNotFoundError)
    async def user_not_found_handler(request: Request, exc: UserNotFoundError) -> JSONResponse:
        """Translate a registry miss into the 404 error payload."""
        return JSONResponse(
            status_code=status.HTTP_404_NOT_FOUND,
            content={"error": USER_NOT_FOUND_MESSAGE},
        )

    @app.exception_handler(Exception)
    async def global_exception_handler(request: Request, exc: Exception) -> JSONResponse:
        """Global exception handler to ensure CORS headers are present on all errors."""
        logger.error("Unhandled exception: %s", exc, exc_info=True)

        origin = request.headers.get("origin")
        cors_headers = get_cors_headers(origin, ui_url=settings.ui_url)

        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"detail": str(exc)},
            headers=cors_headers,
        )

    app.include_router(api_router)

    return app


def run() -> None:
    """Start the API with uvicorn."""
    import uvicorn

    settings = get_settings()

    uvicorn.run(
        app,
        host=settings.api_host,
        port=settings.api_port,
        log_level=settings.log_level.lower(),
    )


app = create_app()


if __name__ == "__main__":
    run()
