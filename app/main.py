"""
FastAPI application setup.

Wires cross-origin admission, identity resolution, request logging and
error handling around the translation, places and favorites routers.
"""

from fastapi import FastAPI
import logging
from contextlib import asynccontextmanager

from starlette.concurrency import run_in_threadpool

from app.config.settings import get_settings
from app.core.dependencies import get_store
from app.core.error_handlers import setup_error_handlers
from app.core.logging import configure_logging
from app.middleware import (
    AuthenticationMiddleware,
    RequestContextMiddleware,
    UnhandledErrorMiddleware,
    install_cors,
)

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan management.

    The document store handle is created on first use and stays open for
    the life of the process; startup only makes sure its tables exist.
    """
    settings = get_settings()
    logger.info(f"Starting {settings.app_name} v{settings.app_version}")

    try:
        store = app.dependency_overrides.get(get_store, get_store)()
        await run_in_threadpool(store.create_tables)
        logger.info("Application startup complete")
    except Exception as e:
        logger.error(f"Application startup failed: {e}", exc_info=True)
        raise

    yield

    logger.info("Shutting down application")


def create_app() -> FastAPI:
    """
    Create and configure FastAPI application.

    Returns:
        FastAPI: Configured application instance
    """
    settings = get_settings()
    configure_logging(settings.log_level.value, settings.log_json, settings.log_format)

    app = FastAPI(
        title=settings.app_name,
        version=settings.app_version,
        debug=settings.debug,
        lifespan=lifespan
    )

    # Middleware added last runs first: request context, CORS, OPTIONS
    # short-circuit, unhandled-error rendering, then auth.
    app.add_middleware(AuthenticationMiddleware)
    app.add_middleware(UnhandledErrorMiddleware)
    install_cors(app, settings)
    app.add_middleware(RequestContextMiddleware)

    setup_error_handlers(app)

    from app.api import translation_router, places_router, favorites_router, health_router
    app.include_router(translation_router)
    app.include_router(places_router)
    app.include_router(favorites_router)
    app.include_router(health_router)

    @app.get("/")
    async def root():
        """Root endpoint for basic health check."""
        return {
            "message": f"Welcome to {settings.app_name}",
            "version": settings.app_version,
            "status": "running"
        }

    return app


# Create application instance
app = create_app()
