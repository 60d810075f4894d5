"""
FastAPI application setup.
"""

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
import logging
from contextlib import asynccontextmanager

from app.config import get_settings
from app.core.db import create_tables, engine
from app.core.error_handlers import setup_error_handlers
from app.core.logging import configure_logging
from app.middleware import RequestContextMiddleware

# Get application settings
settings = get_settings()

configure_logging(settings.log_level.value, settings.log_format)

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan management.
    Creates missing tables on startup (when enabled) and disposes the
    connection pool on shutdown.
    """
    logger.info(f"Starting {settings.app_name} v{settings.app_version}")

    try:
        if settings.database.create_tables_on_startup:
            await create_tables()
        logger.info("Application startup complete")

        yield

    except Exception as e:
        logger.error(f"Application startup failed: {e}", exc_info=True)
        raise

    finally:
        logger.info("Shutting down application")
        await engine.dispose()
        logger.info("Application shutdown complete")


def create_app() -> FastAPI:
    """
    Create and configure FastAPI application.

    Returns:
        FastAPI: Configured application instance
    """
    app = FastAPI(
        title=settings.app_name,
        version=settings.app_version,
        debug=settings.debug,
        lifespan=lifespan
    )

    app.add_middleware(
        CORSMiddleware,
        **settings.get_cors_config()
    )
    app.add_middleware(RequestContextMiddleware)

    setup_error_handlers(app)

    from app.api.translation_endpoints import router as translation_router
    from app.api.favorite_endpoints import router as favorite_router
    from app.api.language_endpoints import router as language_router
    from app.api.health_endpoints import router as health_router
    app.include_router(translation_router)
    app.include_router(favorite_router)
    app.include_router(language_router)
    app.include_router(health_router)

    @app.get("/")
    async def root():
        """Root endpoint for basic liveness check."""
        return {
            "message": f"Welcome to {settings.app_name}",
            "version": settings.app_version,
            "status": "running"
        }

    return app


# Create application instance
app = create_app()
