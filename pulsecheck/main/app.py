"""
ASGI application - Main Layer

Builds the FastAPI app around the dependency container and mounts the
liveness, health and readiness routers.
"""

from contextlib import asynccontextmanager
from datetime import datetime, timezone

from fastapi import FastAPI

from pulsecheck.main.config import get_settings
from pulsecheck.main.container import app_lifespan, init_container
from pulsecheck.presentation.controllers import health_router, ping_router
from pulsecheck.shared import configure_logging, get_logger, update_logging_from_settings

# Basic logging first so configuration loading is logged
configure_logging()

settings = get_settings()

update_logging_from_settings(settings)

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan management.

    Builds the probes on startup through the container's app_lifespan and
    releases their connections on shutdown.
    """
    app.state.started_at = datetime.now(timezone.utc)
    logger.info("app.startup", environment=settings.environment.value)

    async with app_lifespan() as container:
        app.state.container = container
        yield

    logger.info("app.shutdown")


def create_app() -> FastAPI:
    """
    Build the FastAPI application from the current settings.

    The health routes are only mounted while ``health.enabled`` is set;
    ``/ping`` is always available.

    Returns:
        FastAPI: The configured FastAPI application
    """
    settings = get_settings()

    init_container(settings)

    app = FastAPI(
        title=settings.service.title,
        description=settings.service.description,
        version=settings.service.version,
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
        lifespan=lifespan,
    )

    app.include_router(ping_router)
    if settings.health.enabled:
        app.include_router(health_router)
    else:
        logger.info("health.endpoints.disabled")

    return app


app = create_app()
