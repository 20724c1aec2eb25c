"""FastAPI application entrypoint and configuration.

This module provides the main FastAPI application factory that sets up
CORS middleware, includes the points and filters routers, loads the point
dataset once at startup and exposes a health check endpoint for
monitoring.

Example:
    The application can be run with uvicorn:
        $ uvicorn points_explorer.main:app --reload

    Or imported and used programmatically:
        >>> from points_explorer.main import app
        >>> # Use app in ASGI server
"""

from __future__ import annotations

import contextlib
from typing import TYPE_CHECKING

import fastapi
from fastapi.middleware import cors

from points_explorer.api import filters, points
from points_explorer.core import config
from points_explorer.core import logger as logger_module
from points_explorer.services import loader, points_layer

if TYPE_CHECKING:
    from collections.abc import AsyncIterator

    from points_explorer.core import models

logger = logger_module.get_logger(__name__)


async def load_collection(settings: config.Settings) -> models.PointCollection:
    """Load the session dataset from the configured source.

    Fetches ``settings.seed_points_url`` when it is set, otherwise reads
    ``settings.seed_points_path`` from disk.

    Args:
        settings: Application settings.

    Returns:
        The expanded PointCollection.
    """
    if settings.seed_points_url is not None:
        return await loader.load_and_prepare_points(settings=settings)
    return loader.load_points_from_path(
        settings.seed_points_path,
        settings=settings,
    )


@contextlib.asynccontextmanager
async def lifespan(app: fastapi.FastAPI) -> AsyncIterator[None]:
    """Load the dataset and build the points session before serving.

    A load failure is logged and re-raised, aborting startup.
    """
    settings = config.get_settings()
    logger_module.setup_logging(settings.log_level)
    try:
        collection = await load_collection(settings)
    except Exception:
        logger.exception("Failed to load the point dataset")
        raise
    app.state.session = points_layer.build_session(
        collection,
        settings=settings,
    )
    yield
    app.state.session = None


def create_app() -> fastapi.FastAPI:
    """Create and configure the FastAPI application.

    Sets up CORS middleware, includes the points and filters routers, and
    adds a health check endpoint. CORS origins are configured from
    settings, allowing cross-origin requests from specified domains.

    Returns:
        Configured FastAPI application instance ready for ASGI server.
    """
    settings = config.get_settings()
    app = fastapi.FastAPI(
        title="Mass Points Explorer",
        version="0.1.0",
        lifespan=lifespan,
    )

    app.include_router(points.router)
    app.include_router(filters.router)

    app.add_middleware(
        cors.CORSMiddleware,  # type: ignore[arg-type]
        allow_origins=settings.allow_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.get("/health")
    async def health() -> dict[str, str]:  # type: ignore[misc]
        """Health check endpoint for monitoring and load balancers.

        Returns:
            Dictionary with status "ok" if the service is running.
        """
        return {"status": "ok"}

    return app


app = create_app()
