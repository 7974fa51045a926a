"""
Main entrypoint for the Asgard API.

This module assembles the FastAPI application, sets up logging,
registers CORS and request logging middleware, the repository
error handler and the versioned routers.  The ``create_app`` function builds and configures the app,
which is then instantiated at module import time as ``app``.  Run it
with uvicorn, e.g.::

    uvicorn asgard_api.app.main:app --reload

or through ``run.py`` at the project root.
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator, Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .api.errors import register_error_handlers
from .api.health import router as health_router
from .api.middleware import log_requests
from .api.v1.router import router as v1_router
from .core.config import Settings, settings as default_settings
from .core.logging_config import setup_logging
from .repositories import Repositories, sqlite_repositories
from .services import OrderService, ProductService, UserService

logger = logging.getLogger(__name__)


def create_app(
    repositories: Optional[Repositories] = None,
    settings: Optional[Settings] = None,
) -> FastAPI:
    """Create and configure a FastAPI application.

    Parameters
    ----------
    repositories : Optional[Repositories]
        Storage to serve.  Defaults to the SQLite adapters pointed at
        ``settings.database_url``; tests pass in-memory fakes instead.
    settings : Optional[Settings]
        Overrides the settings read from the environment.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.
    """
    settings = settings or default_settings
    setup_logging(settings.log_level, settings.log_file)

    if repositories is None:
        repositories = sqlite_repositories(settings.database_url, settings.store_timeout_seconds)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        # Apply migrations before the first request is served.
        if repositories.bootstrap is not None:
            repositories.bootstrap()
        logger.info("%s %s ready", settings.project_name, settings.api_version)
        yield

    app = FastAPI(
        title=settings.project_name,
        version=settings.api_version,
        debug=settings.debug,
        lifespan=lifespan,
    )

    # One service instance per resource, shared by every request.
    app.state.settings = settings
    app.state.repositories = repositories
    app.state.users = UserService(repositories.users)
    app.state.products = ProductService(repositories.products)
    app.state.orders = OrderService(repositories.orders)

    app.middleware("http")(log_requests)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_error_handlers(app)
    app.include_router(health_router)
    app.include_router(v1_router, prefix="/api/v1")

    return app


# Create the application instance at import time so that tools such as
# uvicorn can discover it without calling create_app manually.
app = create_app()
