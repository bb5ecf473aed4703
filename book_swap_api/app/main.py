"""
Main entrypoint for the Book Swap API.

This module assembles the FastAPI application, sets up logging and
error handling and includes the versioned routers.  ``create_app``
builds and configures the app, which is then instantiated at module
import time as ``app`` so it can be served directly, e.g.::

    uvicorn book_swap_api.app.main:app --reload

The store holding the four entity tables is opened on startup unless
one is passed to ``create_app``, which is how tests substitute an
in-memory store.
"""

import logging
import time
from contextlib import asynccontextmanager
from typing import AsyncIterator, Optional

from fastapi import FastAPI, Request

from .api.v1.router import router as v1_router
from .core.config import Settings, settings as default_settings
from .core.errors import setup_exception_handlers
from .core.logging_config import setup_logging
from .core.storage import Store, build_store
from .services.entity_factory import EntityFactory

logger = logging.getLogger(__name__)


def create_app(
    settings: Optional[Settings] = None,
    store: Optional[Store] = None,
    entity_factory: Optional[EntityFactory] = None,
) -> FastAPI:
    """Create and configure a FastAPI application.

    Parameters
    ----------
    settings : Optional[Settings]
        Settings to use instead of the module-level ``settings``.
    store : Optional[Store]
        Tables to serve.  When omitted, ``build_store`` opens the
        configured backend during application startup.
    entity_factory : Optional[EntityFactory]
        Source of ids and timestamps for new entities.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.
    """
    settings = settings or default_settings
    # Initialise logging before anything else so that startup can log.
    setup_logging(settings.log_level, settings.log_file or None)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        if app.state.store is None:
            app.state.store = build_store(settings)
        logger.info("%s %s started", settings.project_name, settings.api_version)
        yield
        logger.info("%s shutting down", settings.project_name)

    app = FastAPI(
        title=settings.project_name,
        version=settings.api_version,
        debug=settings.debug,
        lifespan=lifespan,
    )
    app.state.store = store
    app.state.entity_factory = entity_factory or EntityFactory()

    setup_exception_handlers(app)

    @app.middleware("http")
    async def log_requests(request: Request, call_next):
        started = time.perf_counter()
        response = await call_next(request)
        duration_ms = (time.perf_counter() - started) * 1000
        logger.info(
            "%s %s -> %s (%.1f ms)",
            request.method,
            request.url.path,
            response.status_code,
            duration_ms,
        )
        return response

    app.include_router(v1_router, prefix=settings.api_prefix)

    return app


# Create the application instance at import time so that tools such as
# uvicorn can discover it without calling create_app manually.
app = create_app()
