"""
Main entrypoint for the Blog Service API.

This module assembles the FastAPI application, sets up logging and
includes versioned routers.  The ``create_app`` function builds and
configures the app, which is then instantiated at module import time
as ``app``.  Run it with uvicorn or another ASGI server, e.g.::

    uvicorn blog_service_api.app.main:app --reload

The application title and version are provided via ``Settings`` from
``core.config``.
"""

import logging
from typing import Optional

from fastapi import FastAPI

from .api.v1.router import router as v1_router
from .core.blog_store import SQLiteBlogStore
from .core.config import settings
from .core.db import init_db
from .core.logging_config import setup_logging
from .services.blog_service import BlogService

logger = logging.getLogger(__name__)


def create_app(service: Optional[BlogService] = None) -> FastAPI:
    """Create and configure a FastAPI application.

    Parameters
    ----------
    service : Optional[BlogService]
        Service instance the routes will use.  When omitted, a service
        over a ``SQLiteBlogStore`` at ``settings.database_url`` is
        created and the database schema is migrated at startup.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.
    """
    # Initialise logging before anything else so that the setup below
    # can log messages.
    setup_logging(settings.log_level, settings.log_file)

    app = FastAPI(title=settings.project_name, version=settings.api_version, debug=settings.debug)

    if service is None:
        service = BlogService(SQLiteBlogStore(settings.database_url))

        @app.on_event("startup")
        async def startup_event() -> None:
            version = init_db(settings.database_url)
            logger.info("Database ready at schema version %s", version)

    app.state.blog_service = service

    app.include_router(v1_router, prefix="/api/v1")

    return app


# Create the application instance at import time so that tools such as
# uvicorn can discover it without calling create_app manually.
app = create_app()
