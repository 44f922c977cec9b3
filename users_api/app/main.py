"""
Main entrypoint for the Users API.

This module assembles the FastAPI application, sets up logging and
includes the routers.  The ``create_app`` function builds and
configures the app, which is then instantiated at module import time
as ``app``.  Importing the app here makes it easy to run with uvicorn
or another ASGI server, e.g.::

    uvicorn users_api.app.main:app --port 5000

Configuration is validated when the app is created, so a process with
missing ``DB_*`` variables exits before it starts listening.  The
connection pool is created on startup and disposed on shutdown.
"""

import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from sqlalchemy.engine import Engine

from .core import db
from .core.config import Settings, settings as default_settings
from .core.logging_config import setup_logging
from .api.router import api_router, root_router


logger = logging.getLogger(__name__)


def create_app(settings: Optional[Settings] = None, engine: Optional[Engine] = None) -> FastAPI:
    """Create and configure a FastAPI application.

    Parameters
    ----------
    settings : Optional[Settings]
        Settings to use instead of the module‑level instance read from
        the environment.
    engine : Optional[Engine]
        A ready SQLAlchemy engine to serve queries from.  When omitted,
        a PostgreSQL pool is built from ``settings`` at startup.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.

    Raises
    ------
    ConfigurationError
        If no engine is supplied and the database settings are
        incomplete.
    """
    settings = settings or default_settings

    # Initialise logging before anything else so that configuration
    # errors below are reported through it.
    setup_logging(settings)

    if engine is None:
        settings.validate()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        if engine is not None:
            db.set_engine(engine)
        else:
            db.init_engine(settings)
        logger.info("Starting %s %s", settings.project_name, settings.api_version)
        try:
            yield
        finally:
            db.dispose_engine()
            logger.info("Stopped %s", settings.project_name)

    app = FastAPI(
        title=settings.project_name,
        version=settings.api_version,
        lifespan=lifespan,
    )

    app.include_router(root_router)
    app.include_router(api_router, prefix="/api")

    return app


# Create the application instance at import time so that tools such as
# uvicorn can discover it without calling create_app manually.
app = create_app()
