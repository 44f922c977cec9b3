"""
PostgreSQL connection pool.

This module owns the process‑wide SQLAlchemy ``Engine`` (and with it
the connection pool) used by the service layer.  The engine is created
once by ``init_engine`` during application startup and disposed by
``dispose_engine`` on shutdown.  Creating the engine does not open a
connection; the first connection is made when the first query runs.

Route handlers never touch the engine directly.  Services use
``get_connection``, which checks a connection out of the pool and
returns it when the ``with`` block exits, whether the query succeeded
or raised.
"""

import logging
from contextlib import contextmanager
from typing import Iterator, Optional

from sqlalchemy import create_engine
from sqlalchemy.engine import Connection, Engine, make_url

from .config import Settings


logger = logging.getLogger(__name__)

_engine: Optional[Engine] = None


def build_engine(settings: Settings) -> Engine:
    """Create an engine for the configured Data Store.

    Pool sizing is only passed for PostgreSQL; other backends (SQLite in
    local experiments) use SQLAlchemy's default pool for their dialect.
    """
    url = make_url(settings.sqlalchemy_url())
    options = {}
    if url.get_backend_name() == "postgresql":
        options["pool_size"] = settings.db_pool_size
        options["max_overflow"] = settings.db_max_overflow
    logger.info(
        "Creating database engine for %s",
        url.render_as_string(hide_password=True),
    )
    return create_engine(url, **options)


def init_engine(settings: Settings) -> Engine:
    """Create the process‑wide engine from ``settings`` and return it."""
    return set_engine(build_engine(settings))


def set_engine(engine: Engine) -> Engine:
    """Install an already constructed engine as the process‑wide pool."""
    global _engine
    if _engine is not None and _engine is not engine:
        _engine.dispose()
    _engine = engine
    return engine


def get_engine() -> Engine:
    """Return the process‑wide engine.

    Raises
    ------
    RuntimeError
        If called before ``init_engine``/``set_engine``.
    """
    if _engine is None:
        raise RuntimeError("Database engine is not initialised; call init_engine() at startup")
    return _engine


def dispose_engine() -> None:
    """Close all pooled connections and forget the engine."""
    global _engine
    if _engine is None:
        return
    _engine.dispose()
    _engine = None
    logger.info("Database engine disposed")


@contextmanager
def get_connection() -> Iterator[Connection]:
    """Check a connection out of the pool for the duration of the block."""
    with get_engine().connect() as conn:
        yield conn
