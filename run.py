"""Unified entry point for the Users API and the presentation client.

This script launches both servers concurrently in one process.  It is
intended to be executed from the project root, for example under
Docker, where you only specify a single Python file to run.

Database configuration (``DB_USER``, ``DB_PASSWORD``, ``DB_HOST``,
``DB_PORT``, ``DB_NAME``) must be present in the environment; see
``.env.example`` for the full list of supported variables.

Usage:
    python run.py
"""
import asyncio
import logging

from uvicorn import Config, Server

from users_api.app.core.config import settings
from users_api.app.core.logging_config import setup_logging


logger = logging.getLogger(__name__)


async def run_api() -> None:
    """Start the Users API using Uvicorn on ``API_HOST``/``API_PORT``."""
    from users_api.app.main import app as api_app

    config = Config(app=api_app, host=settings.api_host, port=settings.api_port, reload=False, log_level="info")
    await Server(config).serve()


async def run_web() -> None:
    """Start the presentation client on ``WEB_HOST``/``WEB_PORT``."""
    from users_web.app import app as web_app

    config = Config(app=web_app, host=settings.web_host, port=settings.web_port, reload=False, log_level="info")
    await Server(config).serve()


async def main() -> None:
    """Run both servers concurrently."""
    setup_logging(settings)
    tasks = [asyncio.create_task(run_api()), asyncio.create_task(run_web())]
    done, pending = await asyncio.wait(tasks, return_when=asyncio.FIRST_EXCEPTION)
    for task in done:
        if exception := task.exception():
            logger.error("Exception in service", exc_info=exception)
    for task in pending:
        task.cancel()
    await asyncio.gather(*pending, return_exceptions=True)


if __name__ == "__main__":
    try:
        asyncio.run(main())
    except (KeyboardInterrupt, SystemExit):
        pass
