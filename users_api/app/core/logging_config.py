"""
Process‑wide logging for the API service and the presentation client.

Both servers call ``setup_logging`` with their ``Settings`` so that
``LOG_LEVEL`` and ``LOG_FILE`` mean the same thing in either process
(and in ``run.py``, which hosts both).  Logging is configured once per
process: the handlers installed here are tagged, and later calls return
without changes while tagged handlers are attached.  Handlers added by
other parties (pytest, an embedding application) do not count.
"""

import logging
from pathlib import Path
from typing import List, Optional

from .config import Settings


LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

_HANDLER_TAG = "_users_api_handler"


def _resolve_level(name: str) -> Optional[int]:
    level = logging.getLevelName(name.upper())
    return level if isinstance(level, int) else None


def _build_handlers(settings: Settings) -> List[logging.Handler]:
    handlers: List[logging.Handler] = [logging.StreamHandler()]
    if settings.log_file:
        log_path = Path(settings.log_file).resolve()
        handlers.append(logging.FileHandler(log_path, encoding="utf-8"))
    return handlers


def installed_handlers() -> List[logging.Handler]:
    """Return the root handlers installed by ``setup_logging``."""
    return [h for h in logging.getLogger().handlers if getattr(h, _HANDLER_TAG, False)]


def setup_logging(settings: Settings) -> bool:
    """Configure the root logger from ``settings``.

    The level comes from ``settings.log_level`` (unknown names fall back
    to ``INFO``).  Records go to the console and, when
    ``settings.log_file`` is set, to that file as well.

    Returns
    -------
    bool
        ``True`` if handlers were installed, ``False`` if an earlier
        call already configured the process.
    """
    if installed_handlers():
        return False

    root = logging.getLogger()

    level = _resolve_level(settings.log_level)
    root.setLevel(logging.INFO if level is None else level)
    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)
    for handler in _build_handlers(settings):
        handler.setFormatter(formatter)
        setattr(handler, _HANDLER_TAG, True)
        root.addHandler(handler)

    if level is None:
        logging.getLogger(__name__).warning("Unknown LOG_LEVEL %r, using INFO", settings.log_level)
    return True
