"""
Console logging for the botfleet process.

``setup_log_system`` is called once by the entry point.  It gives the
``botfleet`` logger and the loggers of the libraries we run on (discord.py's
gateway, login and reconnect messages) one shared console handler, so both
appear in the same stream.  Modules inside the package just use
``logging.getLogger(__name__)``.

Environment:

- ``LOG_LEVEL``: level name for botfleet (default ``INFO``).  Library loggers
  never go below ``INFO``; discord.py at ``DEBUG`` logs every gateway frame.
- ``NO_COLOR``: disables the Rich renderer even on a terminal.
"""
from __future__ import annotations

import logging
import os
import sys
from typing import Iterable

from rich.logging import RichHandler

LOG_FORMAT = "[%(asctime)s] [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%H:%M:%S"

# Third-party loggers that share the console handler
LIBRARY_LOGGERS = ("discord",)


def _console_handler() -> logging.Handler:
    if os.getenv("NO_COLOR") is None and sys.stdout.isatty():
        handler: logging.Handler = RichHandler(rich_tracebacks=True, show_path=False, markup=False)
        handler.setFormatter(logging.Formatter("%(name)s: %(message)s"))
    else:
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))
    return handler


def _attach(logger: logging.Logger, handler: logging.Handler, level: int) -> None:
    logger.setLevel(level)
    if not logger.handlers:
        logger.addHandler(handler)
    # The handler is attached here; an application-level root handler would
    # print every record twice.
    logger.propagate = False


def setup_log_system(
    name: str = "botfleet",
    *,
    level: str | None = None,
    libraries: Iterable[str] = LIBRARY_LOGGERS,
) -> logging.Logger:
    """
    Configure ``name`` and ``libraries`` to log to the console and return ``name``'s logger.

    Calling it again only updates levels; loggers that already have a handler
    keep it.
    """
    level_str = (level or os.getenv("LOG_LEVEL", "INFO")).upper()
    log_level = getattr(logging, level_str, logging.INFO)

    handler = _console_handler()
    logger = logging.getLogger(name)
    _attach(logger, handler, log_level)
    for library in libraries:
        _attach(logging.getLogger(library), handler, max(log_level, logging.INFO))
    return logger
