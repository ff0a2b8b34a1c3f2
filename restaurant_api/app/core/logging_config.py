"""
Logging setup for the restaurant service.

Level and log file come from ``settings`` unless passed explicitly;
``DEBUG=true`` forces debug output.  The sqlite store and the service
log through ``restaurant_api.*`` loggers, and masked GraphQL failures are
reported by strawberry on ``strawberry.execution``, so only the root
logger needs handlers.  Uvicorn's per-request access log is kept at
WARNING outside debug mode.
"""

import logging
from pathlib import Path
from typing import Optional

from .config import settings

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

QUIET_LOGGERS = ("uvicorn.access",)


def resolve_log_level(level: Optional[str] = None) -> int:
    """Return the numeric level for ``level`` or for the configured one."""
    if level is None:
        level = "DEBUG" if settings.debug else settings.log_level
    return getattr(logging, level.upper(), logging.INFO)


def setup_logging(
    level: Optional[str] = None,
    logfile: Optional[str] = None,
    logger: Optional[logging.Logger] = None,
) -> logging.Logger:
    """Attach console and file handlers to ``logger`` (root by default).

    A logger that already has handlers is left untouched, so repeated
    ``create_app`` calls in one process do not duplicate output.
    ``logfile`` defaults to ``settings.log_file``; an empty value means
    console only.
    """
    logger = logger or logging.getLogger()
    if logger.handlers:
        return logger

    logger.setLevel(resolve_log_level(level))
    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)

    console_handler = logging.StreamHandler()
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    logfile = logfile if logfile is not None else settings.log_file
    if logfile:
        file_handler = logging.FileHandler(Path(logfile).resolve(), encoding="utf-8")
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    if not settings.debug:
        for name in QUIET_LOGGERS:
            logging.getLogger(name).setLevel(logging.WARNING)

    return logger
