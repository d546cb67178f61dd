"""
Logging setup for the API.

Usage:
    from app.core.logging import get_logger
    logger = get_logger(__name__)

    logger.info("Cart created")
    logger.error("Failed to save cart", exc_info=True)
"""

import logging
import sys
from functools import cache

from app.core.config import settings

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def _get_log_level() -> int:
    return getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO)


def _configure_root_logger() -> None:
    root = logging.getLogger()

    # Leave alone if uvicorn or pytest already installed handlers
    if root.handlers:
        return

    root.setLevel(_get_log_level())
    handler = logging.StreamHandler(sys.stdout)
    handler.setLevel(_get_log_level())
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    root.addHandler(handler)

    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)


_configure_root_logger()


@cache
def get_logger(name: str) -> logging.Logger:
    """Return the logger for ``name`` (typically ``__name__``)."""
    return logging.getLogger(name)


def sanitize_for_logging(value: str | None, max_length: int = 64) -> str:
    """
    Make a user-supplied value safe to put in a log line.

    Newlines and tabs are escaped so a value cannot forge extra entries,
    and long values are truncated.
    """
    if not value:
        return "N/A"
    safe_value = (
        str(value)
        .replace("\n", "\\n")
        .replace("\r", "\\r")
        .replace("\t", "\\t")
        .replace("\x00", "")
    )
    if len(safe_value) <= max_length:
        return safe_value
    return safe_value[:max_length] + "..."


__all__ = ["LOG_FORMAT", "get_logger", "sanitize_for_logging"]
