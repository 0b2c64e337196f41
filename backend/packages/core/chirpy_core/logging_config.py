"""
Logging configuration.

Sets up a single stream handler on the root logger. Modules obtain their
logger through `get_logger(__name__)` and pass structured context with
`extra={...}`.
"""

import logging
import sys

_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"

_configured = False


def init_logging(level: str | int = "INFO") -> None:
    """
    Configure root logging once per process.

    Args:
        level: Log level name or number.
    """
    global _configured

    root = logging.getLogger()
    root.setLevel(level if isinstance(level, int) else level.upper())

    if _configured:
        return

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter(_FORMAT))
    root.addHandler(handler)
    _configured = True


def get_logger(name: str) -> logging.Logger:
    """
    Get a named logger.

    Args:
        name: Logger name, usually `__name__`.

    Returns:
        Logger instance.
    """
    return logging.getLogger(name)
