"""Logging setup shared by every gomodwhy module.

All loggers hang off the ``gomodwhy`` logger, which owns the only handler.
Records go to stderr: stdout carries nothing but the import chains, so the
output of ``gomodwhy pkg > chains.txt`` stays clean at any verbosity.
"""

import logging
import sys
from typing import Optional

ROOT_LOGGER_NAME = "gomodwhy"
DEFAULT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

_configured = False


def setup_root_logger(
    level: int = logging.INFO,
    format_string: Optional[str] = None,
    handler: Optional[logging.Handler] = None,
) -> None:
    """Attach a single handler to the ``gomodwhy`` logger.

    Only the first call has an effect; ``reset_logging`` re-arms it.

    Args:
        level: Initial level (default: INFO).
        format_string: Record format, ``DEFAULT_FORMAT`` when omitted.
        handler: Destination, a stderr ``StreamHandler`` when omitted.
    """
    global _configured

    if _configured:
        return

    root_logger = logging.getLogger(ROOT_LOGGER_NAME)
    root_logger.setLevel(level)
    root_logger.handlers.clear()

    if handler is None:
        handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(format_string or DEFAULT_FORMAT))
    root_logger.addHandler(handler)

    # pytest's caplog listens on the stdlib root logger
    root_logger.propagate = True

    _configured = True


def get_logger(name: str) -> logging.Logger:
    """Return the logger for a module, typically ``get_logger(__name__)``.

    The logger has no level of its own, so ``set_global_log_level`` governs it.
    """
    setup_root_logger()
    logger = logging.getLogger(name)
    logger.setLevel(logging.NOTSET)
    return logger


def set_global_log_level(level: int) -> None:
    """Set the level of the ``gomodwhy`` logger and its handlers."""
    setup_root_logger()

    root_logger = logging.getLogger(ROOT_LOGGER_NAME)
    root_logger.setLevel(level)
    for handler in root_logger.handlers:
        handler.setLevel(level)


def enable_debug_logging() -> None:
    """Log everything, including per-query search statistics."""
    set_global_log_level(logging.DEBUG)


def reset_logging() -> None:
    """Drop the handler and level so the next call reconfigures (for tests)."""
    global _configured
    _configured = False

    root_logger = logging.getLogger(ROOT_LOGGER_NAME)
    root_logger.handlers.clear()
    root_logger.setLevel(logging.NOTSET)


setup_root_logger()
