"""Simple logging abstraction for nxhuman."""

import sys
from typing import Optional
from loguru import logger as _logger

_logger_configured: bool = False

STDERR_FORMAT = "<red>{time:HH:mm:ss}</red> | <level>{level: <8}</level> | <cyan>{extra[app]}</cyan> | <level>{message}</level>"


def configure_logging(verbose: bool = False) -> None:
    """(Re)install the stderr sink.

    Only stderr is used. Writing a log file into the project directory would
    turn a dry run into a filesystem mutation.
    """
    global _logger_configured

    _logger.remove()
    _logger.add(
        sys.stderr,
        level="DEBUG" if verbose else "ERROR",
        format=STDERR_FORMAT,
        colorize=True,
    )
    _logger.configure(patcher=_add_context)
    _logger_configured = True


def get_logger(app_name: Optional[str] = None):
    """Get a logger tagged with ``app_name`` (defaults to "nxhuman")."""
    # Configure logger on first use
    if not _logger_configured:
        configure_logging()

    return _logger.bind(app=app_name) if app_name else _logger


def _add_context(record):
    """Tag records from untagged loggers."""
    record["extra"].setdefault("app", "nxhuman")


logger = get_logger()

__all__ = [
    "logger",
    "get_logger",
    "configure_logging",
]
