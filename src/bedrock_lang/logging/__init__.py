"""
Logging module - Structured logging with structlog.
"""

from .setup import configure_logging, get_logger

__all__ = [
    "configure_logging",
    "get_logger",
]
