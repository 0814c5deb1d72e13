"""
Structured logging setup.

Two pipelines:
1. Console (stderr) at the configured level, human-readable or JSON.
2. File (JSON), if config.file is set. Captures everything (DEBUG+).

Without configure_logging() structlog keeps its defaults, which is enough
for a plugin that only needs translation warnings on stdout.
"""

import logging
import sys
from pathlib import Path

import structlog

from ..config.schema import LoggingConfig

_LEVELS = {
    "debug": logging.DEBUG,
    "info": logging.INFO,
    "warn": logging.WARNING,
    "error": logging.ERROR,
}


def configure_logging(config: LoggingConfig) -> None:
    """Configure structlog and the stdlib root logger.

    Args:
        config: Logging configuration (level, file, json_output)
    """
    logging.root.handlers.clear()
    structlog.reset_defaults()

    # Root logger lets everything through; handlers filter by level
    logging.basicConfig(level=logging.DEBUG, format="%(message)s", handlers=[])

    shared_processors = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso", utc=True),
        structlog.processors.StackInfoRenderer(),
    ]

    if config.json_output:
        console_renderer = structlog.processors.JSONRenderer()
    else:
        console_renderer = structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(_LEVELS[config.level])
    console_handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            processor=console_renderer,
            foreign_pre_chain=shared_processors,
        )
    )
    logging.root.addHandler(console_handler)

    if config.file:
        file_path = Path(config.file)
        file_path.parent.mkdir(parents=True, exist_ok=True)

        file_handler = logging.FileHandler(str(file_path), encoding="utf-8")
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(
            structlog.stdlib.ProcessorFormatter(
                processor=structlog.processors.JSONRenderer(),
                foreign_pre_chain=shared_processors,
            )
        )
        logging.root.addHandler(file_handler)

    structlog.configure(
        processors=shared_processors
        + [
            structlog.processors.format_exc_info,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=False,
    )


def get_logger(name: str) -> structlog.BoundLogger:
    """Get a structured logger (usually get_logger(__name__))."""
    return structlog.get_logger(name)
