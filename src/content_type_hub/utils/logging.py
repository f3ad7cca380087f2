"""Structured logging framework using structlog.

This module provides centralized logging configuration with:
- ISO-8601 timestamps
- JSON (default) or console rendering
- Context binding support
- Dual output (stdout + optional file logging)

Configuration is loaded from content_type_hub.config.settings:
- LOG_LEVEL: Set log level (DEBUG, INFO, WARNING, ERROR, CRITICAL). Default: INFO
- CTH_LOG_FORMAT: json or console. Default: json
- CTH_LOG_TO_FILE: Enable file logging. Default: disabled
- CTH_LOG_FILE_DIR: Directory for log files. Default: logs/

Usage:
    >>> from content_type_hub.utils.logging import get_logger
    >>> logger = get_logger(__name__)
    >>> logger.info("content_type.registered", content_type="book")
"""

import logging
from datetime import datetime
from logging.handlers import TimedRotatingFileHandler
from pathlib import Path
from typing import Any

import structlog
from structlog.types import Processor

from content_type_hub.config.settings import get_settings


def _get_log_level(level_name: str) -> int:
    return getattr(logging, level_name.upper(), logging.INFO)


def _get_log_file_path(log_dir: str) -> Path:
    """Get the log file path with date-based naming."""
    directory = Path(log_dir)
    directory.mkdir(parents=True, exist_ok=True)

    # Format: content-type-hub-YYYYMMDD.log
    date_str = datetime.now().strftime("%Y%m%d")
    return directory / f"content-type-hub-{date_str}.log"


def _configure_structlog() -> None:
    """Configure stdlib logging handlers and the structlog processor chain."""
    settings = get_settings()
    level = _get_log_level(settings.LOG_LEVEL)

    logging.basicConfig(format="%(message)s", level=level, handlers=[])

    stdout_handler = logging.StreamHandler()
    stdout_handler.setLevel(level)
    logging.root.addHandler(stdout_handler)

    if settings.log_to_file:
        file_handler = TimedRotatingFileHandler(
            filename=str(_get_log_file_path(settings.log_file_dir)),
            when="midnight",
            interval=1,
            backupCount=30,
            encoding="utf-8",
        )
        file_handler.setLevel(level)
        logging.root.addHandler(file_handler)

    renderer: Processor
    if settings.log_format == "console":
        renderer = structlog.dev.ConsoleRenderer()
    else:
        renderer = structlog.processors.JSONRenderer()

    processors: list[Processor] = [
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        renderer,
    ]

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


# Configure structlog on module import
_configure_structlog()


def get_logger(name: str) -> Any:
    """Get a structlog BoundLogger instance.

    Args:
        name: Logger name (typically __name__ of the calling module)
    """
    return structlog.get_logger(name)


def bind_context(**kwargs: Any) -> Any:
    """Create a logger with bound context fields.

    Example:
        >>> logger = bind_context(content_type="book")
        >>> logger.info("content_type.registered")
    """
    return structlog.get_logger().bind(**kwargs)
