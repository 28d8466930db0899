"""Structured logging framework using structlog.

This module provides centralized logging configuration with:
- ISO-8601 timestamps
- JSON rendering for structured logs (console rendering when disabled)
- Context binding support

Configuration is loaded from date_range_validation.config.settings:
- DRV_LOG_LEVEL: Set log level (DEBUG, INFO, WARNING, ERROR, CRITICAL). Default: INFO
- DRV_LOG_JSON: Render JSON lines (1, true, yes). Default: enabled

Usage:
    >>> from date_range_validation.utils.logging import get_logger
    >>> logger = get_logger(__name__)
    >>> logger.debug("date_validation.settled", state="success")
"""

import logging
import os
from typing import Any, Optional

import structlog
from structlog.types import Processor

from date_range_validation.config import get_settings

_configured = False


def _get_log_level() -> int:
    """Get log level from settings.

    Returns:
        Logging level constant (e.g., logging.INFO, logging.DEBUG)
    """
    try:
        level_name = get_settings().log_level.upper()
    except Exception:
        # Invalid settings must not prevent logging from coming up
        level_name = os.getenv("DRV_LOG_LEVEL", "INFO").upper()

    return getattr(logging, level_name, logging.INFO)


def _should_render_json() -> bool:
    try:
        return get_settings().log_json
    except Exception:
        return os.getenv("DRV_LOG_JSON", "true").lower() in ("1", "true", "yes")


def configure_logging(level: Optional[int] = None, json: Optional[bool] = None) -> None:
    """Configure stdlib logging and structlog processors.

    Safe to call repeatedly; later calls replace the earlier configuration.

    Args:
        level: Explicit log level; defaults to the configured DRV_LOG_LEVEL
        json: Explicit renderer choice; defaults to DRV_LOG_JSON
    """
    global _configured

    log_level = _get_log_level() if level is None else level
    render_json = _should_render_json() if json is None else json

    package_logger = logging.getLogger("date_range_validation")
    package_logger.setLevel(log_level)
    if not any(getattr(h, "_drv_handler", False) for h in package_logger.handlers):
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter("%(message)s"))
        handler._drv_handler = True  # type: ignore[attr-defined]
        package_logger.addHandler(handler)
    for handler in package_logger.handlers:
        handler.setLevel(log_level)

    renderer: Processor = (
        structlog.processors.JSONRenderer()
        if render_json
        else structlog.dev.ConsoleRenderer(colors=False)
    )
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
        cache_logger_on_first_use=False,
    )
    _configured = True


def get_logger(name: str) -> Any:
    """Get a structlog BoundLogger instance.

    Args:
        name: Logger name (typically __name__ of the calling module)

    Returns:
        A structlog BoundLogger configured by configure_logging()
    """
    if not _configured:
        configure_logging()
    return structlog.get_logger(name)


def bind_context(**kwargs: Any) -> Any:
    """Create a logger with bound context fields.

    Args:
        **kwargs: Context fields to bind (e.g., widget="booking_range")

    Returns:
        A BoundLogger with the specified context already bound

    Example:
        >>> logger = bind_context(widget="report_range")
        >>> logger.info("date_validation.settled", state="failure")
    """
    return get_logger("date_range_validation").bind(**kwargs)
