"""Structlog configuration and logger setup.

Configures structlog with callsite details, exception formatting and
environment-aware rendering (console in development, JSON in production).

Usage:
    from localization.logging import configure_logging, get_module_logger

    # Configure logging at startup
    configure_logging()

    # Get a logger for your module
    logger = get_module_logger()
    logger.info("event_name", key="value")
"""

import inspect
import logging
import sys
from typing import Any, List, Optional

import structlog
from structlog.stdlib import BoundLogger

from localization.configuration import Settings, get_settings
from localization.logging.formatters import add_runtime_info, truncate_long_values


def _is_test_environment() -> bool:
    """Detect if running in a test environment.

    Returns:
        True if pytest is in sys.modules, False otherwise
    """
    return "pytest" in sys.modules


def configure_logging(
    settings: Optional[Settings] = None,
    log_level: Optional[str] = None,
    is_production: Optional[bool] = None,
    extra_processors: Optional[List[Any]] = None,
) -> BoundLogger:
    """Configure structured logging.

    Args:
        settings: Settings to read LOG_LEVEL, APP_NAME and ENVIRONMENT from.
            Defaults to the cached process settings.
        log_level: Optional override for the log level.
        is_production: Optional override for production mode. Controls JSON
            vs console output.
        extra_processors: Additional processors inserted before rendering.

    Returns:
        Configured logger instance
    """
    # Suppress all logging during tests
    if _is_test_environment():
        logging.root.setLevel(logging.CRITICAL + 1)
        structlog.configure(
            processors=[
                structlog.contextvars.merge_contextvars,
                structlog.stdlib.add_log_level,
                structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
            ],
            logger_factory=structlog.stdlib.LoggerFactory(),
            wrapper_class=structlog.stdlib.BoundLogger,
            cache_logger_on_first_use=True,
        )
        logging.basicConfig(
            format="%(message)s",
            level=logging.CRITICAL + 1,
            force=True,
        )
        return structlog.stdlib.get_logger()

    settings = settings or get_settings()
    prod_mode = is_production if is_production is not None else settings.is_production

    processors: List[Any] = [
        # Task-local context (locale, key)
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.CallsiteParameterAdder(
            parameters=[
                structlog.processors.CallsiteParameter.FILENAME,
                structlog.processors.CallsiteParameter.LINENO,
                structlog.processors.CallsiteParameter.FUNC_NAME,
            ]
        ),
        add_runtime_info(settings.APP_NAME, settings.ENVIRONMENT),
        truncate_long_values(),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
    ]
    processors.extend(extra_processors or [])

    if prod_mode:
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer())

    structlog.configure(
        processors=processors,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    effective_log_level = log_level or settings.LOG_LEVEL
    logging.basicConfig(
        format="%(message)s",
        level=getattr(logging, effective_log_level.upper(), logging.INFO),
    )

    return structlog.stdlib.get_logger()


def get_module_logger() -> BoundLogger:
    """Get a logger for the calling module with full path context.

    Binds ``component`` (last module path segment) and ``module_path``.

    Returns:
        Logger instance with module context

    Example:
        # In localization/i18n/loader.py
        logger = get_module_logger()
        # logger has context: {"component": "loader", "module_path": "localization.i18n.loader"}
    """
    # Loggers stay lazy proxies so configuration applied after import still takes effect
    current_frame = inspect.currentframe()
    if current_frame is None:
        return structlog.stdlib.get_logger()

    frame = current_frame.f_back
    if frame is None:
        return structlog.stdlib.get_logger()

    module = inspect.getmodule(frame)
    if module:
        module_name = module.__name__
        return structlog.stdlib.get_logger(
            component=module_name.split(".")[-1],
            module_path=module_name,
        )

    return structlog.stdlib.get_logger(component="unknown")
