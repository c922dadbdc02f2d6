"""Structured logging for the translation runtime (structlog).

Public API:
    - configure_logging(): Initialize logging
    - get_module_logger(): Get a logger for the calling module
    - bind_locale_context(): Context manager for per-translation log context
    - get_bound_context(): Inspect the bound context
    - clear_context(): Clear all bound context
"""

from localization.logging.context import (
    bind_locale_context,
    clear_context,
    get_bound_context,
)
from localization.logging.formatters import add_runtime_info, truncate_long_values
from localization.logging.setup import configure_logging, get_module_logger

__all__ = [
    "configure_logging",
    "get_module_logger",
    "bind_locale_context",
    "get_bound_context",
    "clear_context",
    "add_runtime_info",
    "truncate_long_values",
]
