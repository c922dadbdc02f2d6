"""Per-call context binding for structured logging.

Binds translation request metadata (locale, key) to structlog's context
variables so every log entry emitted while a translation runs carries it.
Context variables are task-local, so concurrent translations do not see
each other's context.

Usage:
    from localization.logging import bind_locale_context

    with bind_locale_context(locale="es", key="cart.items"):
        logger.info("resolving")
"""

from contextlib import contextmanager
from typing import Any, Generator, Optional

import structlog


@contextmanager
def bind_locale_context(
    locale: Optional[str] = None,
    key: Optional[str] = None,
    **extra_context: Any,
) -> Generator[None, None, None]:
    """Bind translation context to all logs within the context manager.

    Args:
        locale: Requested locale.
        key: Dotted message key being translated.
        **extra_context: Additional key-value pairs to include in logs.

    Yields:
        None - context is bound to structlog's context vars.
    """
    context: dict[str, Any] = {}
    if locale is not None:
        context["locale"] = locale
    if key is not None:
        context["key"] = key
    context.update(extra_context)

    previous = structlog.contextvars.get_contextvars()
    structlog.contextvars.bind_contextvars(**context)
    try:
        yield
    finally:
        structlog.contextvars.unbind_contextvars(*context.keys())
        # Restore values that were shadowed by this block
        restored = {k: v for k, v in previous.items() if k in context}
        if restored:
            structlog.contextvars.bind_contextvars(**restored)


def get_bound_context() -> dict[str, Any]:
    """Return a copy of the currently bound logging context."""
    return dict(structlog.contextvars.get_contextvars())


def clear_context() -> None:
    """Clear all bound context (end of a request or test)."""
    structlog.contextvars.clear_contextvars()
