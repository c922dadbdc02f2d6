"""structlog processors used by the runtime's logging pipeline.

Usage:
    from localization.logging.formatters import add_runtime_info, truncate_long_values
"""

from typing import Any


def add_runtime_info(app_name: str, environment: str):
    """Create a processor that stamps every entry with app and environment names.

    Args:
        app_name: Name of the application embedding the runtime.
        environment: Deployment environment (e.g., "production", "development").

    Returns:
        A structlog processor function.
    """

    def processor(
        logger: Any, method_name: str, event_dict: dict[str, Any]
    ) -> dict[str, Any]:
        event_dict.setdefault("app_name", app_name)
        event_dict.setdefault("environment", environment)
        return event_dict

    return processor


def truncate_long_values(max_length: int = 300):
    """Create a processor that shortens long string values.

    Message templates and interpolated values end up in log entries;
    a catalog with a long paragraph should not flood the log.

    Args:
        max_length: Maximum string length before truncation.

    Returns:
        A structlog processor function.
    """

    def processor(
        logger: Any, method_name: str, event_dict: dict[str, Any]
    ) -> dict[str, Any]:
        for key, value in event_dict.items():
            if key == "event":
                continue
            if isinstance(value, str) and len(value) > max_length:
                event_dict[key] = (
                    value[:max_length] + f"...[truncated, {len(value)} chars total]"
                )
        return event_dict

    return processor
