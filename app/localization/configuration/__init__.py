"""Configuration module - public API.

Centralized configuration for the translation runtime using Pydantic
BaseSettings, grouped by concern.

Exports:
    Settings: Main settings class (for testing/overrides)
    I18nSettings: Catalog loading and fallback settings
    get_settings: Cached settings provider

Example:
    ```python
    from localization.configuration import get_settings

    settings = get_settings()
    catalog_dir = settings.i18n.catalog_dir
    ```
"""

from localization.configuration.i18n import I18nSettings
from localization.configuration.settings import Settings, get_settings

__all__ = ["Settings", "I18nSettings", "get_settings"]
