"""Translation runtime settings."""

from pathlib import Path
from typing import Dict, List, Optional

from pydantic import Field, field_validator

from localization.configuration.base import RuntimeSettings


class I18nSettings(RuntimeSettings):
    """Catalog loading and locale fallback configuration.

    Environment Variables:
        I18N_DEFAULT_LOCALE: Locale every fallback chain terminates in (default: en)
        I18N_CATALOG_DIR: Directory of YAML/JSON catalogs (default: packaged locales/)
        I18N_FALLBACKS: JSON dict of locale -> list of fallback locales
        I18N_PRELOAD_LOCALES: JSON list of locales loaded at service start
        I18N_LOAD_TIMEOUT_SECONDS: Per-caller wait limit for a bundle load
        I18N_BIDI_ISOLATION: Wrap interpolated values in Unicode isolates for RTL locales

    Example:
        ```python
        from localization.configuration import get_settings

        settings = get_settings()
        default_locale = settings.i18n.default_locale
        chain_overrides = settings.i18n.fallbacks
        ```
    """

    default_locale: str = Field(
        default="en",
        alias="I18N_DEFAULT_LOCALE",
        description="Locale every fallback chain terminates in",
    )
    catalog_dir: Optional[Path] = Field(
        default=None,
        alias="I18N_CATALOG_DIR",
        description="Directory containing <locale>.yml or <domain>.<locale>.yml files",
    )
    fallbacks: Dict[str, List[str]] = Field(
        default_factory=dict,
        alias="I18N_FALLBACKS",
        description="Explicit fallback locales per locale, tried before the default",
    )
    preload_locales: List[str] = Field(
        default_factory=list,
        alias="I18N_PRELOAD_LOCALES",
        description="Locales loaded eagerly when the translation service starts",
    )
    load_timeout_seconds: Optional[float] = Field(
        default=None,
        alias="I18N_LOAD_TIMEOUT_SECONDS",
        description="Seconds a caller waits for a bundle load (None: no limit)",
    )
    bidi_isolation: bool = Field(
        default=False,
        alias="I18N_BIDI_ISOLATION",
        description="Isolate interpolated values with FSI/PDI in right-to-left locales",
    )

    @field_validator("default_locale")
    @classmethod
    def validate_default_locale(cls, v: str) -> str:
        """Reject an empty default locale."""
        v = v.strip()
        if not v:
            raise ValueError("I18N_DEFAULT_LOCALE must not be empty")
        return v

    @field_validator("load_timeout_seconds")
    @classmethod
    def validate_load_timeout(cls, v: Optional[float]) -> Optional[float]:
        """Timeouts must be positive when set."""
        if v is not None and v <= 0:
            raise ValueError("I18N_LOAD_TIMEOUT_SECONDS must be positive")
        return v
