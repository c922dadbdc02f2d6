"""Test data factories for i18n system testing.

Provides deterministic builders for:
- raw catalog data
- parsed Catalog instances
- Settings with an i18n section
- fully wired Translator instances over in-memory catalogs
"""

from typing import Any, Dict, Mapping, Optional, Sequence

from localization.configuration import I18nSettings, Settings
from localization.i18n import (
    BabelLocaleData,
    Catalog,
    CatalogStore,
    MappingCatalogSource,
    Translator,
    create_translator,
)


def make_raw_catalogs() -> Dict[str, Dict[str, Any]]:
    """Raw catalogs for "en", "es" and "ar".

    "es" deliberately lacks some keys present in "en" to exercise fallback.
    """
    return {
        "en": {
            "common": {
                "greeting": "Hello {{name}}!",
                "welcome": "Welcome back",
                "farewell": "Goodbye",
            },
            "items": {"one": "{{count}} item", "other": "{{count}} items"},
            "files": {"one": "One file"},
            "inbox": {
                "unread_one": "{{count}} unread message",
                "unread_other": "{{count}} unread messages",
            },
        },
        "es": {
            "common": {
                "greeting": "¡Hola {{name}}!",
                "welcome": "Bienvenido de nuevo",
            },
            "items": {"one": "{{count}} artículo", "other": "{{count}} artículos"},
        },
        "ar": {
            "common": {"greeting": "مرحبا {{name}}!"},
            "items": {
                "zero": "لا توجد عناصر",
                "one": "عنصر واحد",
                "two": "عنصران",
                "few": "{{count}} عناصر",
                "many": "{{count}} عنصرًا",
                "other": "{{count}} عنصر",
            },
        },
    }


def make_catalog(
    locale: str = "en",
    data: Optional[Mapping[str, Any]] = None,
) -> Catalog:
    """Parse a Catalog from raw data (default: the "en" raw catalog)."""
    if data is None:
        data = make_raw_catalogs()[locale]
    return Catalog.from_mapping(locale, data)


def make_settings(
    default_locale: str = "en",
    fallbacks: Optional[Mapping[str, Sequence[str]]] = None,
    **i18n_overrides: Any,
) -> Settings:
    """Create Settings with an explicit i18n section."""
    i18n = I18nSettings(
        default_locale=default_locale,
        fallbacks={k: list(v) for k, v in (fallbacks or {}).items()},
        **i18n_overrides,
    )
    return Settings(i18n=i18n)


def make_translator(
    catalogs: Optional[Mapping[str, Mapping[str, Any]]] = None,
    default_locale: str = "en",
    fallbacks: Optional[Mapping[str, Sequence[str]]] = None,
    **i18n_overrides: Any,
) -> Translator:
    """Create a Translator over in-memory catalogs.

    The locale data is not restricted to available locales, so the chain
    of every request is exactly: locale, fallbacks, language, default.
    """
    source = MappingCatalogSource(catalogs if catalogs is not None else make_raw_catalogs())
    settings = make_settings(default_locale, fallbacks, **i18n_overrides)
    return create_translator(
        settings=settings,
        source=source,
        store=CatalogStore(),
        locale_data=BabelLocaleData(default_locale, fallbacks),
    )
