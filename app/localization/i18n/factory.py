"""Factory functions for assembling the translation runtime."""

from pathlib import Path
from typing import Optional

from localization.configuration import Settings, get_settings
from localization.i18n.interpolator import Interpolator
from localization.i18n.loader import BundleLoader
from localization.i18n.locale_data import BabelLocaleData, LocaleData
from localization.i18n.pluralizer import Pluralizer
from localization.i18n.resolver import KeyResolver
from localization.i18n.sources import CatalogSource, YAMLCatalogSource
from localization.i18n.store import CatalogStore
from localization.i18n.translator import Translator
from localization.logging import get_module_logger

logger = get_module_logger()

DEFAULT_CATALOG_DIR = Path(__file__).resolve().parents[1] / "locales"


def create_translator(
    settings: Optional[Settings] = None,
    source: Optional[CatalogSource] = None,
    store: Optional[CatalogStore] = None,
    locale_data: Optional[LocaleData] = None,
) -> Translator:
    """Create and wire a Translator.

    Catalogs are loaded lazily on first use; call ``Translator.preload`` to
    load some ahead of time.

    Args:
        settings: Settings to read the i18n section from (default: cached settings).
        source: Catalog source (default: YAML directory from settings, or the
            packaged locales/ directory).
        store: Catalog store to register into (default: a new store).
        locale_data: Locale data strategy (default: BabelLocaleData built from
            settings, restricted to the source's available locales).

    Returns:
        Translator: Configured translator instance

    Raises:
        ValueError: If the catalog directory does not exist

    Usage:
        # Packaged catalogs, settings from the environment
        translator = create_translator()

        # Bundled catalogs, e.g. in tests
        translator = create_translator(
            source=MappingCatalogSource({"en": {"hello": "Hello {{name}}!"}})
        )
    """
    i18n = (settings or get_settings()).i18n

    if source is None:
        source = YAMLCatalogSource(i18n.catalog_dir or DEFAULT_CATALOG_DIR)
    store = store if store is not None else CatalogStore()

    if locale_data is None:
        locale_data = BabelLocaleData(
            default_locale=i18n.default_locale,
            fallbacks=i18n.fallbacks,
            available=source.available_locales(),
        )

    loader = BundleLoader(source, store, load_timeout=i18n.load_timeout_seconds)
    translator = Translator(
        resolver=KeyResolver(loader, locale_data),
        pluralizer=Pluralizer(locale_data),
        interpolator=Interpolator(
            locale_data,
            default_locale=i18n.default_locale,
            bidi_isolation=i18n.bidi_isolation,
        ),
        store=store,
    )

    logger.info(
        "translator_created",
        source=type(source).__name__,
        default_locale=i18n.default_locale,
    )
    return translator
