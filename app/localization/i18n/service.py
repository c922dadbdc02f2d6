"""Translation service with an explicit lifecycle.

The service owns the catalog store for its lifetime. Construct it at
startup, ``await start()``, pass it to the code that translates, and
``reset()`` it between tests.

Usage:
    service = TranslationService(settings)
    await service.start()

    text = await service.translate("cart.items", "es", count=3)

    # Test teardown
    service.reset()
"""

from typing import Any, Mapping, Optional

from localization.configuration import Settings, get_settings
from localization.i18n.factory import create_translator
from localization.i18n.locale_data import Number
from localization.i18n.sources import CatalogSource
from localization.i18n.store import CatalogStore
from localization.i18n.translator import Translator
from localization.logging import get_module_logger

logger = get_module_logger()


class TranslationService:
    """Thin lifecycle wrapper around a Translator.

    Attributes:
        settings: Settings the translator is built from.
        store: Catalog store shared by everything the service builds.
    """

    def __init__(
        self,
        settings: Optional[Settings] = None,
        source: Optional[CatalogSource] = None,
        translator: Optional[Translator] = None,
    ):
        """Initialize the service.

        Args:
            settings: Settings (default: cached process settings).
            source: Optional catalog source override.
            translator: Optional pre-configured Translator. When given, its
                store is adopted and ``source`` is ignored.
        """
        self.settings = settings or get_settings()
        self._source = source
        self._translator = translator
        self.store = translator.store if translator else CatalogStore()

    @property
    def started(self) -> bool:
        return self._translator is not None

    @property
    def translator(self) -> Translator:
        """The running Translator.

        Raises:
            RuntimeError: If the service has not been started.
        """
        if self._translator is None:
            raise RuntimeError("TranslationService is not started")
        return self._translator

    async def start(self) -> Translator:
        """Build the translator (if needed) and preload configured locales.

        Returns:
            The running Translator.
        """
        if self._translator is None:
            self._translator = create_translator(
                settings=self.settings, source=self._source, store=self.store
            )
        preload = self.settings.i18n.preload_locales
        if preload:
            await self._translator.preload(preload)
        logger.info("translation_service_started", preloaded=preload)
        return self._translator

    async def translate(
        self,
        key: str,
        locale: str,
        *,
        count: Optional[Number] = None,
        values: Optional[Mapping[str, Any]] = None,
    ) -> str:
        """Translate a key (see ``Translator.translate``)."""
        return await self.translator.translate(key, locale, count=count, values=values)

    def reset(self) -> None:
        """Drop all loaded catalogs; the next translation reloads them."""
        self.store.reset()
        logger.info("translation_service_reset")
