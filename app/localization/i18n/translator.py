"""Translation facade: resolve, pluralize, interpolate.

Each ``translate()`` call moves through the phases

    IDLE -> RESOLVING -> PLURALIZING (when a plural message resolved)
         -> INTERPOLATING -> DONE

or fails from any phase. A failing call raises the underlying
``TranslationError`` with ``phase`` set to where it failed; nothing is
retried here (the BundleLoader retries a failed load on the next call).
"""

from enum import Enum
from typing import Any, Dict, Iterable, List, Mapping, Optional

from localization.i18n.errors import KeyNotFoundError, TranslationError
from localization.i18n.interpolator import Interpolator
from localization.i18n.locale_data import LocaleData, Number
from localization.i18n.models import Plural
from localization.i18n.pluralizer import Pluralizer
from localization.i18n.resolver import KeyResolver
from localization.i18n.store import CatalogStore
from localization.logging import bind_locale_context, get_module_logger

logger = get_module_logger()


class TranslationPhase(str, Enum):
    """Phases of a single translation."""

    IDLE = "idle"
    RESOLVING = "resolving"
    PLURALIZING = "pluralizing"
    INTERPOLATING = "interpolating"
    DONE = "done"
    FAILED = "failed"


class Translator:
    """Public entry point composing resolver, pluralizer and interpolator.

    Attributes:
        resolver: KeyResolver (owns the loader and locale data).
        pluralizer: Pluralizer for plural messages.
        interpolator: Interpolator for placeholders.
        store: CatalogStore the loader registers into.
    """

    def __init__(
        self,
        resolver: KeyResolver,
        pluralizer: Pluralizer,
        interpolator: Interpolator,
        store: CatalogStore,
    ):
        self.resolver = resolver
        self.pluralizer = pluralizer
        self.interpolator = interpolator
        self.store = store

    @property
    def locale_data(self) -> LocaleData:
        return self.resolver.locale_data

    async def translate(
        self,
        key: str,
        locale: str,
        *,
        count: Optional[Number] = None,
        values: Optional[Mapping[str, Any]] = None,
    ) -> str:
        """Translate a key.

        Args:
            key: Dotted key (e.g., "cart.items").
            locale: Requested locale.
            count: Count selecting a plural variant; also available to the
                template as ``{{count}}`` unless ``values`` supplies one.
            values: Placeholder values (str, numbers, dates).

        Returns:
            The formatted message.

        Raises:
            TranslationError: Any error kind, with ``phase`` set.
        """
        phase = TranslationPhase.IDLE
        with bind_locale_context(locale=locale, key=key):
            try:
                phase = TranslationPhase.RESOLVING
                resolution = await self.resolver.resolve(key, locale)

                if isinstance(resolution.value, Plural):
                    phase = TranslationPhase.PLURALIZING
                template = self.pluralizer.select(
                    resolution.value, count, resolution.locale, key
                )

                phase = TranslationPhase.INTERPOLATING
                params: Dict[str, Any] = dict(values or {})
                if count is not None:
                    params.setdefault("count", count)
                text = self.interpolator.interpolate(
                    template, params, resolution.locale, key
                )
            except TranslationError as e:
                e.phase = phase.value
                logger.warning(
                    "translation_failed",
                    phase=phase.value,
                    error_type=type(e).__name__,
                    error=str(e),
                )
                raise

            logger.debug(
                "translation_done",
                phase=TranslationPhase.DONE.value,
                resolved_locale=resolution.locale,
            )
            return text

    async def has_message(self, key: str, locale: str) -> bool:
        """Check whether a key resolves for a locale (fallbacks included).

        Load errors propagate; only a missing key yields False.
        """
        try:
            await self.resolver.resolve(key, locale)
        except KeyNotFoundError:
            return False
        return True

    async def preload(self, locales: Iterable[str]) -> None:
        """Load catalogs ahead of the first translation."""
        locales = list(locales)
        await self.resolver.loader.preload(locales)
        logger.info("preloaded_locales", locales=locales)

    def direction(self, locale: str) -> str:
        """Text direction ("ltr" or "rtl") of a locale."""
        return self.locale_data.text_direction(locale)

    def loaded_locales(self) -> List[str]:
        return self.store.locales()
