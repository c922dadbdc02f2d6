"""Key resolution across a locale's fallback chain."""

from dataclasses import dataclass
from typing import List

from localization.i18n.errors import KeyNotFoundError
from localization.i18n.loader import BundleLoader
from localization.i18n.locale_data import LocaleData
from localization.i18n.models import Message, split_key
from localization.logging import get_module_logger

logger = get_module_logger()


@dataclass(frozen=True)
class Resolution:
    """Outcome of resolving a key.

    Attributes:
        key: Dotted key requested.
        requested_locale: Locale the caller asked for.
        locale: Locale whose catalog supplied the message.
        value: Leaf or Plural found at the key.
    """

    key: str
    requested_locale: str
    locale: str
    value: Message

    @property
    def used_fallback(self) -> bool:
        return self.locale != self.requested_locale


class KeyResolver:
    """Resolves dotted keys to messages, walking the fallback chain.

    The first locale in the chain whose catalog holds a message at the key
    wins; partial paths are never merged across locales. Catalogs are
    loaded on demand; load errors propagate to the caller.
    """

    def __init__(self, loader: BundleLoader, locale_data: LocaleData):
        self.loader = loader
        self.locale_data = locale_data

    async def resolve(self, key: str, locale: str) -> Resolution:
        """Resolve a key for a locale.

        Args:
            key: Dotted key path.
            locale: Requested locale.

        Returns:
            Resolution naming the locale that supplied the message.

        Raises:
            KeyNotFoundError: If no locale in the chain has the key.
            ValueError: If the key is malformed.
            BundleLoadError: If a catalog in the chain failed to load.
        """
        split_key(key)
        attempted: List[str] = []

        for candidate in self.locale_data.fallback_chain(locale):
            attempted.append(candidate)
            catalog = await self.loader.ensure_loaded(candidate)
            value = catalog.lookup(key)
            if value is None:
                continue

            if candidate != locale:
                logger.info(
                    "used_fallback_translation",
                    key=key,
                    requested_locale=locale,
                    fallback_locale=candidate,
                )
            return Resolution(
                key=key, requested_locale=locale, locale=candidate, value=value
            )

        logger.error("translation_not_found", key=key, locale=locale, chain=attempted)
        raise KeyNotFoundError(key, attempted)
